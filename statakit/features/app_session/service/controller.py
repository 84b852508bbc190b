import time
import logging
from threading import Lock
from typing import Callable

from statakit.core.common.enums import ActionOutcome, SessionState
from statakit.core.common.errors import AutomationDispatchError

from ..domain.interfaces import IAutomationDriver, IProcessProbe
from ..domain.models import AutomationScript, SessionResult
from ..data.osascript_driver import OsaScriptDriver
from ..data.process_probe import PsutilProcessProbe

logger = logging.getLogger(__name__)


def next_state(state: SessionState) -> SessionState:
    """
    The only transition function of the session state machine.
    NOT_RUNNING -> LAUNCHING (launch dispatched)
    LAUNCHING   -> RUNNING   (readiness delay elapsed, assumed ready)
    RUNNING     -> RUNNING
    """
    if state == SessionState.NOT_RUNNING:
        return SessionState.LAUNCHING
    return SessionState.RUNNING


class SessionController:
    """
    Activate-or-launch handshake for an external GUI application.

    The application's window focus is global, so only one automation may be
    in flight per process: every call holds a process-wide lock.
    """
    _lock = Lock()

    def __init__(self,
                 probe: IProcessProbe = None,
                 driver: IAutomationDriver = None,
                 sleep: Callable[[float], None] = time.sleep):
        self.probe = probe or PsutilProcessProbe()
        self.driver = driver or OsaScriptDriver()
        self.sleep = sleep

    def current_state(self, process_name: str) -> SessionState:
        """Fresh read of the process table, never cached."""
        if self.probe.is_running(process_name):
            return SessionState.RUNNING
        return SessionState.NOT_RUNNING

    def ensure_running_then_act(self,
                                process_name: str,
                                readiness_delay: float,
                                action: AutomationScript) -> SessionResult:
        """
        Performs 'action' against the application exactly once, launching it first if needed.

        Returns:
            SessionResult with ACTIVATED_AND_ACTED, LAUNCHED_AND_ACTED or FAILED.
            Dispatch errors are reported through the result, not raised.
        """
        with self._lock:
            state_before = self.current_state(process_name)
            logger.info(f"{process_name} is {state_before.value}; action: {action.description}")

            try:
                if state_before == SessionState.RUNNING:
                    self.driver.activate(process_name)
                    self.driver.perform(process_name, action)
                    return SessionResult(ActionOutcome.ACTIVATED_AND_ACTED, state_before)

                state = next_state(state_before)
                self.driver.launch(process_name)
                logger.info(f"{process_name} {state.value}; waiting {readiness_delay}s before acting")
                self.sleep(readiness_delay)
                state = next_state(state)
                logger.debug(f"{process_name} assumed {state.value}")

                # Known race: the grace period is a heuristic, not a readiness signal
                if not self.probe.is_running(process_name):
                    logger.warning(
                        f"{process_name} not visible after {readiness_delay}s; keystrokes may be lost"
                    )

                self.driver.perform(process_name, action)
                return SessionResult(ActionOutcome.LAUNCHED_AND_ACTED, state_before)

            except AutomationDispatchError as e:
                logger.error(f"Could not '{action.description}' in {process_name}: {e}")
                return SessionResult(ActionOutcome.FAILED, state_before, error=e)
