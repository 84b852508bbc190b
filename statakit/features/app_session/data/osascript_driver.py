import logging
import subprocess
from pathlib import Path
from typing import List, Sequence

from statakit.core.config.settings import settings
from statakit.core.common.errors import AutomationDispatchError

from ..domain.interfaces import IAutomationDriver
from ..domain.models import AutomationScript, AutomationStep, KeyCombo, Pause, TextEntry

logger = logging.getLogger(__name__)

RETURN_KEY_CODE = 36


def applescript_quote(text: str) -> str:
    """Wraps text in an AppleScript string literal."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def render_step(app_name: str, step: AutomationStep) -> List[str]:
    """Translates one automation step into AppleScript lines."""
    if isinstance(step, KeyCombo):
        using = ""
        if step.modifiers:
            using = " using {" + ", ".join(f"{m} down" for m in step.modifiers) + "}"
        return [
            f'tell application "System Events" to tell process {applescript_quote(app_name)} '
            f"to keystroke {applescript_quote(step.key)}{using}"
        ]
    if isinstance(step, TextEntry):
        lines = [f'tell application "System Events" to keystroke {applescript_quote(step.text)}']
        if step.submit:
            lines.append(f'tell application "System Events" to key code {RETURN_KEY_CODE}')
        return lines
    if isinstance(step, Pause):
        return [f"delay {step.seconds}"]
    raise TypeError(f"Unsupported automation step: {step!r}")


class OsaScriptDriver(IAutomationDriver):
    """
    Concrete implementation of IAutomationDriver for macOS.
    Each call is one blocking osascript/open process; failures become
    AutomationDispatchError and are never retried here.
    """

    def activate(self, app_name: str) -> None:
        self._run_applescript([f"tell application {applescript_quote(app_name)} to activate"])

    def launch(self, app_name: str) -> None:
        self._run([settings.OPEN_BINARY, "-a", app_name])

    def perform(self, app_name: str, script: AutomationScript) -> None:
        lines: List[str] = []
        for step in script.steps:
            lines.extend(render_step(app_name, step))
        self._run_applescript(lines)

    def open_document(self, app_name: str, path: Path) -> None:
        self._run([settings.OPEN_BINARY, "-a", app_name, str(path)])

    def _run_applescript(self, lines: Sequence[str]) -> None:
        cmd = [settings.OSASCRIPT_BINARY]
        for line in lines:
            cmd.extend(["-e", line])
        self._run(cmd)

    def _run(self, cmd: List[str]) -> None:
        logger.info(f"Dispatching automation: {' '.join(cmd)}")

        try:
            subprocess.run(
                cmd,
                check=True,
                capture_output=True,
                text=True,
                timeout=settings.AUTOMATION_TIMEOUT_SECONDS,
            )
        except subprocess.CalledProcessError as e:
            error_message = e.stderr.strip() if e.stderr else f"exit status {e.returncode}"
            logger.error(f"Automation failed. STDERR: {error_message}")
            raise AutomationDispatchError(f"Automation failed: {error_message}") from e
        except subprocess.TimeoutExpired as e:
            logger.error(f"Automation timed out after {e.timeout}s")
            raise AutomationDispatchError(f"Automation timed out after {e.timeout}s") from e
        except OSError as e:
            logger.error(f"Could not start {cmd[0]}: {e}")
            raise AutomationDispatchError(f"Could not start {cmd[0]}: {e}") from e
