import logging
from pathlib import Path

from statakit.core.config.settings import settings

from ..domain.models import AutomationScript, SessionResult
from ..data.osascript_driver import OsaScriptDriver
from . import actions
from .controller import SessionController

logger = logging.getLogger(__name__)


def _act(action: AutomationScript) -> SessionResult:
    controller = SessionController()
    return controller.ensure_running_then_act(
        process_name=settings.STATA_APP_NAME,
        readiness_delay=settings.LAUNCH_DELAY_SECONDS,
        action=action,
    )


def _require_file(path: Path) -> Path:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"This file no longer exists: {path}")
    return path


def open_new_do_file() -> SessionResult:
    """Public Service API: new do-file in Stata, launching Stata if needed."""
    return _act(actions.new_do_file())


def open_do_file_editor() -> SessionResult:
    """Public Service API: bring up the Do-file Editor, launching Stata if needed."""
    return _act(actions.do_file_editor())


def open_dataset_in_stata(path) -> SessionResult:
    """
    Public Service API: load a dataset into the Stata session.

    Raises:
        FileNotFoundError: If the dataset was removed since it was listed.
    """
    return _act(actions.open_dataset(_require_file(path)))


def describe_dataset_in_stata(path) -> SessionResult:
    """Loads a dataset and runs 'describe' on it."""
    return _act(actions.describe_dataset(_require_file(path)))


def open_document_in_stata(path) -> None:
    """
    Opens a file (e.g. a do-file) with Stata through the OS.

    Raises:
        FileNotFoundError: If the file is gone.
        AutomationDispatchError: If the OS refused the request.
    """
    path = _require_file(path)
    logger.info(f"Opening {path.name} in {settings.STATA_APP_NAME}")
    OsaScriptDriver().open_document(settings.STATA_APP_NAME, path)
