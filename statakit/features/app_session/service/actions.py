from pathlib import Path
from statakit.core.config.settings import settings
from statakit.features.dataset_locator.domain.models import stata_use_command
from ..domain.models import AutomationScript, KeyCombo, Pause, TextEntry


def new_do_file() -> AutomationScript:
    return AutomationScript("create a new do-file", (KeyCombo("n"),))


def do_file_editor() -> AutomationScript:
    return AutomationScript("open the Do-file Editor", (KeyCombo("9"),))


def open_dataset(path: Path) -> AutomationScript:
    """Types a 'use' command into the Stata command window."""
    return AutomationScript(
        f"load {Path(path).name}",
        (TextEntry(stata_use_command(path)),),
    )


def describe_dataset(path: Path) -> AutomationScript:
    return AutomationScript(
        f"describe {Path(path).name}",
        (
            TextEntry(stata_use_command(path)),
            Pause(settings.KEYSTROKE_DELAY_SECONDS),
            TextEntry("describe"),
        ),
    )
