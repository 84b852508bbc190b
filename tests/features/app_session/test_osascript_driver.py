import pytest

from statakit.core.config.settings import settings
from statakit.core.common.errors import AutomationDispatchError
from statakit.features.app_session.data.osascript_driver import (
    OsaScriptDriver, applescript_quote, render_step,
)
from statakit.features.app_session.domain.models import AutomationScript, KeyCombo, Pause, TextEntry
from statakit.features.app_session.service.api import (
    describe_dataset_in_stata, open_dataset_in_stata, open_document_in_stata,
)


def test_applescript_quote_escapes_quotes_and_backslashes():
    assert applescript_quote('say "hi"') == '"say \\"hi\\""'
    assert applescript_quote("C:\\data") == '"C:\\\\data"'


def test_render_key_combo():
    lines = render_step("StataMP", KeyCombo("n", ("command", "shift")))
    assert lines == [
        'tell application "System Events" to tell process "StataMP" '
        'to keystroke "n" using {command down, shift down}'
    ]


def test_render_text_entry_with_and_without_submit():
    assert render_step("StataMP", TextEntry("describe")) == [
        'tell application "System Events" to keystroke "describe"',
        'tell application "System Events" to key code 36',
    ]
    assert render_step("StataMP", TextEntry("x", submit=False)) == [
        'tell application "System Events" to keystroke "x"',
    ]


def test_render_pause():
    assert render_step("StataMP", Pause(0.5)) == ["delay 0.5"]


def _recording_binary(tmp_path, name, exit_code=0):
    """A stand-in executable that appends its argv to a log file and exits."""
    log = tmp_path / f"{name}.log"
    script = tmp_path / name
    script.write_text(
        "#!/bin/sh\n"
        f"for a in \"$@\"; do printf '%s\\n' \"$a\" >> \"{log}\"; done\n"
        f"exit {exit_code}\n"
    )
    script.chmod(0o755)
    return script, log


def test_perform_runs_osascript_with_one_line_per_event(tmp_path, monkeypatch):
    binary, log = _recording_binary(tmp_path, "osascript")
    monkeypatch.setattr(settings, "OSASCRIPT_BINARY", str(binary))

    script = AutomationScript("describe", (TextEntry("describe"),))
    OsaScriptDriver().perform("StataMP", script)

    args = log.read_text().splitlines()
    assert args == [
        "-e", 'tell application "System Events" to keystroke "describe"',
        "-e", 'tell application "System Events" to key code 36',
    ]


def test_failed_osascript_raises_dispatch_error(tmp_path, monkeypatch):
    binary, _ = _recording_binary(tmp_path, "osascript", exit_code=1)
    monkeypatch.setattr(settings, "OSASCRIPT_BINARY", str(binary))

    with pytest.raises(AutomationDispatchError):
        OsaScriptDriver().activate("StataMP")


def test_missing_osascript_raises_dispatch_error(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "OSASCRIPT_BINARY", str(tmp_path / "no_such_binary"))

    with pytest.raises(AutomationDispatchError):
        OsaScriptDriver().activate("StataMP")


def test_open_document_uses_open_dash_a(tmp_path, stub_open_binary):
    do_file = tmp_path / "analysis.do"
    do_file.write_text("summarize")

    open_document_in_stata(do_file)

    assert stub_open_binary.read_text().strip() == f"-a {settings.STATA_APP_NAME} {do_file}"


def test_vanished_files_are_reported_before_acting(tmp_path):
    missing = tmp_path / "gone.dta"

    with pytest.raises(FileNotFoundError, match="no longer exists"):
        open_dataset_in_stata(missing)
    with pytest.raises(FileNotFoundError):
        describe_dataset_in_stata(missing)
    with pytest.raises(FileNotFoundError):
        open_document_in_stata(tmp_path / "gone.do")
