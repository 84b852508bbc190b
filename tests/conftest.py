# File: tests/conftest.py

import os
import sys
import logging
from typing import List

import pytest

# 1. Add project root to path
sys.path.append(os.getcwd())

from statakit.core.common.errors import AutomationDispatchError
from statakit.features.app_session.domain.interfaces import IAutomationDriver, IProcessProbe


class FakeProcessProbe(IProcessProbe):
    """
    Answers is_running() from a script of answers; the last answer repeats.
    """

    def __init__(self, *answers: bool):
        self.answers = list(answers) or [False]
        self.calls: List[str] = []

    def is_running(self, process_name: str) -> bool:
        self.calls.append(process_name)
        if len(self.answers) > 1:
            return self.answers.pop(0)
        return self.answers[0]


class FakeAutomationDriver(IAutomationDriver):
    """
    Records every call in order. 'fail_on' names a method that raises.
    """

    def __init__(self, fail_on: str = None):
        self.fail_on = fail_on
        self.calls: List[tuple] = []

    def _record(self, name, *args):
        self.calls.append((name,) + args)
        if self.fail_on == name:
            raise AutomationDispatchError(f"{name} refused")

    def activate(self, app_name):
        self._record("activate", app_name)

    def launch(self, app_name):
        self._record("launch", app_name)

    def perform(self, app_name, script):
        self._record("perform", app_name, script)

    def open_document(self, app_name, path):
        self._record("open_document", app_name, path)

    def names(self) -> List[str]:
        return [c[0] for c in self.calls]


@pytest.fixture(scope="session", autouse=True)
def global_setup():
    """Runs once per test session. Keeps library logs visible on failure only."""
    logging.getLogger("statakit").setLevel(logging.DEBUG)
    yield


@pytest.fixture
def dataset_tree(tmp_path):
    """
    Creates:
    /data
      auto.dta
      notes.txt
      survey/
        Wave1.DTA
        wave2.dta
      .hidden/
        secret.dta
    """
    root = tmp_path / "data"
    root.mkdir()
    (root / "auto.dta").write_bytes(b"x" * 2048)
    (root / "notes.txt").write_text("not a dataset")

    survey = root / "survey"
    survey.mkdir()
    (survey / "Wave1.DTA").write_bytes(b"w1")
    (survey / "wave2.dta").write_bytes(b"")

    hidden = root / ".hidden"
    hidden.mkdir()
    (hidden / "secret.dta").write_bytes(b"hidden")

    return root


@pytest.fixture
def fake_driver():
    return FakeAutomationDriver()


@pytest.fixture
def recorded_sleeps():
    return []


@pytest.fixture
def fake_sleep(recorded_sleeps):
    return recorded_sleeps.append


@pytest.fixture
def stub_open_binary(tmp_path, monkeypatch):
    """
    Points settings.OPEN_BINARY at a script that logs its arguments,
    so 'open -a Stata file' can be asserted on any OS.
    """
    from statakit.core.config.settings import settings

    args_log = tmp_path / "open_args.txt"
    script = tmp_path / "fake_open"
    script.write_text(f"#!/bin/sh\nprintf '%s\\n' \"$*\" >> \"{args_log}\"\n")
    script.chmod(0o755)
    monkeypatch.setattr(settings, "OPEN_BINARY", str(script))
    return args_log


@pytest.fixture
def probe_factory():
    return FakeProcessProbe


@pytest.fixture
def driver_factory():
    return FakeAutomationDriver
