from pathlib import Path

from statakit.core.config.settings import settings
from statakit.core.common.errors import (
    AlreadyExistsError, AutomationDispatchError, CleanupFailure, ExecutionTimeout, StataKitError,
)


def test_default_dataset_roots_are_ordered_and_overlapping():
    roots = settings.dataset_roots()
    documents = settings.HOME_DIR / "Documents"

    assert roots[0] == documents / "Stata"
    assert documents in roots
    # The nested root comes first so its files are seen first
    assert roots.index(documents / "Stata") < roots.index(documents)
    assert Path("/Applications/Stata/ado/base") in roots


def test_defaults():
    assert settings.DATASET_EXTENSION == ".dta"
    assert settings.DO_FILE_EXTENSION == ".do"
    assert settings.RUN_TIMEOUT_SECONDS > 0
    assert settings.LAUNCH_DELAY_SECONDS >= 0


def test_error_taxonomy_maps_onto_builtins():
    assert issubclass(AlreadyExistsError, FileExistsError)
    assert issubclass(AutomationDispatchError, RuntimeError)
    assert issubclass(ExecutionTimeout, TimeoutError)
    assert issubclass(CleanupFailure, OSError)
    for error in (AlreadyExistsError, AutomationDispatchError, ExecutionTimeout, CleanupFailure):
        assert issubclass(error, StataKitError)

    assert ExecutionTimeout("late", partial_output="half").partial_output == "half"
