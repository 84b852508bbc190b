# File: statakit/core/common/errors.py

from typing import Optional


class StataKitError(Exception):
    """Root of every error raised by statakit itself."""


class AlreadyExistsError(StataKitError, FileExistsError):
    """
    Raised when a scaffolded file would overwrite an existing one.
    The existing file is never touched.
    """


class AutomationDispatchError(StataKitError, RuntimeError):
    """
    The OS automation call (osascript / open) could not be dispatched.
    Surfaced to the user, never retried.
    """


class ExecutionTimeout(StataKitError, TimeoutError):
    """
    A batch-mode Stata run exceeded its wall-clock deadline.
    Carries whatever the log file held when the run was killed.
    """

    def __init__(self, message: str, partial_output: Optional[str] = None):
        super().__init__(message)
        self.partial_output = partial_output


class CleanupFailure(StataKitError, OSError):
    """
    Best-effort temp file removal failed.
    Only ever logged, never raised to callers.
    """
