from dataclasses import dataclass, field
from typing import Optional, Tuple, Union
from statakit.core.common.enums import ActionOutcome, SessionState

VALID_MODIFIERS = {"command", "control", "option", "shift"}


@dataclass(frozen=True)
class KeyCombo:
    """A single keystroke, optionally with modifier keys held down."""
    key: str
    modifiers: Tuple[str, ...] = ("command",)

    def __post_init__(self):
        if len(self.key) != 1:
            raise ValueError(f"KeyCombo expects a single character, got: {self.key!r}")
        unknown = set(self.modifiers) - VALID_MODIFIERS
        if unknown:
            raise ValueError(f"Unknown modifiers: {sorted(unknown)}")


@dataclass(frozen=True)
class TextEntry:
    """Literal text typed into the focused window, optionally followed by Return."""
    text: str
    submit: bool = True


@dataclass(frozen=True)
class Pause:
    seconds: float

    def __post_init__(self):
        if self.seconds < 0:
            raise ValueError("Pause cannot be negative.")


AutomationStep = Union[KeyCombo, TextEntry, Pause]


@dataclass(frozen=True)
class AutomationScript:
    """
    An ordered set of UI events sent to the foregrounded application.
    This is the 'action' half of the activate-or-launch handshake.
    """
    description: str
    steps: Tuple[AutomationStep, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.steps:
            raise ValueError("An automation script needs at least one step.")


@dataclass(frozen=True)
class SessionResult:
    """
    Outcome of one ensure-running-then-act call.
    'error' is set only when outcome is FAILED.
    """
    outcome: ActionOutcome
    state_before: SessionState
    error: Optional[Exception] = None

    @property
    def succeeded(self) -> bool:
        return self.outcome != ActionOutcome.FAILED
