from dataclasses import dataclass
from typing import Optional, Tuple

@dataclass(frozen=True)
class CodeRunRequest:
    """
    A block of Stata code to execute in batch mode.
    """
    code: str
    timeout_seconds: float = 30.0

    def __post_init__(self):
        if not self.code.strip():
            raise ValueError("No Stata code to run.")
        if self.timeout_seconds <= 0:
            raise ValueError(f"Timeout must be positive: {self.timeout_seconds}")

@dataclass
class CodeRunResult:
    """
    What Stata produced. 'output' is the session log when one was written.
    """
    code: str
    output: str
    error: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.error is None

@dataclass(frozen=True)
class QuickCommand:
    title: str
    code: str

QUICK_COMMANDS: Tuple[QuickCommand, ...] = (
    QuickCommand("Summary Statistics", "summarize"),
    QuickCommand("Data Description", "describe"),
    QuickCommand("List First 10 Observations", "list in 1/10"),
    QuickCommand("Regression", "regress y x1 x2"),
    QuickCommand("Clear Memory", "clear"),
    QuickCommand("Display Working Directory", "pwd"),
)

def append_command(code: str, snippet: str) -> str:
    """Adds a snippet on its own line below any existing code."""
    return f"{code}\n{snippet}" if code else snippet
