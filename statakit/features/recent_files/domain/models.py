from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True)
class RecentDoFile:
    """
    A do-file Stata lists as recently opened.
    """
    path: Path

    @property
    def name(self) -> str:
        return self.path.name

    def is_available(self) -> bool:
        return self.path.exists()
