from dataclasses import dataclass
from datetime import date
from pathlib import Path
from string import Template
from typing import Optional

@dataclass(frozen=True)
class DoFileTemplate:
    """
    A named do-file skeleton. '$date' in the body is filled in at render time.
    """
    name: str
    description: str
    body: str

    def render(self, today: Optional[date] = None) -> str:
        today = today or date.today()
        return Template(self.body).safe_substitute(date=today.strftime("%x"))

@dataclass(frozen=True)
class ScaffoldRequest:
    """
    Intent to create one new do-file.
    The target directory must exist; the file itself must not.
    """
    file_name: str
    directory: Path
    content: str
    extension: str = ".do"

    def __post_init__(self):
        if not self.file_name.strip():
            raise ValueError("Please enter a file name.")
        if Path(self.file_name).name != self.file_name:
            raise ValueError(f"File name cannot contain a path: {self.file_name}")
        if not self.directory.exists():
            raise FileNotFoundError(f"Save location not found: {self.directory}")
        if not self.directory.is_dir():
            raise NotADirectoryError(f"Save location is not a directory: {self.directory}")

    @property
    def target_path(self) -> Path:
        name = self.file_name.strip()
        if not name.endswith(self.extension):
            name = f"{name}{self.extension}"
        return self.directory / name
