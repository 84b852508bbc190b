from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Sequence, Tuple

SIZE_UNITS = ("B", "KB", "MB", "GB")


def format_file_size(size_bytes: int) -> str:
    """
    Human readable size using 1024-based units, capped at GB.
    0 -> "0 B", 1536 -> "1.5 KB", 1024 -> "1 KB".
    """
    if size_bytes < 0:
        raise ValueError(f"Size cannot be negative: {size_bytes}")
    if size_bytes == 0:
        return "0 B"

    # Largest unit that keeps the scaled value >= 1
    unit_index = 0
    while unit_index < len(SIZE_UNITS) - 1 and size_bytes >= 1024 ** (unit_index + 1):
        unit_index += 1

    text = f"{size_bytes / 1024 ** unit_index:.1f}"
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text} {SIZE_UNITS[unit_index]}"


def stata_use_command(path) -> str:
    """The Stata command that loads a dataset, e.g. use "/data/auto.dta", clear"""
    escaped = str(path).replace('"', '\\"')
    return f'use "{escaped}", clear'


def normalize_extension(extension: str) -> str:
    """'DTA', '.dta' and 'dta' all become '.dta'."""
    ext = extension.strip().lower()
    if not ext or ext == ".":
        raise ValueError("Extension cannot be empty.")
    return ext if ext.startswith(".") else f".{ext}"


@dataclass(frozen=True)
class DatasetRecord:
    """
    One discovered dataset file. Built fresh on every scan, never mutated.
    'path' is the unique key within a scan result.
    """
    name: str
    path: str
    size_bytes: int
    modified_at: datetime
    containing_directory: str

    def __post_init__(self):
        if not self.name:
            raise ValueError("Dataset name cannot be empty.")
        if not Path(self.path).is_absolute():
            raise ValueError(f"Dataset path must be absolute: {self.path}")
        if self.size_bytes < 0:
            raise ValueError(f"Size cannot be negative: {self.size_bytes}")

    @property
    def size_display(self) -> str:
        return format_file_size(self.size_bytes)

    @property
    def modified_display(self) -> str:
        return self.modified_at.strftime("%x")

    @property
    def parent_path(self) -> str:
        return str(Path(self.path).parent.resolve())

    @property
    def use_command(self) -> str:
        return stata_use_command(self.path)


@dataclass(frozen=True)
class ScanRequest:
    """
    Ordered roots to search plus the target extension.
    Missing roots are allowed here; the scan simply skips them.
    """
    roots: Tuple[Path, ...]
    extension: str
    skip_hidden: bool = True

    @classmethod
    def build(cls, roots: Sequence, extension: str, skip_hidden: bool = True) -> "ScanRequest":
        return cls(
            roots=tuple(Path(r).expanduser().absolute() for r in roots),
            extension=normalize_extension(extension),
            skip_hidden=skip_hidden,
        )
