from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator
from .models import DatasetRecord

class IDatasetWalker(ABC):
    """
    Contract for traversing one scan root.
    Abstracts os.scandir vs any other listing strategy.
    """
    @abstractmethod
    def walk(self, root: Path, extension: str, skip_hidden: bool) -> Iterator[DatasetRecord]:
        """
        Yields a record for every matching file under root, one by one.
        Must never raise for missing roots, unreadable directories or
        entries that vanish mid-scan: those are skipped.
        """
        pass
