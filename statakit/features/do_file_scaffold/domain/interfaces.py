from abc import ABC, abstractmethod
from pathlib import Path

class IDoFileWriter(ABC):
    @abstractmethod
    def write_new(self, path: Path, content: str) -> None:
        """
        Creates path with content. Never overwrites.

        Raises:
            AlreadyExistsError: If path already exists (left untouched).
        """
        pass
