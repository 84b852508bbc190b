from abc import ABC, abstractmethod
from typing import List

class IRecentDocumentsSource(ABC):
    """
    Contract for wherever Stata remembers its recently opened documents.
    """
    @abstractmethod
    def read_paths(self) -> List[str]:
        """
        Returns recorded document paths, most recent first.
        Raises OSError / ValueError if the store cannot be read.
        """
        pass
