import logging
import plistlib
from pathlib import Path
from typing import List
from ..domain.interfaces import IRecentDocumentsSource

logger = logging.getLogger(__name__)

RECENT_PATHS_KEY = "NSRecentDocumentPaths"

class PlistRecentDocuments(IRecentDocumentsSource):
    """
    Reads Stata's preferences plist. plistlib handles both the binary and
    the XML format, so no conversion step is needed.
    """

    def __init__(self, plist_path: Path):
        self.plist_path = plist_path

    def read_paths(self) -> List[str]:
        logger.debug(f"Reading recent documents from {self.plist_path}")
        with self.plist_path.open("rb") as f:
            data = plistlib.load(f)

        paths = data.get(RECENT_PATHS_KEY, []) if isinstance(data, dict) else []
        return [p for p in paths if isinstance(p, str)]
