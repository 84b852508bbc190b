import logging
import plistlib
from pathlib import Path
from typing import List, Optional

from statakit.core.config.settings import settings
from statakit.features.app_session.service.api import open_document_in_stata

from ..domain.models import RecentDoFile
from ..data.plist_reader import PlistRecentDocuments

logger = logging.getLogger(__name__)


def list_recent_do_files(plist_path: Optional[Path] = None) -> List[RecentDoFile]:
    """
    Public Service API: do-files Stata opened recently that still exist.
    An unreadable or missing preferences file yields an empty list.
    """
    source = PlistRecentDocuments(Path(plist_path) if plist_path else settings.RECENT_FILES_PLIST)

    try:
        paths = source.read_paths()
    except (OSError, plistlib.InvalidFileException, ValueError) as e:
        logger.warning(f"Could not read Stata recent files: {e}")
        return []

    files = [
        RecentDoFile(Path(p)) for p in paths
        if p.endswith(settings.DO_FILE_EXTENSION)
    ]
    available = [f for f in files if f.is_available()]

    logger.info(f"Found {len(available)} recent do-files ({len(files) - len(available)} missing)")
    return available


def open_recent_do_file(path) -> None:
    """
    Raises:
        FileNotFoundError: "This file no longer exists".
        AutomationDispatchError: If Stata could not be asked to open it.
    """
    open_document_in_stata(path)
