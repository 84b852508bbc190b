import logging
from typing import List, Optional, Sequence

from statakit.core.config.settings import settings

from ..domain.models import DatasetRecord, ScanRequest
from .locator import DatasetLocator

logger = logging.getLogger(__name__)


def find_datasets(roots: Optional[Sequence] = None, extension: Optional[str] = None) -> List[DatasetRecord]:
    """
    Public Service API: inventory of dataset files.

    Args:
        roots: Folders to search. Defaults to settings.dataset_roots().
        extension: Target extension. Defaults to settings.DATASET_EXTENSION.

    Returns:
        De-duplicated records sorted by name. Empty when nothing was found,
        which callers should render as "no results", not as an error.
    """
    request = ScanRequest.build(
        roots=roots if roots is not None else settings.dataset_roots(),
        extension=extension or settings.DATASET_EXTENSION,
    )

    records = DatasetLocator().scan(request)

    if not records:
        logger.info(f"No {request.extension} files found in {len(request.roots)} folders")

    return records
