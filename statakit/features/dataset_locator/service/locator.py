import locale
import logging
from typing import Dict, Iterator, List, Sequence

from ..domain.interfaces import IDatasetWalker
from ..domain.models import DatasetRecord, ScanRequest
from ..data.dataset_walker import LocalDatasetWalker

logger = logging.getLogger(__name__)


def _name_sort_key(record: DatasetRecord):
    # Case-folded collation first keeps "A.dta" and "a.dta" adjacent,
    # the raw name breaks the tie deterministically.
    return (locale.strxfrm(record.name.casefold()), record.name)


class DatasetLocator:
    """
    Finds dataset files under a set of roots.
    Read-only, synchronous, and never fails: the worst outcome is an empty list.
    """

    def __init__(self, walker: IDatasetWalker = None):
        self.walker = walker or LocalDatasetWalker()

    def iter_datasets(self, request: ScanRequest) -> Iterator[DatasetRecord]:
        """
        Streams records as they are found, root by root.
        No de-duplication or sorting: use scan() for the final inventory.
        """
        for root in request.roots:
            yield from self.walker.walk(root, request.extension, request.skip_hidden)

    def scan(self, request: ScanRequest) -> List[DatasetRecord]:
        logger.info(f"Scanning {len(request.roots)} roots for *{request.extension} files")

        # 1. Collect, keeping the first record seen for each path
        unique: Dict[str, DatasetRecord] = {}
        duplicates = 0
        for record in self.iter_datasets(request):
            if record.path in unique:
                duplicates += 1
                continue
            unique[record.path] = record

        # 2. Sort by name (stable, locale-aware)
        records = sorted(unique.values(), key=_name_sort_key)

        logger.info(f"Scan complete. Found {len(records)} datasets ({duplicates} duplicates collapsed)")
        return records


def group_by_directory(records: Sequence[DatasetRecord]) -> Dict[str, List[DatasetRecord]]:
    """
    Partitions records by resolved parent directory, for sectioned display.
    Sections appear in the order their first record appears.
    """
    groups: Dict[str, List[DatasetRecord]] = {}
    for record in records:
        groups.setdefault(record.parent_path, []).append(record)
    return groups


def filter_records(records: Sequence[DatasetRecord], text: str) -> List[DatasetRecord]:
    """Case-insensitive match on file name or containing folder name."""
    needle = (text or "").strip().lower()
    if not needle:
        return list(records)
    return [
        r for r in records
        if needle in r.name.lower() or needle in r.containing_directory.lower()
    ]
