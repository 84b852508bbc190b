import os
import logging
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Set, Tuple
from ..domain.interfaces import IDatasetWalker
from ..domain.models import DatasetRecord

logger = logging.getLogger(__name__)


class LocalDatasetWalker(IDatasetWalker):
    """
    Concrete implementation using os.scandir and an explicit directory stack.
    Every OSError is absorbed at the entry or directory where it happens,
    so one unreadable folder never aborts the rest of the scan.
    """

    def walk(self, root: Path, extension: str, skip_hidden: bool) -> Iterator[DatasetRecord]:
        if not root.is_dir():
            logger.debug(f"Skipping missing scan root: {root}")
            return

        # Stack of directory iterators: depth-first, same order as a recursive walk
        stack: List[Iterator[os.DirEntry]] = [self._list_dir(root)]
        # (st_dev, st_ino) of every directory entered, so symlink loops end
        visited: Set[Tuple[int, int]] = set()
        self._mark_visited(root, visited)

        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            try:
                if entry.is_dir():
                    # 1. Hidden folders are never descended into
                    if skip_hidden and entry.name.startswith("."):
                        continue
                    if not self._mark_visited(Path(entry.path), visited):
                        continue
                    stack.append(self._list_dir(Path(entry.path)))

                elif entry.is_file() and os.path.splitext(entry.name)[1].lower() == extension:
                    # 2. Matching file -> record (stat follows symlinks)
                    stats = entry.stat()
                    yield DatasetRecord(
                        name=entry.name,
                        path=os.path.abspath(entry.path),
                        size_bytes=stats.st_size,
                        modified_at=datetime.fromtimestamp(stats.st_mtime),
                        containing_directory=os.path.basename(os.path.dirname(os.path.abspath(entry.path))),
                    )
            except OSError as e:
                # Permission denied or deleted between listing and stat
                logger.debug(f"Skipping unreadable entry {entry.path}: {e}")
                continue

    def _list_dir(self, directory: Path) -> Iterator[os.DirEntry]:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            logger.debug(f"Skipping unreadable directory {directory}: {e}")
            return iter(())
        return iter(entries)

    def _mark_visited(self, directory: Path, visited: Set[Tuple[int, int]]) -> bool:
        """Returns False if this directory was already entered during the walk."""
        try:
            st = directory.stat()
        except OSError:
            return False
        key = (st.st_dev, st.st_ino)
        if key in visited:
            return False
        visited.add(key)
        return True
