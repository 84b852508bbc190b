import logging
from pathlib import Path
from statakit.core.common.errors import AlreadyExistsError
from ..domain.interfaces import IDoFileWriter

logger = logging.getLogger(__name__)

class LocalDoFileWriter(IDoFileWriter):
    """
    Writes with exclusive-create mode, so the existence check and the
    write are one filesystem operation.
    """

    def write_new(self, path: Path, content: str) -> None:
        try:
            with path.open("x", encoding="utf-8") as f:
                f.write(content)
        except FileExistsError as e:
            logger.warning(f"Refusing to overwrite existing file: {path}")
            raise AlreadyExistsError(f'A file named "{path.name}" already exists at {path.parent}') from e

        logger.info(f"Created do-file: {path}")
