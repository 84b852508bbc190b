import shutil
import logging
import tempfile
import subprocess
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, Tuple

from statakit.core.config.settings import settings
from statakit.core.common.errors import CleanupFailure, ExecutionTimeout

from ..domain.interfaces import IBatchExecutor
from ..domain.models import CodeRunRequest, CodeRunResult

logger = logging.getLogger(__name__)

NO_OUTPUT = "No output generated"


def build_do_file(code: str, log_path: Path) -> str:
    """Wraps user code so everything it prints lands in a plain-text log."""
    return (
        f'log using "{log_path}", replace text\n'
        f"{code}\n"
        "log close\n"
        "exit\n"
    )


class StataBatchAdapter(IBatchExecutor):
    """
    Concrete implementation of IBatchExecutor using 'stata -b do file.do'.
    Each run gets its own temp folder, removed afterwards whatever happened.
    """

    def __init__(self, binary: Optional[str] = None, temp_root: Optional[Path] = None):
        self.binary = binary or settings.STATA_BINARY
        self.temp_root = temp_root or settings.TEMP_DIR

    def run(self, request: CodeRunRequest) -> CodeRunResult:
        try:
            work_dir = Path(tempfile.mkdtemp(prefix="statakit_", dir=str(self.temp_root)))
        except OSError as e:
            logger.error(f"Could not create temp folder in {self.temp_root}: {e}")
            return CodeRunResult(code=request.code, output=NO_OUTPUT, error=f"Could not create temp folder: {e}")

        with self._workspace(work_dir) as (do_file, log_file):
            try:
                do_file.write_text(build_do_file(request.code, log_file), encoding="utf-8")
            except OSError as e:
                logger.error(f"Could not write temp do-file {do_file}: {e}")
                return CodeRunResult(code=request.code, output=NO_OUTPUT, error=f"Could not write do-file: {e}")

            # -b: batch mode, Stata also drops <stem>.log into the cwd
            cmd = [self.binary, "-b", "do", str(do_file)]
            logger.info(f"Executing Stata batch: {' '.join(cmd)}")

            try:
                completed = subprocess.run(
                    cmd,
                    cwd=str(do_file.parent),
                    capture_output=True,
                    text=True,
                    timeout=request.timeout_seconds,
                )
            except subprocess.TimeoutExpired as e:
                partial = self._read_log(log_file)
                logger.error(f"Stata batch run exceeded {request.timeout_seconds}s")
                raise ExecutionTimeout(
                    f"Stata did not finish within {request.timeout_seconds}s",
                    partial_output=partial,
                ) from e
            except OSError as e:
                logger.error(f"Could not start Stata ({self.binary}): {e}")
                return CodeRunResult(code=request.code, output=NO_OUTPUT, error=str(e))

            output = self._read_log(log_file) or completed.stdout or NO_OUTPUT

            error = None
            if completed.returncode != 0:
                error = completed.stderr.strip() or f"Stata exited with status {completed.returncode}"
                logger.error(f"Stata batch run failed: {error}")
            elif completed.stderr.strip():
                error = completed.stderr.strip()

            return CodeRunResult(code=request.code, output=output, error=error)

    @contextmanager
    def _workspace(self, work_dir: Path) -> Iterator[Tuple[Path, Path]]:
        """Yields (do_file, log_file) inside work_dir and always removes it."""
        try:
            yield work_dir / "snippet.do", work_dir / "snippet_output.log"
        finally:
            try:
                shutil.rmtree(work_dir)
            except OSError as e:
                # Best effort only: a leftover temp folder is not the caller's problem
                logger.warning(f"{CleanupFailure.__name__}: could not remove {work_dir}: {e}")

    def _read_log(self, log_file: Path) -> Optional[str]:
        if not log_file.exists():
            return None
        try:
            return log_file.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning(f"Could not read Stata log {log_file}: {e}")
            return None
