import logging
from typing import Optional

from statakit.core.config.settings import settings

from ..domain.models import CodeRunRequest, CodeRunResult
from ..data.stata_batch_adapter import StataBatchAdapter

logger = logging.getLogger(__name__)


def run_stata_code(code: str, timeout_seconds: Optional[float] = None) -> CodeRunResult:
    """
    Public Service API: run a block of Stata code in batch mode.

    Args:
        code: Stata commands, passed through verbatim.
        timeout_seconds: Hard wall-clock limit. Defaults to settings.RUN_TIMEOUT_SECONDS.

    Raises:
        ValueError: If code is blank.
        ExecutionTimeout: If Stata did not finish in time (partial output attached).
    """
    request = CodeRunRequest(
        code=code,
        timeout_seconds=timeout_seconds or settings.RUN_TIMEOUT_SECONDS,
    )

    logger.info(f"Running {len(request.code.splitlines())} lines of Stata code")
    result = StataBatchAdapter().run(request)
    logger.info("Stata run finished" if result.succeeded else f"Stata run reported an error: {result.error}")
    return result
