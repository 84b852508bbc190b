from abc import ABC, abstractmethod
from .models import CodeRunRequest, CodeRunResult

class IBatchExecutor(ABC):
    """
    Contract for running Stata code non-interactively.
    Abstracts the Stata binary from the service layer.
    """

    @abstractmethod
    def run(self, request: CodeRunRequest) -> CodeRunResult:
        """
        Executes the code and returns what Stata printed.

        Raises:
            ExecutionTimeout: If the run exceeds request.timeout_seconds.
                              Any partial log is attached to the exception.
        """
        pass
