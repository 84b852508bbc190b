from abc import ABC, abstractmethod
from pathlib import Path
from .models import AutomationScript

class IProcessProbe(ABC):
    """
    Contract for querying the OS process table.
    """
    @abstractmethod
    def is_running(self, process_name: str) -> bool:
        """True if a process with exactly this name exists right now."""
        pass

class IAutomationDriver(ABC):
    """
    Contract for driving an external GUI application.
    Abstracts AppleScript (osascript) from the session logic.
    """

    @abstractmethod
    def activate(self, app_name: str) -> None:
        """
        Brings a running application to the foreground.

        Raises:
            AutomationDispatchError: If the OS call could not be made.
        """
        pass

    @abstractmethod
    def launch(self, app_name: str) -> None:
        """
        Asks the OS to start the application. Returns once the request is
        dispatched, NOT once the application is ready.

        Raises:
            AutomationDispatchError: If the OS call could not be made.
        """
        pass

    @abstractmethod
    def perform(self, app_name: str, script: AutomationScript) -> None:
        """
        Sends every step of the script to the application, in order.

        Raises:
            AutomationDispatchError: If the OS call could not be made.
        """
        pass

    @abstractmethod
    def open_document(self, app_name: str, path: Path) -> None:
        """
        Opens a file with the given application (launching it if needed).

        Raises:
            AutomationDispatchError: If the OS call could not be made.
        """
        pass
