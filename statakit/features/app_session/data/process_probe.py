import logging
import psutil
from ..domain.interfaces import IProcessProbe

logger = logging.getLogger(__name__)

class PsutilProcessProbe(IProcessProbe):
    """
    Reads the live process table through psutil.
    Nothing is cached: every call is a fresh snapshot.
    """

    def is_running(self, process_name: str) -> bool:
        for proc in psutil.process_iter(["name"]):
            try:
                if proc.info.get("name") == process_name:
                    return True
            except (psutil.NoSuchProcess, psutil.AccessDenied):
                # Process exited or is not ours to inspect
                continue
        return False
