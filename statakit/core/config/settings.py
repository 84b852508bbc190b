# File: statakit/core/config/settings.py

import os
import shutil
import tempfile
from pathlib import Path
from typing import List


class Settings:
    # --- Paths ---
    HOME_DIR: Path = Path.home()
    TEMP_DIR: Path = Path(os.getenv("STATA_TEMP_DIR", tempfile.gettempdir()))

    # --- Stata Application ---
    STATA_APP_NAME: str = os.getenv("STATA_APP_NAME", "StataMP")
    STATA_BINARY: str = os.getenv(
        "STATA_BINARY_PATH",
        f"/Applications/Stata/{STATA_APP_NAME}.app/Contents/MacOS/{STATA_APP_NAME}",
    )

    # --- External Tools ---
    # Auto-detect macOS helpers or use env var
    OSASCRIPT_BINARY: str = os.getenv("OSASCRIPT_BINARY_PATH", shutil.which("osascript") or "osascript")
    OPEN_BINARY: str = os.getenv("OPEN_BINARY_PATH", shutil.which("open") or "open")

    # --- Timing ---
    # Grace period after launching Stata before keystrokes are sent.
    # There is no readiness signal to poll, so this is a heuristic.
    LAUNCH_DELAY_SECONDS: float = float(os.getenv("STATA_LAUNCH_DELAY", "2.0"))
    KEYSTROKE_DELAY_SECONDS: float = float(os.getenv("STATA_KEYSTROKE_DELAY", "0.5"))
    RUN_TIMEOUT_SECONDS: float = float(os.getenv("STATA_RUN_TIMEOUT", "30"))
    AUTOMATION_TIMEOUT_SECONDS: float = float(os.getenv("STATA_AUTOMATION_TIMEOUT", "15"))

    # --- File Types ---
    DATASET_EXTENSION: str = ".dta"
    DO_FILE_EXTENSION: str = ".do"

    # --- Stata Preferences ---
    RECENT_FILES_PLIST: Path = Path(
        os.getenv(
            "STATA_RECENT_PLIST",
            str(HOME_DIR / "Library" / "Preferences" / "com.stata.stata19.plist"),
        )
    )

    def dataset_roots(self) -> List[Path]:
        """
        Default folders searched for datasets, in priority order.
        ~/Documents/Stata is nested inside ~/Documents on purpose: results are de-duplicated.
        """
        return [
            self.HOME_DIR / "Documents" / "Stata",
            self.HOME_DIR / "Desktop",
            self.HOME_DIR / "Downloads",
            self.HOME_DIR / "Documents",
            Path("/Applications/Stata/ado/base"),
            Path("/System/Library/Frameworks/Stata.framework/Versions/Current/Resources/ado/base"),
        ]


settings = Settings()
