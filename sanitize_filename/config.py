"""Central configuration: loads defaults from .env file.

Every option the command line accepts can also be preset through an
environment variable. Command-line flags always win.
"""

import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

from sanitize_filename.sanitize import Options, is_windows_host

# Project root = directory containing the package
_PROJECT_DIR = Path(__file__).parent.parent.resolve()

# Load .env from project root
_env_path = _PROJECT_DIR / ".env"
if _env_path.exists():
    load_dotenv(_env_path)


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self, env_file: Optional[str] = None):
        if env_file:
            load_dotenv(env_file, override=True)

        # Sanitizer defaults
        self.replacement: str = os.getenv("SANITIZE_REPLACEMENT", "")
        self.truncate: bool = _env_flag("SANITIZE_TRUNCATE", "true")

        # Unset or empty = follow the host platform
        windows = os.getenv("SANITIZE_WINDOWS", "")
        self.windows: Optional[bool] = _env_flag("SANITIZE_WINDOWS", "") if windows else None

        # Logging
        self.log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()

    def options(
        self,
        replacement: Optional[str] = None,
        windows: Optional[bool] = None,
        truncate: Optional[bool] = None,
    ) -> Options:
        """Build sanitizer options; explicit arguments override configured values."""
        if windows is None:
            windows = self.windows if self.windows is not None else is_windows_host()
        return Options(
            truncate=self.truncate if truncate is None else truncate,
            windows=windows,
            replacement=self.replacement if replacement is None else replacement,
        )
