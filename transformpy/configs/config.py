"""
Configuration module for transformpy (configs).
"""

import os

from dotenv import load_dotenv

from transformpy.version import __version__

load_dotenv()


class Config:
    def __init__(self) -> None:
        # Logging / runtime
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_file = os.getenv("LOG_FILE")
        self.log_dir = os.getenv("LOG_DIR", "logs")

        # Credentials file consumed by load_keys()
        self.keys_file = os.getenv("TRANSFORMPY_KEYS_FILE", ".env")

        # HTTP request tuning. No timeout unless explicitly configured.
        self.request_timeout = self._parse_timeout(os.getenv("REQUEST_TIMEOUT"))
        self.user_agent = os.getenv("USER_AGENT", f"transformpy/{__version__}")

    def _parse_timeout(self, raw: str | None) -> float | None:
        """Parse a timeout in seconds; empty or non-positive disables it."""
        if not raw or not raw.strip():
            return None
        value = float(raw)
        return value if value > 0 else None


config = Config()
