"""Configuration for the recent timers cache."""

import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Configuration class for the recent timers cache."""

    def __init__(self):
        """Initialize configuration from environment variables."""
        # Turning the cache off makes every mutation a no-op and every search empty
        self.enabled = os.getenv("RECENT_TIMERS_ENABLED", "true").lower() == "true"

        # JSON document holding the timer list, and the key it is stored under
        self.storage_path = os.getenv(
            "RECENT_TIMERS_STORAGE_PATH", os.path.expanduser("~/.recent_timers.json")
        )
        self.slot = os.getenv("RECENT_TIMERS_SLOT", "recent_timers")

        # Fetched descriptions must be strictly shorter than this to become suggestions
        self.max_description_length = int(os.getenv("RECENT_TIMERS_MAX_DESCRIPTION_LENGTH", "60"))

        # Number of suggestions returned when the caller gives no limit
        self.default_limit = int(os.getenv("RECENT_TIMERS_DEFAULT_LIMIT", "10"))

        # Maximum number of stored entries; 0 keeps the list unbounded
        self.max_entries = int(os.getenv("RECENT_TIMERS_MAX_ENTRIES", "0"))

        # Validate configuration
        self._validate()

    def _validate(self):
        """Validate configuration values."""
        if not self.slot:
            raise ValueError("Storage slot name must not be empty")

        if self.max_description_length <= 0:
            raise ValueError(
                f"Max description length must be positive, got {self.max_description_length}"
            )

        if self.default_limit <= 0:
            raise ValueError(f"Default limit must be positive, got {self.default_limit}")

        if self.max_entries < 0:
            raise ValueError(f"Max entries must not be negative, got {self.max_entries}")


# Create a global config instance
_config = Config()

# Expose configuration values as module-level variables
ENABLED = _config.enabled
STORAGE_PATH = _config.storage_path
SLOT = _config.slot
MAX_DESCRIPTION_LENGTH = _config.max_description_length
DEFAULT_LIMIT = _config.default_limit
MAX_ENTRIES = _config.max_entries

__all__ = [
    "Config",
    "ENABLED",
    "STORAGE_PATH",
    "SLOT",
    "MAX_DESCRIPTION_LENGTH",
    "DEFAULT_LIMIT",
    "MAX_ENTRIES",
]
