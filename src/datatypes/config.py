"""
Library configuration.

Settings are read from environment variables (a ``.env`` file is loaded
first when present) and cached for the life of the process.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

UNBOUNDED_CAPACITY = -1


@dataclass
class DatatypesConfig:
    """Runtime settings for the datatypes library."""

    locale: str = "en_US"
    default_capacity: int = UNBOUNDED_CAPACITY
    log_level: str = "INFO"
    log_format: str = "text"

    def __post_init__(self) -> None:
        if self.default_capacity != UNBOUNDED_CAPACITY and self.default_capacity < 1:
            raise ValueError(
                f"default_capacity must be positive or {UNBOUNDED_CAPACITY}, "
                f"got {self.default_capacity}"
            )
        if self.log_format not in ("json", "text"):
            raise ValueError(f"log_format must be 'json' or 'text', got {self.log_format!r}")

    @classmethod
    def from_env(cls) -> "DatatypesConfig":
        """Create configuration from environment variables."""
        load_dotenv()
        return cls(
            locale=os.getenv("DATATYPES_LOCALE", "en_US"),
            default_capacity=int(os.getenv("DATATYPES_DEFAULT_CAPACITY", str(UNBOUNDED_CAPACITY))),
            log_level=os.getenv("DATATYPES_LOG_LEVEL", "INFO").upper(),
            log_format=os.getenv("DATATYPES_LOG_FORMAT", "text").lower(),
        )


_config: DatatypesConfig | None = None


def get_config() -> DatatypesConfig:
    """Get the process-wide configuration, loading it on first use."""
    global _config
    if _config is None:
        _config = DatatypesConfig.from_env()
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next call re-reads the environment."""
    global _config
    _config = None
