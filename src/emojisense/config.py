"""
Configuration management for EmojiSense.

Loads settings from environment variables and provides configuration objects.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class Config:
    """EmojiSense configuration."""

    log_level: str = "INFO"
    log_dir: Optional[str] = None
    json_logs: bool = False
    enable_logging: bool = False
    require_classification: bool = False

    @classmethod
    def from_env(cls) -> "Config":
        """Initialize config from environment variables."""
        return cls(
            log_level=os.getenv("EMOJISENSE_LOG_LEVEL", "INFO").upper(),
            log_dir=os.getenv("EMOJISENSE_LOG_DIR") or None,
            json_logs=_env_flag("EMOJISENSE_JSON_LOGS", "false"),
            enable_logging=_env_flag("EMOJISENSE_ENABLE_LOGGING", "false"),
            require_classification=_env_flag("EMOJISENSE_REQUIRE_CLASSIFICATION", "false"),
        )

    def configure_logging(self):
        """Apply the logging settings to the global logger."""
        from emojisense.utils.logger import logger

        logger.configure(
            level=self.log_level,
            log_dir=self.log_dir,
            json_mode=self.json_logs,
            enable_logging=self.enable_logging,
        )
