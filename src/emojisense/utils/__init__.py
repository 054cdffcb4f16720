"""
Utilities module - logging helpers.
"""

from emojisense.utils.logger import logger, EmojiSenseLogger, JsonFormatter

__all__ = ["logger", "EmojiSenseLogger", "JsonFormatter"]
