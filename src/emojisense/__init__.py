"""
EmojiSense - Emoji shortcode completion for text editors

Type ``:`` followed by a shortcode and pick the glyph to insert.
"""

__version__ = "0.1.0"
__author__ = "EmojiSense Team"

from emojisense.autocomplete import CompletionSource, TriggerEngine, default_table

__all__ = ["CompletionSource", "TriggerEngine", "default_table", "__version__"]
