"""
CLI module - command line entry point, terminal UI and prompt completion.
"""

from emojisense.cli.commands import main

__all__ = ["main"]
