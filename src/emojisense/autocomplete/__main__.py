"""
Entry point for running the completion service as a module.

Usage:
    python -m emojisense.autocomplete [--require-classification]
"""

from emojisense.autocomplete.service import main

if __name__ == '__main__':
    main()
