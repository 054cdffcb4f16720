"""
CLI commands for EmojiSense.

Main entry point: `emojisense serve` for the editor service, or
`emojisense interactive` to try completion in the terminal.
"""

import sys
from typing import Optional

import click
from dotenv import load_dotenv

from emojisense.autocomplete.candidates import Category, default_table
from emojisense.autocomplete.classification import ClassificationSpan, Span
from emojisense.autocomplete.service import CompletionService
from emojisense.autocomplete.source import CompletionSource
from emojisense.cli import ui
from emojisense.config import Config


CATEGORY_NAMES = [category.value for category in Category]


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Minimum level written to the log files (DEBUG, INFO, WARNING, ERROR)",
)
@click.option(
    "--log-dir",
    default=None,
    help="Directory for log files (default: logs/YYYY-MM-DD/)",
)
@click.pass_context
def main(ctx, log_level: Optional[str], log_dir: Optional[str]):
    """
    EmojiSense - emoji shortcode completion for text editors

    Usage:
        emojisense serve                         # JSON-RPC over stdio
        emojisense list --category Nature        # Browse shortcodes
        emojisense check "say :dog" --cursor 5   # Explain a trigger decision
        emojisense interactive                   # Try it in the terminal
    """
    load_dotenv()

    config = Config.from_env()
    if log_level:
        config.log_level = log_level.upper()
        config.enable_logging = True
    if log_dir:
        config.log_dir = log_dir
        config.enable_logging = True
    config.configure_logging()

    ctx.obj = config


@main.command()
@click.option(
    "--require-classification/--no-require-classification",
    default=None,
    help="Only open completion where the host reports a string or comment",
)
@click.pass_obj
def serve(config: Config, require_classification: Optional[bool]):
    """Run the completion service over stdio."""
    if require_classification is None:
        require_classification = config.require_classification
    service = CompletionService(require_classification=require_classification)
    service.run()


@main.command(name="list")
@click.option(
    "--category",
    "-c",
    type=click.Choice(CATEGORY_NAMES, case_sensitive=False),
    default=None,
    help="Only show one category",
)
@click.option(
    "--search",
    "-s",
    default=None,
    help="Substring matched against shortcode and display name",
)
def list_candidates(category: Optional[str], search: Optional[str]):
    """List the available shortcodes."""
    table = default_table()
    if category:
        candidates = table.by_category(Category(category.capitalize()))
    else:
        candidates = table.candidates

    if search:
        query = search.strip(":").lower()
        candidates = [
            c for c in candidates
            if query in c.name.lower() or query in c.display_name.lower()
        ]

    ui.show_candidates(candidates, title=category)


@main.command()
@click.argument("line")
@click.option(
    "--cursor",
    type=int,
    default=None,
    help="Cursor offset within the line (default: end of line)",
)
@click.option(
    "--trigger",
    default=":",
    show_default=True,
    help="Character just typed",
)
@click.option(
    "--tag",
    default=None,
    help="Classify the whole line with this tag (e.g. 'string', 'identifier')",
)
@click.pass_obj
def check(config: Config, line: str, cursor: Optional[int], trigger: str, tag: Optional[str]):
    """Show whether typing TRIGGER at CURSOR in LINE opens completion."""
    if cursor is None:
        cursor = len(line)
    if cursor < 0 or cursor > len(line):
        ui.show_error(f"cursor must be between 0 and {len(line)}")
        sys.exit(2)

    classifications = None
    if tag is not None:
        classifications = [ClassificationSpan(Span(0, len(line)), tag)]

    source = CompletionSource(require_classification=config.require_classification)
    match = source.initialize_completion(trigger, cursor, line, classifications=classifications)
    ui.show_trigger_result(line, 0, match)


@main.command()
def interactive():
    """Try shortcode completion in an interactive prompt."""
    from prompt_toolkit import PromptSession

    from emojisense.cli.shortcode_completer import ShortcodeCompleter

    completer = ShortcodeCompleter(CompletionSource())
    session = PromptSession(completer=completer, complete_while_typing=True)

    ui.show_welcome()
    while True:
        try:
            text = session.prompt("> ")
        except KeyboardInterrupt:
            continue
        except EOFError:
            break
        if text:
            ui.console.print(text, markup=False)


if __name__ == "__main__":
    main()
