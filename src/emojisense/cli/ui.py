"""
Terminal UI utilities using Rich.

Provides:
- Candidate tables
- Trigger decision display
- Welcome banner for the interactive prompt
"""

from typing import Iterable, Optional
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from emojisense.autocomplete.candidates import Candidate
from emojisense.autocomplete.trigger import TriggerMatch

# Global console instance; shortcodes are printed literally
console = Console(emoji=False)


def show_welcome():
    """Show the interactive prompt banner."""
    console.print(Panel(
        "[bold]EmojiSense[/bold] interactive prompt\n"
        "Type [cyan]:[/cyan] followed by a shortcode, e.g. [cyan]:tada[/cyan]. "
        "Ctrl-D to exit.",
        border_style="magenta",
    ))


def show_candidates(candidates: Iterable[Candidate], title: Optional[str] = None):
    """
    Render candidates as a table.

    Args:
        candidates: Candidates to show, in order
        title: Optional table title
    """
    table = Table(title=title, show_lines=False)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Emoji")
    table.add_column("Shortcode", style="cyan")
    table.add_column("Display name")
    table.add_column("Category", style="magenta")

    rows = 0
    for candidate in candidates:
        table.add_row(
            candidate.sort_text,
            candidate.value,
            Text(candidate.name),
            Text(candidate.display_name),
            candidate.category.value,
        )
        rows += 1

    if rows == 0:
        console.print("[yellow]No matching shortcodes[/yellow]")
        return
    console.print(table)


def show_trigger_result(line_text: str, line_start: int, match: TriggerMatch):
    """
    Show a trigger decision, underlining the applicable span.

    Args:
        line_text: Line the decision was made on
        line_start: Buffer offset of the line
        match: Result of the trigger decision
    """
    if not match.participates:
        console.print("[red]✗ Does not participate[/red]")
        console.print(Text(line_text))
        return

    start = match.span.start - line_start
    end = match.span.end - line_start
    highlighted = Text(line_text)
    highlighted.stylize("bold green underline", start, end)

    console.print(f"[green]✓ Participates[/green] span [{match.span.start}, {match.span.end})")
    console.print(highlighted)


def show_error(message: str):
    console.print(f"[red]Error:[/red] {message}")
