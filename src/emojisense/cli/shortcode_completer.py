"""
Shortcode autocomplete for the interactive prompt.

Acts as an editor host for the completion source: a session opens when ``:``
is typed and the source participates, stays open while the cursor remains in
the same shortcode, and the candidates are narrowed by substring as the user
keeps typing.
"""

from typing import Iterable, Optional
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from emojisense.autocomplete.candidates import DELIMITER, Candidate
from emojisense.autocomplete.classification import Span
from emojisense.autocomplete.source import CompletionSource
from emojisense.autocomplete.trigger import find_span


class ShortcodeCompleter(Completer):
    """
    Completes ``:shortcode:`` tokens with their emoji.

    Shows the display name with the raw shortcode and category as meta.
    """

    def __init__(self, source: CompletionSource, max_suggestions: int = 50):
        """
        Initialize the shortcode completer.

        Args:
            source: Completion source deciding where sessions open
            max_suggestions: Maximum number of suggestions to show
        """
        self.source = source
        self.max_suggestions = max_suggestions
        self._session: Optional[Span] = None

    @property
    def session_span(self) -> Optional[Span]:
        return self._session

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        """
        Generate shortcode completions.

        Args:
            document: Current prompt document
            complete_event: Completion event

        Yields:
            Completion objects for matching shortcodes
        """
        line_text = document.current_line
        line_start = document.cursor_position - document.cursor_position_col
        cursor = document.cursor_position
        span = self._update_session(line_text, line_start, cursor)
        if span is None:
            return

        typed = document.text[span.start:cursor]
        query = typed.strip(DELIMITER).lower()

        count = 0
        for candidate in self.source.get_completion_context().items:
            if not self._matches(candidate, query):
                continue

            yield Completion(
                text=candidate.insert_text,
                start_position=-len(typed),
                display=f"{candidate.value}  {candidate.display_name}",
                display_meta=f"{candidate.name} {candidate.category.value}",
            )

            count += 1
            if count >= self.max_suggestions:
                break

    def _update_session(self, line_text: str, line_start: int, cursor: int) -> Optional[Span]:
        typed_char = line_text[cursor - line_start - 1] if cursor > line_start else ''

        if typed_char == DELIMITER:
            match = self.source.initialize_completion(typed_char, cursor, line_text, line_start)
            if match.participates:
                self._session = match.span
                return self._session

        if self._session is not None:
            # Keep the session only while the cursor stays in the token it opened on
            span = find_span(line_text, line_start, cursor)
            if span is not None and span.start == self._session.start and cursor > span.start:
                self._session = span
                return span

        self._session = None
        return None

    @staticmethod
    def _matches(candidate: Candidate, query: str) -> bool:
        if not query:
            return True
        return query in candidate.name.lower() or query in candidate.display_name.lower()
