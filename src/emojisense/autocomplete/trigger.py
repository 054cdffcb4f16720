"""
Trigger detection for shortcode completion.

Decides, for one keystroke, whether a completion session should open and
which span of the line it replaces. Two gates run in order:

1. Trigger character: only ``:`` opens a session, and not when it is typed
   directly in front of a word character.
2. Classification (when classification data is available): the character
   before the cursor must be inside a string or comment.

If both pass, the line is scanned for shortcode tokens and the token under the
cursor becomes the applicable span.
"""

import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from emojisense.autocomplete.candidates import DELIMITER
from emojisense.autocomplete.classification import (
    ClassificationSpan,
    Classifier,
    Span,
    classification_at,
    is_free_text,
)
from emojisense.utils.logger import logger


# Delimiter preceded by whitespace or line start, the token body, and an
# optional closing delimiter
SHORTCODE_PATTERN = re.compile(r'(?:\s|^):([^:\s]*):?')


@dataclass(frozen=True)
class TriggerMatch:
    """Outcome of a trigger decision; ``span`` is set only when participating."""
    participates: bool
    span: Optional[Span] = None

    @classmethod
    def provides_items(cls, span: Span) -> 'TriggerMatch':
        return cls(participates=True, span=span)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        if not self.participates:
            return {'participates': False}
        return {'participates': True, 'span': self.span.to_dict()}


DOES_NOT_PARTICIPATE = TriggerMatch(participates=False)


def _is_whitespace_or_zero(ch: str) -> bool:
    return ch == '\0' or ch.isspace()


def find_span(line_text: str, line_start: int, cursor: int) -> Optional[Span]:
    """
    Find the shortcode token containing the cursor.

    Args:
        line_text: Text of the line holding the cursor, without line break
        line_start: Buffer offset of the first character of the line
        cursor: Buffer offset of the cursor

    Returns:
        Span from the opening delimiter to the closing delimiter (or the end
        of an unterminated token), or None if the cursor is in no token
    """
    for match in SHORTCODE_PATTERN.finditer(line_text):
        value = match.group(0)
        offset = 1 if _is_whitespace_or_zero(value[0]) else 0
        start = match.start() + line_start + offset
        end = start + len(value) - offset

        if start <= cursor <= end:
            return Span(start, end)
    return None


class TriggerEngine:
    """
    Decides participation and the applicable span for a typed character.

    The engine is stateless; one instance can serve any number of sessions.
    """

    def __init__(
        self,
        classifier: Optional[Classifier] = None,
        require_classification: bool = False,
        trigger: str = DELIMITER,
    ):
        """
        Initialize the trigger engine.

        Args:
            classifier: Host tokenizer queried when a call supplies no
                classifications
            require_classification: Reject triggers when no classification
                data can be obtained at all
            trigger: Character that opens a session
        """
        self.classifier = classifier
        self.require_classification = require_classification
        self.trigger = trigger

    def initialize(
        self,
        trigger_char: str,
        cursor: int,
        line_text: str,
        line_start: int = 0,
        classifications: Optional[List[ClassificationSpan]] = None,
        cancel: Optional[Any] = None,
    ) -> TriggerMatch:
        """
        Decide whether a completion session opens for this keystroke.

        Args:
            trigger_char: Character just typed
            cursor: Buffer offset of the cursor, after the typed character
            line_text: Text of the line containing the cursor
            line_start: Buffer offset where that line begins
            classifications: Classifications around the cursor, if the host
                already has them
            cancel: Object with ``is_set()``; checked once before any work

        Returns:
            TriggerMatch, carrying the applicable span when participating
        """
        if cancel is not None and cancel.is_set():
            logger.trigger_rejected('cancel', "request cancelled", cursor)
            return DOES_NOT_PARTICIPATE

        if not self._passes_trigger_gate(trigger_char, cursor, line_text, line_start):
            return DOES_NOT_PARTICIPATE

        if not self._passes_classification_gate(cursor, classifications):
            return DOES_NOT_PARTICIPATE

        span = find_span(line_text, line_start, cursor)
        if span is None:
            logger.trigger_rejected('span', "cursor is not inside a shortcode", cursor)
            return DOES_NOT_PARTICIPATE

        logger.trigger_accepted(cursor, span.start, span.end)
        return TriggerMatch.provides_items(span)

    def _passes_trigger_gate(
        self,
        trigger_char: str,
        cursor: int,
        line_text: str,
        line_start: int,
    ) -> bool:
        if trigger_char != self.trigger:
            logger.trigger_rejected('trigger', f"{trigger_char!r} is not a trigger", cursor)
            return False

        # Past the line text is the line break or the end of the buffer;
        # both count as whitespace here.
        position = cursor - line_start
        if 0 <= position < len(line_text):
            next_char = line_text[position]
            if next_char != self.trigger and not _is_whitespace_or_zero(next_char):
                logger.trigger_rejected('trigger', f"typed before {next_char!r}", cursor)
                return False
        return True

    def _passes_classification_gate(
        self,
        cursor: int,
        classifications: Optional[List[ClassificationSpan]],
    ) -> bool:
        before = max(cursor - 1, 0)

        if classifications is None and self.classifier is not None:
            classifications = self.classifier.classify(Span(before, before + 1))
        if classifications is None:
            if self.require_classification:
                logger.trigger_rejected('classify', "no classification available", cursor)
                return False
            return True

        classification = classification_at(before, classifications)
        if classification is None:
            logger.trigger_rejected('classify', "position is not classified", cursor)
            return False
        if not is_free_text(classification.tag):
            logger.trigger_rejected('classify', f"inside {classification.tag!r}", cursor)
            return False
        return True
