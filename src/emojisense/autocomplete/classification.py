"""
Text spans and syntactic classifications consulted by the trigger engine.

Classifications come from the host's tokenizer. The engine only asks one
question of them: is the character before the cursor free text (a string
literal or a comment), where typing a shortcode makes sense?
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Protocol


@dataclass(frozen=True)
class Span:
    """Half-open character range ``[start, end)`` in buffer offsets."""
    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start

    def contains(self, offset: int) -> bool:
        """Inclusive of both ends, so a cursor right after the span is inside."""
        return self.start <= offset <= self.end

    def covers(self, offset: int) -> bool:
        """True if the character at ``offset`` lies within the span."""
        return self.start <= offset < self.end

    def intersects(self, other: 'Span') -> bool:
        """True if the two spans share at least one character."""
        return self.start < other.end and other.start < self.end

    def to_dict(self) -> Dict[str, int]:
        return {'start': self.start, 'end': self.end}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Span':
        return cls(start=int(data['start']), end=int(data['end']))


@dataclass(frozen=True)
class ClassificationSpan:
    """A span of text tagged by the host tokenizer."""
    span: Span
    tag: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ClassificationSpan':
        return cls(
            span=Span(start=int(data['start']), end=int(data['end'])),
            tag=str(data['tag']),
        )


class Classifier(Protocol):
    """Host capability returning the classifications intersecting a span."""

    def classify(self, span: Span) -> List[ClassificationSpan]:
        ...


# Lower-cased classification names that count as free text
FREE_TEXT_CLASSIFICATIONS = frozenset({
    "string",
    "string - verbatim",
    "string - interpolated",
    "comment",
    "line comment",
    "block comment",
    "xml doc comment",
    "xml comment",
    "html comment",
    "markdown comment",
})


def is_free_text(tag: str) -> bool:
    return tag.strip().lower() in FREE_TEXT_CLASSIFICATIONS


def classification_at(
    offset: int,
    classifications: Iterable[ClassificationSpan],
) -> Optional[ClassificationSpan]:
    """
    Pick the classification deciding the character at ``offset``.

    A free-text classification covering the offset wins over any other
    covering classification; None if nothing covers it.
    """
    covering = [c for c in classifications if c.span.covers(offset)]
    for classification in covering:
        if is_free_text(classification.tag):
            return classification
    return covering[0] if covering else None
