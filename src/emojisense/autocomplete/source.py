"""
Completion source: the object an editor host talks to.

Pairs a TriggerEngine with the shared CandidateTable. The host asks it whether
to open a session for a keystroke, then for the candidates, and filters them
itself as the user keeps typing.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from emojisense.autocomplete.candidates import (
    FILTERS,
    Candidate,
    CandidateTable,
    CompletionFilter,
    default_table,
)
from emojisense.autocomplete.classification import ClassificationSpan, Classifier
from emojisense.autocomplete.trigger import TriggerEngine, TriggerMatch


@dataclass
class CompletionContext:
    """Candidates handed to the host for one session."""
    items: Tuple[Candidate, ...]
    filters: List[CompletionFilter] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'items': [item.to_dict() for item in self.items],
            'filters': [f.to_dict() for f in self.filters],
        }


class CompletionSource:
    """
    Shortcode completion source for one editor view.

    Holds no per-session state; every view may share the same table.
    """

    def __init__(
        self,
        table: Optional[CandidateTable] = None,
        classifier: Optional[Classifier] = None,
        require_classification: bool = False,
    ):
        self.table = table if table is not None else default_table()
        self.engine = TriggerEngine(
            classifier=classifier,
            require_classification=require_classification,
        )

    @property
    def filters(self) -> List[CompletionFilter]:
        return [FILTERS[category] for category in self.table.categories()]

    def initialize_completion(
        self,
        trigger_char: str,
        cursor: int,
        line_text: str,
        line_start: int = 0,
        classifications: Optional[List[ClassificationSpan]] = None,
        cancel: Optional[Any] = None,
    ) -> TriggerMatch:
        """Decide participation and the applicable span for a keystroke."""
        return self.engine.initialize(
            trigger_char,
            cursor,
            line_text,
            line_start=line_start,
            classifications=classifications,
            cancel=cancel,
        )

    def get_completion_context(self) -> CompletionContext:
        """Every candidate, unfiltered; the host narrows them down."""
        return CompletionContext(items=self.table.candidates, filters=self.filters)

    def get_candidates(self) -> Tuple[Candidate, ...]:
        return self.table.candidates

    def get_description(self, name: str) -> None:
        """Candidates carry no description."""
        return None
