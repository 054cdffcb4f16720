"""
EmojiSense Autocomplete Module

Opens shortcode completion when ``:`` is typed and supplies the emoji
candidates for the editor to filter.
"""

from .candidates import Candidate, CandidateTable, Category, build_candidates, default_table
from .classification import ClassificationSpan, Span
from .trigger import TriggerEngine, TriggerMatch, find_span
from .source import CompletionSource, CompletionContext
from .service import CompletionService

__all__ = [
    'Candidate', 'CandidateTable', 'Category', 'build_candidates', 'default_table',
    'ClassificationSpan', 'Span',
    'TriggerEngine', 'TriggerMatch', 'find_span',
    'CompletionSource', 'CompletionContext',
    'CompletionService',
]
