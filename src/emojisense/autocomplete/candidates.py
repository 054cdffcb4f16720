"""
Candidate table for shortcode completion.

The table is built once from the static shortcode mappings, cached, and never
mutated afterwards. Every completion session receives the same tuple.
"""

import re
import time
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

from emojisense.autocomplete import emojis
from emojisense.utils.logger import logger


DELIMITER = ':'

_WORD_BREAK = re.compile(r'([\s\-]+)')


class Category(Enum):
    """Category tags, in table order."""
    PEOPLE = "People"
    NATURE = "Nature"
    OBJECTS = "Objects"
    PLACES = "Places"
    SYMBOLS = "Symbols"


@dataclass(frozen=True)
class CompletionFilter:
    """Host-side filter chip for one category."""
    category: Category
    access_key: str

    @property
    def display_name(self) -> str:
        return self.category.value

    def to_dict(self) -> Dict[str, str]:
        return {
            'category': self.category.value,
            'display_name': self.display_name,
            'access_key': self.access_key,
        }


FILTERS: Dict[Category, CompletionFilter] = {
    Category.PEOPLE: CompletionFilter(Category.PEOPLE, "P"),
    Category.NATURE: CompletionFilter(Category.NATURE, "N"),
    Category.OBJECTS: CompletionFilter(Category.OBJECTS, "O"),
    Category.PLACES: CompletionFilter(Category.PLACES, "L"),
    Category.SYMBOLS: CompletionFilter(Category.SYMBOLS, "S"),
}


@dataclass(frozen=True)
class Candidate:
    """One shortcode available for insertion."""
    name: str
    value: str
    category: Category
    sort_text: str = ""

    @property
    def display_name(self) -> str:
        return display_name_for(self.name)

    @property
    def insert_text(self) -> str:
        return self.value

    @property
    def filter_text(self) -> str:
        return self.display_name

    def to_dict(self) -> Dict[str, str]:
        """Convert to dictionary for JSON serialization."""
        return {
            'name': self.name,
            'display_name': self.display_name,
            'value': self.value,
            'category': self.category.value,
            'sort_text': self.sort_text,
            'insert_text': self.insert_text,
            'filter_text': self.filter_text,
        }


Source = Tuple[Category, Mapping[str, str]]

SOURCES: List[Source] = [
    (Category.PEOPLE, emojis.PEOPLE),
    (Category.NATURE, emojis.NATURE),
    (Category.OBJECTS, emojis.OBJECTS),
    (Category.PLACES, emojis.PLACES),
    (Category.SYMBOLS, emojis.SYMBOLS),
]


def title_case(text: str) -> str:
    """
    Upper-case the first character of every whitespace or hyphen delimited
    word and lower-case the rest. Words written entirely in capitals are
    acronyms and stay as they are.

    Underscores do not split words: ``thumbs_up`` becomes ``Thumbs_up``.
    """
    parts = _WORD_BREAK.split(text)
    return ''.join(_title_word(part) for part in parts)


def _title_word(word: str) -> str:
    if word.isupper():
        return word
    return word[:1].upper() + word[1:].lower()


def display_name_for(name: str) -> str:
    """Display name for a raw shortcode, e.g. ``:thumbs_up:`` -> ``Thumbs_up``."""
    return title_case(name.strip(DELIMITER))


def build_candidates(sources: Sequence[Source]) -> Tuple[Candidate, ...]:
    """
    Build the ordered candidate sequence.

    Categories are emitted in the order given, entries within a category in
    mapping order. ``sort_text`` numbers the candidates from 1 across the
    whole table, zero-padded to four digits.

    Args:
        sources: (category, name -> value) pairs

    Returns:
        Tuple of candidates
    """
    candidates: List[Candidate] = []
    index = 1
    for category, mapping in sources:
        for name, value in mapping.items():
            candidates.append(Candidate(
                name=name,
                value=value,
                category=category,
                sort_text=str(index).zfill(4),
            ))
            index += 1
    return tuple(candidates)


class CandidateTable:
    """
    Lazily built, immutable candidate table.

    The first caller that finds the cache empty builds it. Two threads racing
    on first use may both build; the result is identical and the cache is
    published with a single assignment, so readers only ever see ``None`` or a
    complete tuple.
    """

    def __init__(self, sources: Optional[Sequence[Source]] = None):
        self._sources: Sequence[Source] = SOURCES if sources is None else sources
        self._candidates: Optional[Tuple[Candidate, ...]] = None
        self._by_name: Optional[Dict[str, Candidate]] = None

    @property
    def is_built(self) -> bool:
        return self._candidates is not None

    @property
    def candidates(self) -> Tuple[Candidate, ...]:
        """All candidates, building the table on first access."""
        cached = self._candidates
        if cached is None:
            started = time.time()
            cached = build_candidates(self._sources)
            self._candidates = cached
            logger.table_built(len(cached), len(self._sources), time.time() - started)
        return cached

    def get(self, name: str) -> Optional[Candidate]:
        """Look up a candidate by its raw shortcode."""
        by_name = self._by_name
        if by_name is None:
            by_name = {c.name: c for c in self.candidates}
            self._by_name = by_name
        return by_name.get(name)

    def by_category(self, category: Category) -> Tuple[Candidate, ...]:
        return tuple(c for c in self.candidates if c.category is category)

    def categories(self) -> List[Category]:
        return [category for category, _ in self._sources]

    def __len__(self) -> int:
        return len(self.candidates)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self.candidates)


_default_table: Optional[CandidateTable] = None


def default_table() -> CandidateTable:
    """Process-wide table built from the bundled shortcode mappings."""
    global _default_table
    if _default_table is None:
        _default_table = CandidateTable()
    return _default_table
