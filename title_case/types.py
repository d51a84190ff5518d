"""
Title Case Types
Core data structures shared by the tokenizer, classifier and style rule engine.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union


class StyleGuide(Enum):
    AMA = "AMA"
    AP = "AP"
    APA = "APA"
    BLUEBOOK = "Bluebook"
    CHICAGO = "Chicago"
    MLA = "MLA"
    NEW_YORK_TIMES = "New York Times"
    WIKIPEDIA = "Wikipedia"

    @property
    def label(self) -> str:
        """Human-readable name of the style guide."""
        return _STYLE_LABELS[self]

    @classmethod
    def parse(cls, value: Union['StyleGuide', str, None]) -> Optional['StyleGuide']:
        """
        Resolve a style identifier to a StyleGuide.

        Accepts a member, its value ("New York Times"), its name ("NEW_YORK_TIMES")
        or a known alias ("nyt"), all case-insensitive. Returns None when the
        value does not name a supported style.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None

        key = value.strip().lower()
        for style in cls:
            if key in (style.value.lower(), style.name.lower()):
                return style
        return _STYLE_ALIASES.get(key.replace('-', ' ').replace('_', ' '))

    @classmethod
    def identifiers(cls) -> List[str]:
        return [style.value for style in cls]


_STYLE_LABELS = {
    StyleGuide.AMA: "AMA (American Medical Association)",
    StyleGuide.AP: "AP (Associated Press)",
    StyleGuide.APA: "APA (American Psychological Association)",
    StyleGuide.BLUEBOOK: "Bluebook (Legal Citation)",
    StyleGuide.CHICAGO: "Chicago Manual of Style",
    StyleGuide.MLA: "MLA (Modern Language Association)",
    StyleGuide.NEW_YORK_TIMES: "New York Times",
    StyleGuide.WIKIPEDIA: "Wikipedia",
}

_STYLE_ALIASES = {
    "nyt": StyleGuide.NEW_YORK_TIMES,
    "new york times": StyleGuide.NEW_YORK_TIMES,
    "cmos": StyleGuide.CHICAGO,
    "chicago manual of style": StyleGuide.CHICAGO,
}


class GrammaticalFunction(Enum):
    VERB = "verb"
    NOUN = "noun"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    PRONOUN = "pronoun"
    ARTICLE = "article"
    PREPOSITION = "preposition"
    COORDINATING_CONJUNCTION = "coordinating_conjunction"
    SUBORDINATING_CONJUNCTION = "subordinating_conjunction"
    INFINITIVE = "infinitive"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class TaggedTerm:
    """One term produced by a part-of-speech tagger, with its character span."""
    text: str
    start: int
    end: int
    # verb, noun, adjective, adverb, preposition, conjunction, article, pronoun or None
    pos: Optional[str] = None
    # coordinating / subordinating, only meaningful when pos == 'conjunction'
    conjunction_type: Optional[str] = None
    is_phrasal_particle: bool = False
    is_acronym: bool = False


@dataclass(frozen=True)
class WordPosition:
    is_first: bool = False
    is_last: bool = False


@dataclass
class Token:
    """A word or separator run of the input text."""
    text: str
    is_word: bool
    start: int = 0
    position: WordPosition = field(default_factory=WordPosition)
    after_colon: bool = False
    tag: Optional[TaggedTerm] = None
    next_tag: Optional[TaggedTerm] = None
    grammatical_function: Optional[GrammaticalFunction] = None

    @property
    def end(self) -> int:
        return self.start + len(self.text)

    @property
    def is_first(self) -> bool:
        return self.position.is_first

    @property
    def is_last(self) -> bool:
        return self.position.is_last
