"""
Tagger contract for the title case engine.

The engine never loads a tagger itself. Callers inject an implementation,
such as title_case.spacy_tagger.SpacyTagger.
"""

from abc import ABC, abstractmethod
from typing import List

from .types import TaggedTerm

# Part-of-speech values a tagger may report on TaggedTerm.pos
POS_VALUES = frozenset({
    'verb', 'noun', 'adjective', 'adverb', 'preposition', 'conjunction', 'article', 'pronoun',
})

CONJUNCTION_TYPES = frozenset({'coordinating', 'subordinating'})


class POSTagger(ABC):
    """Abstract part-of-speech tagger."""

    @abstractmethod
    def tag(self, text: str) -> List[TaggedTerm]:
        """
        Tag the whole text in one call.

        Returns terms in text order with character offsets into ``text``.
        Whitespace is not reported.
        """
        pass
