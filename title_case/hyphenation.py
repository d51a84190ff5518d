"""
Hyphenated compound handling for the title case engine.
"""

from typing import Optional

from .casing import capitalize, lowercase
from .services.vocabulary_service import WordLists, get_word_lists
from .types import StyleGuide


class HyphenationRule:
    """
    Recases each segment of a hyphenated compound on its own.

    Segments use the plain capitalize/lowercase primitives. They are not sent
    back through the per-style word rules.
    """

    def __init__(self, word_lists: Optional[WordLists] = None):
        self.word_lists = word_lists or get_word_lists()

    def apply(self, word: str, is_first: bool, style: Optional[StyleGuide]) -> str:
        parts = word.split('-')
        cased = [self._recase_part(part, index, is_first, style) for index, part in enumerate(parts)]
        return '-'.join(cased)

    def _recase_part(self, part: str, index: int, is_first: bool,
                     style: Optional[StyleGuide]) -> str:
        if index == 0 and is_first:
            return capitalize(part)

        if style == StyleGuide.CHICAGO:
            # First element always capitalized, minor words after it lowercased.
            # Prepositions count as minor only up to four letters ("run-Through").
            if index == 0:
                return capitalize(part)
            if self._is_minor(part.lower(), max_preposition_length=4):
                return lowercase(part)
            return capitalize(part)

        if style == StyleGuide.MLA:
            if self._is_minor(part.lower(), max_preposition_length=None):
                return lowercase(part)
            return capitalize(part)

        # AMA and APA capitalize every element. AP, Bluebook, New York Times,
        # Wikipedia and unrecognized styles do the same.
        return capitalize(part)

    def _is_minor(self, lower_part: str, max_preposition_length: Optional[int]) -> bool:
        if self.word_lists.is_article(lower_part):
            return True
        if self.word_lists.is_coordinating_conjunction(lower_part):
            return True
        if self.word_lists.is_preposition(lower_part):
            return max_preposition_length is None or len(lower_part) <= max_preposition_length
        return False
