"""
Grammatical Classifier
Resolves each word's grammatical function from part-of-speech tagger output.
"""

import logging
from typing import List, Optional

from .services.vocabulary_service import WordLists, get_word_lists
from .tagging import CONJUNCTION_TYPES, POS_VALUES
from .types import GrammaticalFunction, TaggedTerm, Token

logger = logging.getLogger(__name__)

_DIRECT_FUNCTIONS = {
    'verb': GrammaticalFunction.VERB,
    'noun': GrammaticalFunction.NOUN,
    'adjective': GrammaticalFunction.ADJECTIVE,
    'adverb': GrammaticalFunction.ADVERB,
    'preposition': GrammaticalFunction.PREPOSITION,
    'article': GrammaticalFunction.ARTICLE,
    'pronoun': GrammaticalFunction.PRONOUN,
}

_CONJUNCTION_FUNCTIONS = {
    'coordinating': GrammaticalFunction.COORDINATING_CONJUNCTION,
    'subordinating': GrammaticalFunction.SUBORDINATING_CONJUNCTION,
}


class GrammaticalClassifier:
    """
    Turns tagger terms into grammatical functions, with special handling for the
    short words whose role decides their capitalization: particles such as "up"
    or "over", the letter "a", and "to".
    """

    def __init__(self, word_lists: Optional[WordLists] = None):
        self.word_lists = word_lists or get_word_lists()

    def classify(self, word: str, term: Optional[TaggedTerm] = None,
                 next_term: Optional[TaggedTerm] = None) -> GrammaticalFunction:
        """
        Classify one word.

        Args:
            word: The word as it appears in the text
            term: Tagger term aligned to the word, None without a tagger
            next_term: The tagger term following ``term``

        Returns:
            The resolved GrammaticalFunction, UNKNOWN when nothing applies.
        """
        if term is None:
            return GrammaticalFunction.UNKNOWN

        lower_word = word.lower()
        pos = term.pos

        # Particles: "give up", "turn over", "in the box"
        if lower_word in self.word_lists.ambiguous_particles:
            if pos == 'adverb':
                return GrammaticalFunction.ADVERB
            if pos == 'verb':
                return GrammaticalFunction.VERB
            if pos == 'preposition':
                return GrammaticalFunction.PREPOSITION
            if term.is_phrasal_particle:
                return GrammaticalFunction.ADVERB

        # Letter "A" as a noun ("Plan A", "From A to Z") versus the article
        if lower_word == 'a' and len(word) == 1:
            if pos == 'noun' or term.is_acronym:
                return GrammaticalFunction.NOUN
            return GrammaticalFunction.ARTICLE

        if lower_word == 'to':
            if next_term is not None and next_term.pos == 'verb':
                return GrammaticalFunction.INFINITIVE
            if pos == 'preposition':
                return GrammaticalFunction.PREPOSITION

        return self._from_pos(lower_word, term)

    def _from_pos(self, lower_word: str, term: TaggedTerm) -> GrammaticalFunction:
        if term.pos not in POS_VALUES:
            if term.pos is not None:
                logger.debug(f"Ignoring unsupported part of speech {term.pos!r} for '{term.text}'")
            return GrammaticalFunction.UNKNOWN

        if term.pos == 'conjunction':
            if self.word_lists.is_coordinating_conjunction(lower_word):
                return GrammaticalFunction.COORDINATING_CONJUNCTION
            if self.word_lists.is_subordinating_conjunction(lower_word):
                return GrammaticalFunction.SUBORDINATING_CONJUNCTION
            if term.conjunction_type in CONJUNCTION_TYPES:
                return _CONJUNCTION_FUNCTIONS[term.conjunction_type]
            return GrammaticalFunction.UNKNOWN

        return _DIRECT_FUNCTIONS.get(term.pos, GrammaticalFunction.UNKNOWN)

    def classify_tokens(self, tokens: List[Token]) -> List[Token]:
        """Fill in grammatical_function on every word token that carries a tag."""
        for token in tokens:
            if not token.is_word or token.tag is None:
                continue
            try:
                token.grammatical_function = self.classify(token.text, token.tag, token.next_tag)
            except Exception as e:
                logger.debug(f"Classification failed for '{token.text}': {e}")
                token.grammatical_function = GrammaticalFunction.UNKNOWN
        return tokens
