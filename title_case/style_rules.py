"""
Style Rule Engine
Decides the case of each word for one of eight title case style guides:
AMA, AP, APA, Bluebook, Chicago, MLA, New York Times and Wikipedia.
"""

import logging
from typing import Callable, Dict, Optional

from .casing import capitalize, lowercase
from .hyphenation import HyphenationRule
from .services.vocabulary_service import WordLists, get_word_lists
from .types import GrammaticalFunction, StyleGuide

logger = logging.getLogger(__name__)

# These styles run the normal rules on the last word instead of capitalizing it
_LAST_WORD_EXEMPT_STYLES = frozenset({StyleGuide.AMA, StyleGuide.APA, StyleGuide.BLUEBOOK})

_ALWAYS_CAPITALIZED_FUNCTIONS = frozenset({
    GrammaticalFunction.VERB,
    GrammaticalFunction.NOUN,
    GrammaticalFunction.ADJECTIVE,
    GrammaticalFunction.ADVERB,
    GrammaticalFunction.PRONOUN,
})

_SUBORDINATE_CAPITALIZING_STYLES = frozenset({
    StyleGuide.AMA, StyleGuide.BLUEBOOK, StyleGuide.CHICAGO, StyleGuide.MLA, StyleGuide.WIKIPEDIA,
})

# Longest preposition each style keeps lowercase. None means every preposition.
_PREPOSITION_MAX_LOWERCASE_LENGTH = {
    StyleGuide.AMA: 3,
    StyleGuide.AP: 3,
    StyleGuide.APA: 3,
    StyleGuide.BLUEBOOK: 4,
    StyleGuide.CHICAGO: 4,
    StyleGuide.WIKIPEDIA: 4,
    StyleGuide.MLA: None,
}

StaticRule = Callable[[str, str], str]


class StyleRuleEngine:
    """
    Applies style guide rules to single words.

    Words with a known grammatical function go through the tagger-aware rules
    first. Everything else, and anything those rules do not settle, goes to the
    static per-style rule, which only looks at word lists and word length.
    """

    def __init__(self, word_lists: Optional[WordLists] = None):
        self.word_lists = word_lists or get_word_lists()
        self.hyphenation = HyphenationRule(self.word_lists)
        self._static_rules: Dict[StyleGuide, StaticRule] = {
            StyleGuide.AMA: self._ama_rules,
            StyleGuide.AP: self._ap_rules,
            StyleGuide.APA: self._apa_rules,
            StyleGuide.BLUEBOOK: self._bluebook_rules,
            StyleGuide.CHICAGO: self._chicago_rules,
            StyleGuide.MLA: self._mla_rules,
            StyleGuide.NEW_YORK_TIMES: self._nyt_rules,
            StyleGuide.WIKIPEDIA: self._wikipedia_rules,
        }

    def apply_style(self, word: str, lower_word: str, is_first: bool, is_last: bool,
                    after_colon: bool, style: Optional[StyleGuide],
                    grammatical_function: Optional[GrammaticalFunction] = None) -> str:
        """
        Recase a single word.

        Args:
            word: The word as it appears in the text
            lower_word: Lowercase form used for list lookups
            is_first: Word is the first word of the text
            is_last: Word is the last word of the text
            after_colon: The separator before the word contains a colon
            style: Style guide, None for an unrecognized style
            grammatical_function: Tagger-derived function, None without a tagger

        Returns:
            The recased word
        """
        if '-' in word.strip('-'):
            return self.hyphenation.apply(word, is_first, style)

        if is_first:
            return capitalize(word)

        if is_last and style not in _LAST_WORD_EXEMPT_STYLES:
            return capitalize(word)

        if after_colon and style == StyleGuide.APA:
            return capitalize(word)

        if grammatical_function is not None and grammatical_function != GrammaticalFunction.UNKNOWN:
            verdict = self.apply_function_rules(word, lower_word, grammatical_function, style)
            if verdict is not None:
                return verdict

        rule = self._static_rules.get(style)
        if rule is None:
            return capitalize(word)
        return rule(word, lower_word)

    # === TAGGER-AWARE RULES ===

    def apply_function_rules(self, word: str, lower_word: str,
                             grammatical_function: GrammaticalFunction,
                             style: Optional[StyleGuide]) -> Optional[str]:
        """Rules keyed by grammatical function. Returns None to defer to the static rules."""
        if grammatical_function in _ALWAYS_CAPITALIZED_FUNCTIONS:
            return capitalize(word)

        if grammatical_function == GrammaticalFunction.ARTICLE:
            return lowercase(word)

        if grammatical_function == GrammaticalFunction.INFINITIVE:
            # AP capitalizes the "to" of an infinitive, everyone else lowercases it
            return capitalize(word) if style == StyleGuide.AP else lowercase(word)

        if grammatical_function == GrammaticalFunction.COORDINATING_CONJUNCTION:
            if style == StyleGuide.CHICAGO and lower_word in ('yet', 'so'):
                return capitalize(word)
            if style == StyleGuide.NEW_YORK_TIMES and lower_word in ('so', 'nor'):
                return capitalize(word)
            return lowercase(word)

        if grammatical_function == GrammaticalFunction.SUBORDINATING_CONJUNCTION:
            if style in _SUBORDINATE_CAPITALIZING_STYLES:
                if style == StyleGuide.CHICAGO and lower_word == 'as':
                    return lowercase(word)
                return capitalize(word)
            if style in (StyleGuide.AP, StyleGuide.APA, StyleGuide.NEW_YORK_TIMES) and len(word) <= 3:
                return lowercase(word)
            return capitalize(word)

        if grammatical_function == GrammaticalFunction.PREPOSITION:
            return self.apply_preposition_rule(word, lower_word, style)

        return None

    def apply_preposition_rule(self, word: str, lower_word: str, style: Optional[StyleGuide]) -> str:
        """Length-based preposition casing per style."""
        if style == StyleGuide.NEW_YORK_TIMES:
            if lower_word in self.word_lists.nyt_lowercase:
                return lowercase(word)
            if lower_word in self.word_lists.nyt_capitalize:
                return capitalize(word)
            return capitalize(word) if len(word) >= 4 else lowercase(word)

        if style not in _PREPOSITION_MAX_LOWERCASE_LENGTH:
            return capitalize(word)

        max_length = _PREPOSITION_MAX_LOWERCASE_LENGTH[style]
        if max_length is None or len(word) <= max_length:
            return lowercase(word)
        return capitalize(word)

    # === STATIC PER-STYLE RULES ===

    def _ama_rules(self, word: str, lower_word: str) -> str:
        lists = self.word_lists
        if lists.is_article(lower_word):
            return lowercase(word)
        if lists.is_coordinating_conjunction(lower_word):
            return lowercase(word)
        if lists.is_preposition(lower_word) and len(word) <= 3:
            return lowercase(word)
        if lower_word == 'to':
            return lowercase(word)
        return capitalize(word)

    def _ap_rules(self, word: str, lower_word: str) -> str:
        lists = self.word_lists
        if len(word) >= 4:
            return capitalize(word)
        if lists.is_article(lower_word):
            return lowercase(word)
        if lists.is_coordinating_conjunction(lower_word) or lists.is_subordinating_conjunction(lower_word):
            return lowercase(word)
        # "to" stays capitalized: AP treats it as the infinitive marker
        if lists.is_preposition(lower_word) and lower_word != 'to':
            return lowercase(word)
        return capitalize(word)

    def _apa_rules(self, word: str, lower_word: str) -> str:
        lists = self.word_lists
        if len(word) >= 4:
            return capitalize(word)
        if lists.is_article(lower_word):
            return lowercase(word)
        if lists.is_coordinating_conjunction(lower_word):
            return lowercase(word)
        if lists.is_subordinating_conjunction(lower_word):
            return lowercase(word)
        if lists.is_preposition(lower_word):
            return lowercase(word)
        return capitalize(word)

    def _bluebook_rules(self, word: str, lower_word: str) -> str:
        # Subordinating conjunctions ("if", "when") are capitalized, unlike Chicago's "as"
        lists = self.word_lists
        if lists.is_article(lower_word):
            return lowercase(word)
        if lists.is_coordinating_conjunction(lower_word):
            return lowercase(word)
        if lists.is_preposition(lower_word) and len(word) <= 4:
            return lowercase(word)
        return capitalize(word)

    def _chicago_rules(self, word: str, lower_word: str) -> str:
        lists = self.word_lists
        if lists.is_article(lower_word):
            return lowercase(word)
        if lower_word in lists.chicago_lowercase_conjunctions:
            return lowercase(word)
        if lower_word in ('as', 'to'):
            return lowercase(word)
        if lists.is_preposition(lower_word) and len(word) <= 4:
            return lowercase(word)
        return capitalize(word)

    def _mla_rules(self, word: str, lower_word: str) -> str:
        lists = self.word_lists
        if lists.is_article(lower_word):
            return lowercase(word)
        if lists.is_coordinating_conjunction(lower_word):
            return lowercase(word)
        if lists.is_preposition(lower_word):
            return lowercase(word)
        if lower_word == 'to':
            return lowercase(word)
        return capitalize(word)

    def _nyt_rules(self, word: str, lower_word: str) -> str:
        lists = self.word_lists
        if len(word) >= 4:
            return capitalize(word)
        if lower_word in lists.nyt_capitalize:
            return capitalize(word)
        if lower_word in lists.nyt_lowercase:
            return lowercase(word)
        return capitalize(word)

    def _wikipedia_rules(self, word: str, lower_word: str) -> str:
        lists = self.word_lists
        if lists.is_article(lower_word):
            return lowercase(word)
        if lists.is_coordinating_conjunction(lower_word):
            return lowercase(word)
        if lists.is_preposition(lower_word) and len(word) <= 4:
            return lowercase(word)
        if lower_word == 'to':
            return lowercase(word)
        return capitalize(word)
