"""
Title Case Tokenizer
Splits text into word and separator tokens without losing a single character.
"""

import bisect
import logging
from typing import List, Optional, Sequence, Tuple

import regex

from .services.vocabulary_service import WordLists, get_word_lists
from .types import TaggedTerm, Token, WordPosition

logger = logging.getLogger(__name__)

# A word is a run of word characters and combining marks joined by single hyphens,
# apostrophes or periods, optionally followed by one period. Whitespace, em/en
# dashes, doubled or free-standing hyphens and all other punctuation end up in
# separator tokens.
_WORD_PATTERN = regex.compile(r"\w[\w\p{M}]*(?:[-'’.]\w[\w\p{M}]*)*\.?")


class Tokenizer:
    """Scans text left to right into Token objects."""

    def __init__(self, word_lists: Optional[WordLists] = None):
        self.word_lists = word_lists or get_word_lists()

    def tokenize(self, text: str, terms: Optional[Sequence[TaggedTerm]] = None) -> List[Token]:
        """
        Split text into tokens.

        Args:
            text: Input text
            terms: Optional tagger output for the same text. Each word token gets
                the term that starts inside its span and the term after it.

        Returns:
            Tokens in input order. Joining their text gives back the input.
        """
        if not text:
            return []

        spans = self._word_spans(text)
        total_words = len(spans)
        terms = sorted(terms or [], key=lambda term: term.start)
        term_starts = [term.start for term in terms]

        tokens: List[Token] = []
        last_index = 0
        after_colon = False

        for word_index, (start, end) in enumerate(spans):
            if start > last_index:
                between = text[last_index:start]
                tokens.append(Token(text=between, is_word=False, start=last_index))
                after_colon = ':' in between

            tag, next_tag = self._align_terms(start, end, terms, term_starts)
            tokens.append(Token(
                text=text[start:end],
                is_word=True,
                start=start,
                position=WordPosition(
                    is_first=word_index == 0,
                    is_last=word_index == total_words - 1,
                ),
                after_colon=after_colon,
                tag=tag,
                next_tag=next_tag,
            ))

            after_colon = False
            last_index = end

        if last_index < len(text):
            tokens.append(Token(text=text[last_index:], is_word=False, start=last_index))

        logger.debug(f"Tokenized {len(text)} chars into {total_words} words and "
                     f"{len(tokens) - total_words} separators")
        return tokens

    def _word_spans(self, text: str) -> List[Tuple[int, int]]:
        spans = []
        for match in _WORD_PATTERN.finditer(text):
            start, end = match.span()
            word = match.group()
            if word.endswith('.') and not self._keeps_trailing_period(word):
                end -= 1
            spans.append((start, end))
        return spans

    def _keeps_trailing_period(self, word: str) -> bool:
        # "U.S." and "e.g." keep their final period, "rings." at a sentence end does not
        if '.' in word[:-1]:
            return True
        return word.lower() in self.word_lists.dotted_abbreviations

    @staticmethod
    def _align_terms(start: int, end: int, terms: Sequence[TaggedTerm],
                     term_starts: List[int]) -> Tuple[Optional[TaggedTerm], Optional[TaggedTerm]]:
        if not terms:
            return None, None

        index = bisect.bisect_left(term_starts, start)
        if index < len(terms) and terms[index].start < end:
            head = index
        elif index > 0 and terms[index - 1].end > start:
            # Term begins before the word, e.g. a tagger token with a leading quote
            head = index - 1
        else:
            return None, None

        next_term = terms[head + 1] if head + 1 < len(terms) else None
        return terms[head], next_term


def tokenize(text: str, terms: Optional[Sequence[TaggedTerm]] = None) -> List[Token]:
    """Tokenize with the process-wide word lists."""
    return Tokenizer().tokenize(text, terms)
