"""
Title Case Converter
Public entry point tying together tokenizer, classifier and style rule engine.
"""

import logging
from typing import List, Optional, Union

from .classifier import GrammaticalClassifier
from .services.vocabulary_service import WordLists, get_word_lists
from .style_rules import StyleRuleEngine
from .tagging import POSTagger
from .tokenizer import Tokenizer
from .types import StyleGuide, TaggedTerm

logger = logging.getLogger(__name__)

StyleLike = Union[StyleGuide, str, None]


class TitleCaseConverter:
    """
    Converts text to title case for a chosen style guide.

    The converter holds a default style and an optional tagger. It keeps no
    per-call state, so one instance can serve concurrent callers.
    """

    def __init__(self, style: StyleLike = StyleGuide.CHICAGO, tagger: Optional[POSTagger] = None,
                 word_lists: Optional[WordLists] = None):
        self.word_lists = word_lists or get_word_lists()
        self.default_style = style
        self.tagger = tagger
        self.tokenizer = Tokenizer(self.word_lists)
        self.classifier = GrammaticalClassifier(self.word_lists)
        self.rule_engine = StyleRuleEngine(self.word_lists)

    def convert(self, text: str, style: StyleLike = None) -> str:
        """
        Convert text to title case.

        Args:
            text: Input text
            style: Style guide for this call, defaults to the converter's style

        Returns:
            The recased text. Empty or whitespace-only input comes back unchanged.
        """
        if not text or not text.strip():
            return text

        resolved = resolve_style(style if style is not None else self.default_style)

        terms = self._tag(text)
        tokens = self.tokenizer.tokenize(text, terms)
        if terms:
            self.classifier.classify_tokens(tokens)

        result = []
        for token in tokens:
            if not token.is_word:
                result.append(token.text)
                continue
            result.append(self.rule_engine.apply_style(
                token.text,
                token.text.lower(),
                token.is_first,
                token.is_last,
                token.after_colon,
                resolved,
                token.grammatical_function,
            ))

        logger.debug(f"Converted {len(tokens)} tokens with style "
                     f"{resolved.value if resolved else 'unrecognized'} (tagged={bool(terms)})")
        return ''.join(result)

    def convert_selection(self, document: str, start: int, end: int, style: StyleLike = None) -> str:
        """
        Title-case only document[start:end] and return the whole document.

        Offsets are clamped to the document. An empty selection changes nothing.
        """
        start = max(0, min(start, len(document)))
        end = max(start, min(end, len(document)))
        if start == end:
            return document
        return document[:start] + self.convert(document[start:end], style) + document[end:]

    def _tag(self, text: str) -> List[TaggedTerm]:
        if self.tagger is None:
            return []
        try:
            return list(self.tagger.tag(text))
        except Exception as e:
            logger.warning(f"Tagger failed, falling back to word lists: {e}")
            return []


def resolve_style(style: StyleLike) -> Optional[StyleGuide]:
    """Resolve a style identifier. Unknown identifiers give None (capitalize-all rules)."""
    resolved = StyleGuide.parse(style)
    if resolved is None:
        logger.warning(f"Unrecognized style guide {style!r}; capitalizing all words")
    return resolved


def convert_to_title_case(text: str, style: StyleLike = StyleGuide.CHICAGO,
                          tagger: Optional[POSTagger] = None) -> str:
    """Convert text to title case with the given style guide and optional tagger."""
    return TitleCaseConverter(style=style, tagger=tagger).convert(text)
