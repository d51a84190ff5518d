"""
Title Case Engine

Converts text to title case following one of eight style guides, optionally
guided by a part-of-speech tagger.

Usage:
    from title_case import convert_to_title_case, StyleGuide

    convert_to_title_case("rise of the machines", StyleGuide.CHICAGO)
    # "Rise of the Machines"
"""

from .casing import capitalize, lowercase
from .classifier import GrammaticalClassifier
from .converter import TitleCaseConverter, convert_to_title_case, resolve_style
from .hyphenation import HyphenationRule
from .style_rules import StyleRuleEngine
from .tagging import POSTagger
from .tokenizer import Tokenizer, tokenize
from .types import GrammaticalFunction, StyleGuide, TaggedTerm, Token, WordPosition

__all__ = [
    # Main interfaces
    'convert_to_title_case',
    'TitleCaseConverter',
    'StyleGuide',
    'POSTagger',

    # Pipeline stages
    'Tokenizer',
    'tokenize',
    'GrammaticalClassifier',
    'StyleRuleEngine',
    'HyphenationRule',
    'resolve_style',

    # Types
    'GrammaticalFunction',
    'TaggedTerm',
    'Token',
    'WordPosition',

    # Casing primitives
    'capitalize',
    'lowercase',
]

__version__ = '1.0.0'
