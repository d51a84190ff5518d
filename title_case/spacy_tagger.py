"""
spaCy Tagger
POSTagger implementation backed by a spaCy pipeline.
"""

import logging
from typing import List, Optional

import spacy

from .tagging import POSTagger
from .types import TaggedTerm

logger = logging.getLogger(__name__)

_UPOS_TO_POS = {
    'VERB': 'verb',
    'AUX': 'verb',
    'NOUN': 'noun',
    'PROPN': 'noun',
    'ADJ': 'adjective',
    'ADV': 'adverb',
    'PRON': 'pronoun',
    'ADP': 'preposition',
    'CCONJ': 'conjunction',
    'SCONJ': 'conjunction',
}

_ARTICLES = frozenset({'a', 'an', 'the'})


class SpacyTagger(POSTagger):
    """Tags text with spaCy's universal part-of-speech labels."""

    def __init__(self, nlp):
        self.nlp = nlp

    @classmethod
    def load(cls, model_name: str = 'en_core_web_sm') -> 'SpacyTagger':
        """Load a spaCy model. Raises OSError when the model is not installed."""
        nlp = spacy.load(model_name)
        logger.info(f"SpaCy model '{model_name}' loaded for title case tagging")
        return cls(nlp)

    def tag(self, text: str) -> List[TaggedTerm]:
        doc = self.nlp(text)
        return [self.to_term(token) for token in doc if not token.is_space]

    @staticmethod
    def to_term(token) -> TaggedTerm:
        """Map one spaCy token to a TaggedTerm."""
        upos = token.pos_
        pos = _UPOS_TO_POS.get(upos)
        conjunction_type = None
        is_phrasal_particle = False

        if upos == 'ADP' and (token.tag_ == 'RP' or token.dep_ == 'prt'):
            # Verb particle ("give up"): no part of speech, flagged instead
            pos = None
            is_phrasal_particle = True
        elif upos == 'DET':
            pos = 'article' if token.text.lower() in _ARTICLES else None
        elif upos == 'PART' and token.tag_ == 'RB':
            # "not"
            pos = 'adverb'
        elif upos == 'CCONJ':
            conjunction_type = 'coordinating'
        elif upos == 'SCONJ':
            conjunction_type = 'subordinating'

        return TaggedTerm(
            text=token.text,
            start=token.idx,
            end=token.idx + len(token.text),
            pos=pos,
            conjunction_type=conjunction_type,
            is_phrasal_particle=is_phrasal_particle,
            is_acronym=token.is_upper and upos != 'DET',
        )


def load_spacy_tagger(model_name: str = 'en_core_web_sm') -> Optional[SpacyTagger]:
    """Load a SpacyTagger, or return None when the model is missing."""
    try:
        return SpacyTagger.load(model_name)
    except OSError:
        logger.warning(f"SpaCy model '{model_name}' not found, title case will use word lists only")
        return None
