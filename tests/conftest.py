"""
Shared fixtures for the title case test suite.
"""

import re
from typing import Dict, Iterable, List, Optional, Sequence

import pytest

from title_case import POSTagger, TaggedTerm
from title_case.services import get_word_lists


class FakeTagger(POSTagger):
    """
    Deterministic tagger for tests.

    Splits text on word characters (so hyphenated compounds become several terms,
    like real taggers do) and reports the part of speech given either per word
    (``tags``) or per position (``sequence``).
    """

    def __init__(self, tags: Optional[Dict[str, str]] = None,
                 sequence: Optional[Sequence[Optional[str]]] = None,
                 phrasal: Iterable[str] = (), acronyms: Iterable[str] = (),
                 conjunction_types: Optional[Dict[str, str]] = None,
                 fail: bool = False):
        self.tags = tags or {}
        self.sequence = list(sequence) if sequence is not None else None
        self.phrasal = set(phrasal)
        self.acronyms = set(acronyms)
        self.conjunction_types = conjunction_types or {}
        self.fail = fail
        self.calls = 0

    def tag(self, text: str) -> List[TaggedTerm]:
        self.calls += 1
        if self.fail:
            raise RuntimeError("tagger backend unavailable")

        terms = []
        for index, match in enumerate(re.finditer(r"\w+", text)):
            lower = match.group().lower()
            if self.sequence is not None:
                pos = self.sequence[index] if index < len(self.sequence) else None
            else:
                pos = self.tags.get(lower)
            terms.append(TaggedTerm(
                text=match.group(),
                start=match.start(),
                end=match.end(),
                pos=pos,
                conjunction_type=self.conjunction_types.get(lower),
                is_phrasal_particle=lower in self.phrasal,
                is_acronym=lower in self.acronyms,
            ))
        return terms


@pytest.fixture
def fake_tagger():
    """Factory for FakeTagger instances."""
    return FakeTagger


@pytest.fixture(scope="session")
def word_lists():
    return get_word_lists()
