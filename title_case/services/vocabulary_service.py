"""
Title Case Vocabulary Service

Loads the YAML word-classification tables used by the title case engine and
exposes them as immutable lookup sets.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, FrozenSet, Iterable, Optional

import yaml

logger = logging.getLogger(__name__)

VOCABULARY_FILE = "title_case_vocabulary.yaml"


@dataclass(frozen=True)
class WordLists:
    """Read-only word tables. All entries are lowercase."""
    articles: FrozenSet[str] = frozenset()
    coordinating_conjunctions: FrozenSet[str] = frozenset()
    chicago_lowercase_conjunctions: FrozenSet[str] = frozenset()
    subordinating_conjunctions: FrozenSet[str] = frozenset()
    prepositions_1: FrozenSet[str] = frozenset()
    prepositions_2: FrozenSet[str] = frozenset()
    prepositions_3: FrozenSet[str] = frozenset()
    prepositions_4: FrozenSet[str] = frozenset()
    prepositions_5_plus: FrozenSet[str] = frozenset()
    nyt_lowercase: FrozenSet[str] = frozenset()
    nyt_capitalize: FrozenSet[str] = frozenset()
    ambiguous_particles: FrozenSet[str] = frozenset()
    dotted_abbreviations: FrozenSet[str] = frozenset()

    @property
    def prepositions(self) -> FrozenSet[str]:
        return (self.prepositions_1 | self.prepositions_2 | self.prepositions_3 |
                self.prepositions_4 | self.prepositions_5_plus)

    def is_article(self, lower_word: str) -> bool:
        return lower_word in self.articles

    def is_coordinating_conjunction(self, lower_word: str) -> bool:
        return lower_word in self.coordinating_conjunctions

    def is_subordinating_conjunction(self, lower_word: str) -> bool:
        return lower_word in self.subordinating_conjunctions

    def is_preposition(self, lower_word: str) -> bool:
        return (lower_word in self.prepositions_1 or
                lower_word in self.prepositions_2 or
                lower_word in self.prepositions_3 or
                lower_word in self.prepositions_4 or
                lower_word in self.prepositions_5_plus)


class TitleCaseVocabularyService:
    """
    Service for the title case vocabulary YAML.

    Features:
    - Lazy loading with caching
    - Immutable WordLists snapshot for the rule engine
    - Runtime reload for vocabulary updates
    """

    def __init__(self, config_dir: Optional[str] = None):
        if config_dir is None:
            # Vocabulary lives in title_case/config next to the package modules
            config_dir = Path(__file__).parent.parent / "config"

        self.config_dir = Path(config_dir)
        self._cache: Dict[str, Dict[str, Any]] = {}

    def _load_yaml_file(self, filename: str) -> Dict[str, Any]:
        """Load and cache a YAML vocabulary file."""
        if filename in self._cache:
            return self._cache[filename]

        file_path = self.config_dir / filename

        if not file_path.exists():
            logger.error(f"Vocabulary file {file_path} not found. Using empty vocabulary.")
            self._cache[filename] = {}
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except (yaml.YAMLError, OSError) as e:
            logger.error(f"Error loading vocabulary file {file_path}: {e}")
            self._cache[filename] = {}
            return {}

        if not isinstance(data, dict):
            logger.error(f"Vocabulary file {file_path} is not a mapping. Using empty vocabulary.")
            data = {}

        self._cache[filename] = data
        logger.debug(f"Loaded title case vocabulary: {filename}")
        return data

    def reload_vocabulary(self, filename: str = VOCABULARY_FILE) -> None:
        """Reload a specific vocabulary file (useful for runtime updates)."""
        self._cache.pop(filename, None)
        self._load_yaml_file(filename)

    def get_vocabulary(self) -> Dict[str, Any]:
        """Get the raw title case vocabulary mapping."""
        return self._load_yaml_file(VOCABULARY_FILE)

    def build_word_lists(self) -> WordLists:
        """Build an immutable WordLists snapshot from the loaded vocabulary."""
        data = self.get_vocabulary()
        prepositions = data.get('prepositions') or {}
        nyt = data.get('new_york_times') or {}

        return WordLists(
            articles=_to_set(data.get('articles')),
            coordinating_conjunctions=_to_set(data.get('coordinating_conjunctions')),
            chicago_lowercase_conjunctions=_to_set(data.get('chicago_lowercase_conjunctions')),
            subordinating_conjunctions=_to_set(data.get('subordinating_conjunctions')),
            prepositions_1=_to_set(prepositions.get('one_letter')),
            prepositions_2=_to_set(prepositions.get('two_letters')),
            prepositions_3=_to_set(prepositions.get('three_letters')),
            prepositions_4=_to_set(prepositions.get('four_letters')),
            prepositions_5_plus=_to_set(prepositions.get('five_or_more_letters')),
            nyt_lowercase=_to_set(nyt.get('lowercase')),
            nyt_capitalize=_to_set(nyt.get('capitalize')),
            ambiguous_particles=_to_set(data.get('ambiguous_particles')),
            dotted_abbreviations=_to_set(data.get('dotted_abbreviations')),
        )


def _to_set(values: Optional[Iterable[Any]]) -> FrozenSet[str]:
    if not values:
        return frozenset()
    return frozenset(str(value).strip().lower() for value in values)


# === GLOBAL SERVICE INSTANCE ===

_vocabulary_service: Optional[TitleCaseVocabularyService] = None


def get_title_case_vocabulary() -> TitleCaseVocabularyService:
    """Get the title case vocabulary service instance."""
    global _vocabulary_service
    if _vocabulary_service is None:
        _vocabulary_service = TitleCaseVocabularyService()
    return _vocabulary_service


@lru_cache(maxsize=1)
def get_word_lists() -> WordLists:
    """Process-wide word tables, built once on first use."""
    word_lists = get_title_case_vocabulary().build_word_lists()
    logger.info(
        f"Title case vocabulary ready: {len(word_lists.prepositions)} prepositions, "
        f"{len(word_lists.subordinating_conjunctions)} subordinating conjunctions"
    )
    return word_lists


def reload_word_lists() -> WordLists:
    """
    Re-read the vocabulary file and rebuild the process-wide word tables.

    Components built earlier keep the WordLists they were given. Create new
    converters to pick up the reloaded tables.
    """
    get_title_case_vocabulary().reload_vocabulary()
    get_word_lists.cache_clear()
    return get_word_lists()
