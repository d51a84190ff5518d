from .vocabulary_service import (
    TitleCaseVocabularyService,
    WordLists,
    get_title_case_vocabulary,
    get_word_lists,
    reload_word_lists,
)

__all__ = [
    'TitleCaseVocabularyService',
    'WordLists',
    'get_title_case_vocabulary',
    'get_word_lists',
    'reload_word_lists',
]
