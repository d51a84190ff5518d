"""
Casing primitives for the title case engine.

Both helpers keep the string length unchanged: a character whose upper or lower
form expands to several characters (for example "ß" -> "SS") is left as is.
"""


def _lower_char(char: str) -> str:
    lowered = char.lower()
    return lowered if len(lowered) == 1 else char


def _upper_char(char: str) -> str:
    uppered = char.upper()
    return uppered if len(uppered) == 1 else char


def lowercase(word: str) -> str:
    """Lowercase every character of the word."""
    return ''.join(_lower_char(char) for char in word)


def capitalize(word: str) -> str:
    """
    Uppercase the first character and lowercase the rest.

    Internal capitals are not preserved, so "McDonald" becomes "Mcdonald".
    """
    if not word:
        return word
    return _upper_char(word[0]) + lowercase(word[1:])
