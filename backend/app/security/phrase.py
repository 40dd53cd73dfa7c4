# backend/app/security/phrase.py
"""
Checks applied to wallet secret phrases before they are stored.

Only the word count is checked. There is no wordlist or checksum
validation, and the phrase is kept in plaintext.
"""
from typing import List

PHRASE_WORD_COUNT = 12


def split_words(phrase: str) -> List[str]:
    """Split on any run of whitespace, ignoring leading/trailing space."""
    return phrase.split()


def validate_phrase_format(phrase: str) -> bool:
    """
    Validate that a phrase has exactly twelve words.

    Args:
        phrase: The phrase as typed by the user

    Returns:
        True if the phrase has exactly PHRASE_WORD_COUNT words
    """
    if not phrase:
        return False
    return len(split_words(phrase)) == PHRASE_WORD_COUNT
