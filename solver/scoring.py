from .constants import LETTER_SCORES


def letter_value(letter: str) -> int:
    """Point value of a single tile letter; anything outside A-Z is worth 0."""
    if not letter.isascii():
        return 0
    return LETTER_SCORES.get(letter.upper(), 0)


def calculate_word_score(word: str) -> int:
    """Calculate the face value of a word, ignoring board premiums"""
    return sum(letter_value(letter) for letter in word)
