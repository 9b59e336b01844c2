import os
import string
from types import MappingProxyType

LETTER_SCORES = MappingProxyType({
    'A': 1, 'B': 3, 'C': 3, 'D': 2, 'E': 1, 'F': 4, 'G': 2, 'H': 4, 'I': 1, 'J': 8,
    'K': 5, 'L': 1, 'M': 3, 'N': 1, 'O': 1, 'P': 3, 'Q': 10, 'R': 1, 'S': 1, 'T': 1,
    'U': 1, 'V': 4, 'W': 4, 'X': 8, 'Y': 4, 'Z': 10,
})

ALPHABET = string.ascii_uppercase
ALPHABET_SIZE = len(ALPHABET)
BLANK_TILE = '?'
BLANK_SLOT = ALPHABET_SIZE  # Index of the blank count in a rack distribution

NO_RESULTS_MESSAGE = "No results"
RESULT_SEPARATOR = "\r\n"

MAX_INPUT_LENGTH = 15  # Characters accepted per input field

DICTIONARY_FILENAME = 'scrabble_words.txt'
DICTIONARY_PATH = os.environ.get('SCRABBLE_DICTIONARY_PATH')
DICTIONARY_SOURCE = os.environ.get('SCRABBLE_DICTIONARY_SOURCE', 'file')
DICTIONARY_SOURCES = ('file', 'nltk')

MINIMAL_WORD_LIST = ("QI", "ZA", "CAT", "ACT", "DOG", "JO", "AX", "EX",
                     "OX", "XI", "XU", "WORD", "PLAY", "GAME", "TILE", "RACK")
