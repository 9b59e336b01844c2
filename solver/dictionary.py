import logging
import os
from typing import Iterable, Optional, Tuple

from nltk.corpus import words as nltk_words

from .constants import (DICTIONARY_FILENAME, DICTIONARY_PATH, DICTIONARY_SOURCE,
                        DICTIONARY_SOURCES, MINIMAL_WORD_LIST)

logger = logging.getLogger(__name__)


def _clean_words(lines: Iterable[str]) -> Tuple[str, ...]:
    """Uppercases one word per line, dropping blank lines but keeping order and repeats."""
    cleaned = (line.strip().upper() for line in lines)
    return tuple(word for word in cleaned if word)


def find_dictionary_file() -> Optional[str]:
    possible_paths = [
        DICTIONARY_FILENAME,
        os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(
            __file__))), DICTIONARY_FILENAME),
    ]
    return next((path for path in possible_paths if os.path.exists(path)), None)


def load_word_file(path: str) -> Tuple[str, ...]:
    with open(path, 'r', encoding='utf-8') as f:
        return _clean_words(f)


def load_nltk_words() -> Tuple[str, ...]:
    """Words from the NLTK 'words' corpus; the corpus must already be downloaded."""
    return _clean_words(nltk_words.words())


def load_dictionary(path: Optional[str] = None, source: Optional[str] = None) -> Tuple[str, ...]:
    """
    Loads the word list once for the whole process.
    Never fails on a missing or broken word list: it logs and falls back to a
    small built-in set so the solver keeps answering.
    """
    source = source or DICTIONARY_SOURCE
    if source not in DICTIONARY_SOURCES:
        raise ValueError(
            f"Unknown dictionary source '{source}'. Expected one of {', '.join(DICTIONARY_SOURCES)}.")

    if source == 'nltk':
        try:
            loaded_words = load_nltk_words()
        except LookupError as e:
            logger.warning(
                f"NLTK words corpus unavailable ({e}). Using minimal word set.")
            return MINIMAL_WORD_LIST
        logger.info(f"Loaded {len(loaded_words)} words from NLTK corpus")
        return loaded_words

    dict_path_found = path or DICTIONARY_PATH or find_dictionary_file()
    if not dict_path_found or not os.path.exists(dict_path_found):
        logger.warning(
            f"{dict_path_found or DICTIONARY_FILENAME} not found. Using minimal word set.")
        return MINIMAL_WORD_LIST
    try:
        loaded_words = load_word_file(dict_path_found)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(
            f"Error reading dictionary file {dict_path_found}: {e}. Using minimal word set.")
        return MINIMAL_WORD_LIST
    if not loaded_words:
        logger.warning(
            f"Dictionary file {dict_path_found} was empty. Using minimal word set.")
        return MINIMAL_WORD_LIST
    logger.info(
        f"Successfully loaded {len(loaded_words)} words from {dict_path_found}")
    return loaded_words
