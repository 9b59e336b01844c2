from typing import NamedTuple, Optional


class WordFilters(NamedTuple):
    """Optional positional constraints; an empty or missing value means no constraint."""
    starts_with: Optional[str] = None
    ends_with: Optional[str] = None
    contains: Optional[str] = None

    def is_empty(self) -> bool:
        return not (self.starts_with or self.ends_with or self.contains)


NO_FILTERS = WordFilters()


def starts_with(word: str, prefix: Optional[str]) -> bool:
    if not prefix:
        return True
    return word.upper().startswith(prefix.upper())


def ends_with(word: str, suffix: Optional[str]) -> bool:
    if not suffix:
        return True
    if len(suffix) > len(word):
        return False
    return word[len(word) - len(suffix):].upper() == suffix.upper()


def contains(word: str, fragment: Optional[str]) -> bool:
    if not fragment:
        return True
    return fragment.upper() in word.upper()


def passes_filters(word: str, filters: WordFilters) -> bool:
    return (starts_with(word, filters.starts_with)
            and ends_with(word, filters.ends_with)
            and contains(word, filters.contains))
