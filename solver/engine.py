import logging
from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Sequence

from .constants import NO_RESULTS_MESSAGE, RESULT_SEPARATOR
from .filters import NO_FILTERS, WordFilters, passes_filters
from .rack import build_rack, build_word_distribution, check_feasibility
from .scoring import calculate_word_score

logger = logging.getLogger(__name__)


class SortMode(str, Enum):
    UNSET = "unset"  # No choice made yet; sorts like POINTS
    POINTS = "points"
    LENGTH = "length"

    def resolve(self) -> "SortMode":
        return SortMode.POINTS if self is SortMode.UNSET else self


DEFAULT_SORT_MODE = SortMode.POINTS


class Candidate(NamedTuple):
    word: str
    score: int

    def __str__(self) -> str:
        return f"{self.word} ({self.score})"


def find_candidates(dictionary: Iterable[str], letters: str,
                    filters: WordFilters = NO_FILTERS) -> List[Candidate]:
    """
    Collects every dictionary word that can be built from the rack, in dictionary order.
    Repeated dictionary entries are reported once per occurrence.
    """
    rack = build_rack(letters)
    candidates = []
    for word in dictionary:
        if not passes_filters(word, filters):
            continue
        feasibility = check_feasibility(
            build_word_distribution(word), rack, calculate_word_score(word))
        if feasibility.constructible:
            candidates.append(Candidate(word, feasibility.score))
    logger.debug(
        f"Rack '{rack.letters()}' matched {len(candidates)} words")
    return candidates


def _points_key(candidate: Candidate):
    return candidate.score, len(candidate.word), candidate.word


def _length_key(candidate: Candidate):
    return len(candidate.word), candidate.word


def sort_candidates(candidates: Iterable[Candidate],
                    mode: Optional[SortMode] = None) -> List[Candidate]:
    """Lowest score (or shortest word) first; ties go to the shorter word, then alphabetical order."""
    mode = (mode or DEFAULT_SORT_MODE).resolve()
    key = _length_key if mode is SortMode.LENGTH else _points_key
    return sorted(candidates, key=key)


def format_results(candidates: Sequence[Candidate]) -> str:
    if not candidates:
        return NO_RESULTS_MESSAGE
    return RESULT_SEPARATOR.join(str(candidate) for candidate in candidates)


def solve(dictionary: Iterable[str], letters: str,
          filters: WordFilters = NO_FILTERS,
          mode: Optional[SortMode] = None) -> List[Candidate]:
    return sort_candidates(find_candidates(dictionary, letters, filters), mode)


def solve_to_text(dictionary: Iterable[str], letters: str,
                  filters: WordFilters = NO_FILTERS,
                  mode: Optional[SortMode] = None) -> str:
    return format_results(solve(dictionary, letters, filters, mode))
