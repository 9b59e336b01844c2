from typing import Iterable, NamedTuple, Tuple

from .constants import ALPHABET, ALPHABET_SIZE, BLANK_SLOT, BLANK_TILE
from .scoring import letter_value


# Only ASCII letters count as tiles, in either case
LETTER_INDEX = {letter: i for i, letter in enumerate(ALPHABET)}
LETTER_INDEX.update({letter.lower(): i for i, letter in enumerate(ALPHABET)})


class Feasibility(NamedTuple):
    constructible: bool
    score: int


class RackDistribution(tuple):
    """
    Tile counts of a rack: one slot per letter A-Z followed by the blank count.
    Built with build_rack(); immutable like any tuple.
    """

    @property
    def blanks(self) -> int:
        return self[BLANK_SLOT]

    def letter_count(self, letter: str) -> int:
        index = LETTER_INDEX.get(letter)
        return 0 if index is None else self[index]

    def letters(self) -> str:
        """Rack rendered back as sorted tiles, blanks last."""
        tiles = "".join(letter * self[i] for i, letter in enumerate(ALPHABET))
        return tiles + BLANK_TILE * self.blanks


def _count_letters(characters: Iterable[str], slots: int) -> list:
    counts = [0] * slots
    for char in characters:
        index = LETTER_INDEX.get(char)
        if index is not None:
            counts[index] += 1
        elif char == BLANK_TILE and slots > BLANK_SLOT:
            counts[BLANK_SLOT] += 1
    return counts


def build_rack(letters: str) -> RackDistribution:
    """Counts letters and blanks in a rack string, silently skipping anything else."""
    return RackDistribution(_count_letters(letters, ALPHABET_SIZE + 1))


def build_word_distribution(word: str) -> Tuple[int, ...]:
    return tuple(_count_letters(word, ALPHABET_SIZE))


def check_feasibility(word_distribution: Tuple[int, ...], rack: RackDistribution,
                      base_score: int) -> Feasibility:
    """
    Decides whether a word can be laid from the rack.
    Every letter the rack is short of must be covered by a blank; a blank scores
    nothing, so the covered letters' values come off the base score.
    """
    blanks = rack.blanks
    score = base_score
    for index, letter in enumerate(ALPHABET):
        deficit = word_distribution[index] - rack[index]
        if deficit <= 0:
            continue
        if deficit > blanks:
            return Feasibility(False, score)
        blanks -= deficit
        score -= deficit * letter_value(letter)
    return Feasibility(True, score)
