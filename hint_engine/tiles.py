"""
tiles.py

Tile / row / grid data model for the hint engine.

A grid is an ordered sequence of rows; a row is a sequence of WORD_LENGTH
tiles. Grids are plain sequences so any front end can build them; the
helpers here always return new lists and never touch their input.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Sequence, Tuple, Union

from hint_engine.consts import ABSENT, MATCH, MAX_ROWS, PRESENT, WORD_LENGTH


class TileState(str, Enum):
    EMPTY = "empty"
    UNKNOWN = "unknown"
    GREY = "grey"
    YELLOW = "yellow"
    GREEN = "green"


@dataclass(frozen=True)
class Tile:
    letter: str = ""
    state: TileState = TileState.EMPTY

    def __post_init__(self) -> None:
        if not isinstance(self.letter, str):
            raise TypeError("tile letter must be a string")
        if self.letter and (len(self.letter) != 1 or not self.letter.isalpha()):
            raise ValueError(f"tile letter must be empty or a single letter, got {self.letter!r}")
        object.__setattr__(self, "letter", self.letter.lower())
        object.__setattr__(self, "state", TileState(self.state))

    @property
    def has_evidence(self) -> bool:
        """True iff the tile carries a letter with a grey/yellow/green verdict."""
        return bool(self.letter) and self.state in _EVIDENCE_STATES

    @property
    def confirmed(self) -> bool:
        return bool(self.letter) and self.state in (TileState.GREEN, TileState.YELLOW)


_EVIDENCE_STATES = (TileState.GREY, TileState.YELLOW, TileState.GREEN)

Row = Sequence[Tile]
Grid = Sequence[Row]

_CODE_TO_STATE = {
    ABSENT: TileState.GREY,
    PRESENT: TileState.YELLOW,
    MATCH: TileState.GREEN,
}

# green > yellow > grey, used for the keyboard summary
_KEY_PRIORITY = {TileState.GREY: 1, TileState.YELLOW: 2, TileState.GREEN: 3}


def empty_grid(rows: int = MAX_ROWS) -> List[List[Tile]]:
    """Create a blank grid of `rows` x WORD_LENGTH empty tiles."""
    return [[Tile() for _ in range(WORD_LENGTH)] for _ in range(rows)]


def make_row(pairs: Iterable[Tuple[str, Union[TileState, str]]]) -> List[Tile]:
    """Build a row from (letter, state) pairs, e.g. [("a", "green"), ("p", "unknown"), ...]."""
    return [Tile(letter, state) for letter, state in pairs]


def row_from_feedback(guess: str, states: Sequence[Union[TileState, str, int]]) -> List[Tile]:
    """
    Zip a guessed word with its feedback into a row.

    `states` may hold TileState values, their string names, or the 0/1/2
    pattern codes produced by `feedback.score_pattern`.
    """
    if len(guess) != len(states):
        raise ValueError("guess and states must have the same length")
    row: List[Tile] = []
    for ch, st in zip(guess, states):
        if isinstance(st, int) and not isinstance(st, TileState):
            if st not in _CODE_TO_STATE:
                raise ValueError("pattern codes must be in {0,1,2}")
            st = _CODE_TO_STATE[st]
        row.append(Tile(ch, st))
    return row


def row_is_blank(row: Row) -> bool:
    """A row with no letters, or only empty/unknown tiles, carries no evidence."""
    return not any(tile.has_evidence for tile in row)


def key_states(grid: Grid) -> Dict[str, TileState]:
    """Best known state per letter across the whole grid (green > yellow > grey)."""
    states: Dict[str, TileState] = {}
    for row in grid:
        for tile in row:
            if not tile.has_evidence:
                continue
            current = states.get(tile.letter)
            if current is None or _KEY_PRIORITY[tile.state] > _KEY_PRIORITY[current]:
                states[tile.letter] = tile.state
    return states
