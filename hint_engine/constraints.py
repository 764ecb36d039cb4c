"""
constraints.py

Derives Wordle-style constraints from grid evidence and filters candidate words.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Set

from hint_engine.tiles import Grid, Row, TileState, row_is_blank

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Constraints:
    """
    The compiled, row-independent summary of all evidence in a grid.

    A letter missing from a mapping carries no constraint of that kind.

    greens           : position -> required letter
    yellow_positions : letter -> positions the letter is known NOT to occupy
    min_count        : letter -> minimum occurrences in the answer
    max_count        : letter -> maximum occurrences, only when a row proves it
    excluded         : letters proven absent
    """

    greens: Mapping[int, str] = field(default_factory=dict)
    yellow_positions: Mapping[str, FrozenSet[int]] = field(default_factory=dict)
    min_count: Mapping[str, int] = field(default_factory=dict)
    max_count: Mapping[str, int] = field(default_factory=dict)
    excluded: FrozenSet[str] = frozenset()

    def __post_init__(self) -> None:
        # Freeze whatever the caller handed in
        object.__setattr__(self, "greens", MappingProxyType(dict(self.greens)))
        object.__setattr__(
            self,
            "yellow_positions",
            MappingProxyType({k: frozenset(v) for k, v in self.yellow_positions.items()}),
        )
        object.__setattr__(self, "min_count", MappingProxyType(dict(self.min_count)))
        object.__setattr__(self, "max_count", MappingProxyType(dict(self.max_count)))
        object.__setattr__(self, "excluded", frozenset(self.excluded))

    def __hash__(self) -> int:
        return hash((
            frozenset(self.greens.items()),
            frozenset(self.yellow_positions.items()),
            frozenset(self.min_count.items()),
            frozenset(self.max_count.items()),
            self.excluded,
        ))

    def is_empty(self) -> bool:
        return not (self.greens or self.yellow_positions or self.min_count
                    or self.max_count or self.excluded)

    def to_dict(self) -> dict:
        """Plain, JSON-friendly rendering (sets become sorted lists)."""
        return {
            "greens": {int(k): v for k, v in sorted(self.greens.items())},
            "yellow_positions": {k: sorted(v) for k, v in sorted(self.yellow_positions.items())},
            "min_count": dict(sorted(self.min_count.items())),
            "max_count": dict(sorted(self.max_count.items())),
            "excluded": sorted(self.excluded),
        }


@dataclass(frozen=True)
class RowTally:
    """Per-letter counts for a single row."""

    total: Mapping[str, int]
    confirmed: Mapping[str, int]  # green or yellow
    grey: Mapping[str, int]


def tally_row(row: Row) -> RowTally:
    """Count, per letter, all occurrences, confirmed (green/yellow) ones and grey ones."""
    total: Counter = Counter()
    confirmed: Counter = Counter()
    grey: Counter = Counter()
    for tile in row:
        if not tile.letter:
            continue
        total[tile.letter] += 1
        if tile.confirmed:
            confirmed[tile.letter] += 1
        elif tile.state == TileState.GREY:
            grey[tile.letter] += 1
    return RowTally(total=dict(total), confirmed=dict(confirmed), grey=dict(grey))


def derive_constraints(grid: Grid) -> Constraints:
    """
    Fold every evidence-bearing row of `grid` into a single Constraints value.

    Duplicate handling mirrors official scoring. Within one guess, at most as
    many copies of a letter are coloured as the answer contains, and the
    excess copies are grey. So:
    - N confirmed copies in a row        -> min_count >= N
    - confirmed AND grey copies in a row -> max_count <= N (exact count)
    - grey copies only                   -> letter excluded, unless
                                            confirmed somewhere else
    Bounds only ever tighten across rows.
    """
    greens: Dict[int, str] = {}
    yellow_positions: Dict[str, Set[int]] = {}
    min_count: Dict[str, int] = {}
    max_count: Dict[str, int] = {}
    excluded: Set[str] = set()

    for row in grid:
        if row_is_blank(row):
            continue

        tally = tally_row(row)

        for letter, k in tally.confirmed.items():
            min_count[letter] = max(min_count.get(letter, 0), k)
            if tally.grey.get(letter, 0) > 0:
                if letter not in max_count or k < max_count[letter]:
                    max_count[letter] = k

        for pos, tile in enumerate(row):
            if not tile.letter:
                continue
            if tile.state == TileState.GREEN:
                greens[pos] = tile.letter
            elif tile.state == TileState.YELLOW:
                yellow_positions.setdefault(tile.letter, set()).add(pos)
            elif tile.state == TileState.GREY and not tally.confirmed.get(tile.letter):
                excluded.add(tile.letter)

    # Confirmation in any row overrides a grey in another
    excluded -= {letter for letter, k in min_count.items() if k > 0}
    excluded -= set(yellow_positions)
    excluded -= set(greens.values())

    constraints = Constraints(
        greens=greens,
        yellow_positions=yellow_positions,
        min_count=min_count,
        max_count=max_count,
        excluded=frozenset(excluded),
    )
    log.debug("derived constraints: %s", constraints.to_dict())
    return constraints


def word_satisfies(word: str, constraints: Constraints) -> bool:
    """True iff `word` passes every green, excluded, yellow and count check."""
    for pos, letter in constraints.greens.items():
        if pos >= len(word) or word[pos] != letter:
            return False

    for letter in constraints.excluded:
        if letter in word:
            return False

    for letter, bad_positions in constraints.yellow_positions.items():
        if letter not in word:
            return False
        for pos in bad_positions:
            if pos < len(word) and word[pos] == letter:
                return False

    if constraints.min_count or constraints.max_count:
        counts = Counter(word)
        for letter, k in constraints.min_count.items():
            if counts[letter] < k:
                return False
        for letter, k in constraints.max_count.items():
            if counts[letter] > k:
                return False

    return True


def filter_candidates(words: Iterable[str], constraints: Constraints) -> List[str]:
    """
    Keep only the words consistent with `constraints`, preserving input order.
    Empty constraints return every word.
    """
    candidates = [w for w in words if word_satisfies(w, constraints)]
    log.debug("%d candidates survive filtering", len(candidates))
    return candidates
