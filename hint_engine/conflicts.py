"""
conflicts.py

Spots contradictions inside a Constraints value and offers a grid repair.

Derived constraints should not contradict themselves, but a hand-built
Constraints value, or a grid the user re-marked inconsistently, can. An
empty candidate list is then correct; these helpers say why.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Set, Union

from hint_engine.constraints import Constraints
from hint_engine.tiles import Grid, Tile, TileState


class ConflictKind(str, Enum):
    GREEN_ALSO_EXCLUDED = "green-also-excluded"
    YELLOW_ALSO_EXCLUDED = "yellow-also-excluded"
    IMPOSSIBLE_COUNT = "impossible-count"


@dataclass(frozen=True)
class Conflict:
    kind: ConflictKind
    letter: str
    description: str


def detect_conflicts(constraints: Constraints) -> List[Conflict]:
    """Return every contradiction in `constraints`, at most one per (kind, letter)."""
    conflicts: List[Conflict] = []
    excluded = constraints.excluded

    seen: Set[str] = set()
    for pos, letter in sorted(constraints.greens.items()):
        if letter in excluded and letter not in seen:
            seen.add(letter)
            conflicts.append(Conflict(
                ConflictKind.GREEN_ALSO_EXCLUDED,
                letter,
                f'"{letter.upper()}" is green at position {pos + 1} but also marked absent (grey).',
            ))

    for letter in sorted(constraints.yellow_positions):
        if letter in excluded:
            conflicts.append(Conflict(
                ConflictKind.YELLOW_ALSO_EXCLUDED,
                letter,
                f'"{letter.upper()}" is marked present (yellow) but also absent (grey).',
            ))

    for letter in sorted(constraints.min_count):
        lo = constraints.min_count[letter]
        hi = constraints.max_count.get(letter)
        if hi is not None and hi < lo:
            conflicts.append(Conflict(
                ConflictKind.IMPOSSIBLE_COUNT,
                letter,
                f'"{letter.upper()}" needs at least {lo} but at most {hi}, which is impossible.',
            ))

    return conflicts


def resolve_conflict(grid: Grid, conflict: Union[Conflict, str]) -> List[List[Tile]]:
    """
    Return a copy of `grid` with every grey tile of the conflicting letter
    cleared to an empty tile. Accepts a Conflict or a bare letter.
    """
    letter = conflict.letter if isinstance(conflict, Conflict) else conflict.lower()
    repaired: List[List[Tile]] = []
    for row in grid:
        repaired.append([
            Tile() if tile.letter == letter and tile.state == TileState.GREY else tile
            for tile in row
        ])
    return repaired
