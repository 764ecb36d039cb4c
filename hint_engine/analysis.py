"""
analysis.py

Letter-frequency statistics over the remaining candidate set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

import numpy as np

from hint_engine.consts import ALPHABET, EXPLORATION_LIMIT, WORD_LENGTH


@dataclass(frozen=True)
class CandidateAnalysis:
    """
    count                  : number of candidates
    overall_frequency      : letter -> fraction of candidates containing it at least once
    per_position_frequency : position -> letter -> fraction of candidates with it there
    exploration_letters    : letters whose overall frequency is closest to 50%
    """

    count: int
    overall_frequency: Dict[str, float] = field(default_factory=dict)
    per_position_frequency: Dict[int, Dict[str, float]] = field(default_factory=dict)
    exploration_letters: List[str] = field(default_factory=list)


def _column_index(alphabet: Sequence[str]) -> Dict[str, int]:
    return {ch: i for i, ch in enumerate(alphabet)}


def letters_of(candidates: Sequence[str]) -> List[str]:
    """Every distinct character across `candidates`, sorted."""
    return sorted({ch for w in candidates for ch in w})


def position_matrix(candidates: Sequence[str], alphabet: Sequence[str] = ALPHABET) -> np.ndarray:
    """
    Positional letter frequencies as a (WORD_LENGTH, len(alphabet)) float array.

    Entry [pos, i] is the fraction of candidates with alphabet[i] at `pos`.
    Characters outside `alphabet` are not counted. All zeros for an empty
    candidate set.
    """
    index = _column_index(alphabet)
    counts = np.zeros((WORD_LENGTH, len(alphabet)), dtype=np.float64)
    for w in candidates:
        for pos, ch in enumerate(w[:WORD_LENGTH]):
            li = index.get(ch)
            if li is not None:
                counts[pos, li] += 1
    n = len(candidates)
    if n == 0:
        return counts
    return counts / n


def presence_vector(candidates: Sequence[str], alphabet: Sequence[str] = ALPHABET) -> np.ndarray:
    """Fraction of candidates containing each alphabet letter at least once."""
    index = _column_index(alphabet)
    counts = np.zeros(len(alphabet), dtype=np.float64)
    for w in candidates:
        for ch in set(w):
            li = index.get(ch)
            if li is not None:
                counts[li] += 1
    n = len(candidates)
    if n == 0:
        return counts
    return counts / n


def analyze_candidates(
    candidates: Sequence[str], *, exploration_limit: int = EXPLORATION_LIMIT
) -> CandidateAnalysis:
    """
    Compute overall and per-position letter frequencies for `candidates`,
    plus the letters that best split them in half.

    Columns are the characters that actually occur, so words outside a-z
    are counted like any other. A letter seen in half the candidates tells
    you the most when probed, so exploration letters are sorted by
    |frequency - 0.5|, ties in character order.
    """
    n = len(candidates)
    if n == 0:
        return CandidateAnalysis(count=0)

    alphabet = letters_of(candidates)
    presence = presence_vector(candidates, alphabet)
    positions = position_matrix(candidates, alphabet)

    overall = {alphabet[li]: float(presence[li]) for li in np.flatnonzero(presence)}
    per_position = {
        pos: {alphabet[li]: float(positions[pos, li]) for li in np.flatnonzero(positions[pos])}
        for pos in range(WORD_LENGTH)
    }
    exploration = sorted(overall, key=lambda letter: abs(overall[letter] - 0.5))

    return CandidateAnalysis(
        count=n,
        overall_frequency=overall,
        per_position_frequency=per_position,
        exploration_letters=exploration[:exploration_limit],
    )
