"""
probes.py

Scores probe words by how finely they split the remaining candidates.

A probe's feedback against each candidate sorts the candidates into buckets
(partitions). More buckets means the probe's colours say more, whichever
candidate turns out to be the answer.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass
from math import log2
from typing import Dict, List, NamedTuple, Optional, Sequence, Tuple

from hint_engine.consts import DEFAULT_PROBE_LIMIT, PROBE_THRESHOLD
from hint_engine.feedback import pattern_tuple

log = logging.getLogger(__name__)


class GuessScore(NamedTuple):
    partitions: int
    avg_group_size: float


@dataclass(frozen=True)
class ProbeWord:
    word: str
    partitions: int
    avg_group_size: float
    is_candidate: bool


@dataclass(frozen=True)
class ProbeMetrics:
    word: str
    partitions: int
    avg_group_size: float
    worst_case: int
    expected_remaining: float
    entropy: float


def _pattern_histogram(guess: str, candidates: Sequence[str]) -> Dict[Tuple[int, ...], int]:
    counts: Dict[Tuple[int, ...], int] = defaultdict(int)
    for answer in candidates:
        counts[pattern_tuple(guess, answer)] += 1
    return counts


def score_guess(guess: str, candidates: Sequence[str]) -> GuessScore:
    """
    Partition `candidates` by the pattern `guess` would get against each.

    Returns (partitions, avg_group_size) with
    avg_group_size = len(candidates) / partitions. An empty candidate set
    scores (0, 0.0).
    """
    counts = _pattern_histogram(guess, candidates)
    partitions = len(counts)
    if partitions == 0:
        return GuessScore(0, 0.0)
    return GuessScore(partitions, len(candidates) / partitions)


def probe_metrics(guess: str, candidates: Sequence[str]) -> ProbeMetrics:
    """
    Richer split statistics for reporting: worst-case bucket size, expected
    remaining candidates (sum of squared bucket sizes over N) and entropy in
    bits. Ranking by `rank_probes` does not use these.
    """
    counts = _pattern_histogram(guess, candidates)
    n = len(candidates)
    if n == 0:
        return ProbeMetrics(guess, 0, 0.0, 0, 0.0, 0.0)
    entropy = 0.0
    for c in counts.values():
        p = c / n
        entropy -= p * log2(p)
    return ProbeMetrics(
        word=guess,
        partitions=len(counts),
        avg_group_size=n / len(counts),
        worst_case=max(counts.values()),
        expected_remaining=sum(c * c for c in counts.values()) / n,
        entropy=entropy,
    )


def rank_probes(
    candidates: Sequence[str],
    vocabulary: Sequence[str],
    limit: int = DEFAULT_PROBE_LIMIT,
    *,
    threshold: Optional[int] = PROBE_THRESHOLD,
) -> List[ProbeWord]:
    """
    Rank every vocabulary word as a probe against `candidates`.

    Order: partitions descending, then avg_group_size ascending, then
    vocabulary order. Returns at most `limit` results.

    Nothing is scored (empty result) when there are no candidates or more
    than `threshold` of them; pass threshold=None to always score.
    """
    n = len(candidates)
    if n == 0:
        return []
    if threshold is not None and n > threshold:
        log.debug("skipping probe ranking: %d candidates > threshold %d", n, threshold)
        return []

    candidate_set = set(candidates)
    results: List[ProbeWord] = []
    for word in vocabulary:
        partitions, avg = score_guess(word, candidates)
        results.append(ProbeWord(word, partitions, avg, word in candidate_set))

    # sort is stable, so ties keep vocabulary order
    results.sort(key=lambda r: (-r.partitions, r.avg_group_size))
    log.debug("scored %d probes against %d candidates", len(results), n)
    return results[:max(0, limit)]
