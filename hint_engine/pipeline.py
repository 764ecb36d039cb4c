"""
pipeline.py

One-call evaluation of a grid: constraints, candidates, frequency analysis,
probe ranking and conflicts, all recomputed from scratch.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from hint_engine.analysis import CandidateAnalysis, analyze_candidates
from hint_engine.conflicts import Conflict, detect_conflicts
from hint_engine.consts import DEFAULT_PROBE_LIMIT, PROBE_THRESHOLD
from hint_engine.constraints import Constraints, derive_constraints, filter_candidates
from hint_engine.probes import ProbeWord, rank_probes
from hint_engine.tiles import Grid

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class HintReport:
    constraints: Constraints
    candidates: List[str]
    analysis: CandidateAnalysis
    probes: List[ProbeWord]
    conflicts: List[Conflict]


def evaluate_grid(
    grid: Grid,
    vocabulary: Sequence[str],
    *,
    probe_limit: int = DEFAULT_PROBE_LIMIT,
    probe_threshold: Optional[int] = PROBE_THRESHOLD,
) -> HintReport:
    constraints = derive_constraints(grid)
    candidates = filter_candidates(vocabulary, constraints)
    report = HintReport(
        constraints=constraints,
        candidates=candidates,
        analysis=analyze_candidates(candidates),
        probes=rank_probes(candidates, vocabulary, probe_limit, threshold=probe_threshold),
        conflicts=detect_conflicts(constraints),
    )
    log.debug(
        "grid evaluated: %d/%d candidates, %d conflicts",
        len(candidates), len(vocabulary), len(report.conflicts),
    )
    return report
