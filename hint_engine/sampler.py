from __future__ import annotations

import random
from typing import List, Sequence

from hint_engine.consts import SAMPLE_SIZE


class WordSampler:
    """Random examples from a word list; deterministic when seeded."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def sample(self, words: Sequence[str], k: int = SAMPLE_SIZE) -> List[str]:
        """Up to `k` distinct words from `words`, in random order."""
        if not isinstance(k, int) or k < 0:
            raise ValueError("k must be a non-negative integer")
        return self._rng.sample(list(words), min(k, len(words)))
