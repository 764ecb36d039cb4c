from __future__ import annotations

import logging
from typing import Iterator, List

import pandas as pd

from hint_engine.consts import WORD_LENGTH

log = logging.getLogger(__name__)


def _clean(raw_iter, *, word_len: int, lowercase: bool, dedupe: bool) -> List[str]:
    clean: List[str] = []
    seen = set()
    for val in raw_iter:
        if not isinstance(val, str):
            val = str(val) if val is not None else ""
        w = val.strip()
        w = w.lower() if lowercase else w

        if len(w) != word_len or not w.isalpha() or not w.isascii():
            continue

        if dedupe:
            if w in seen:
                continue
            seen.add(w)

        clean.append(w)
    return clean


class WordVocab:
    """
    Ordered, deduplicated, read-only list of lowercase 5-letter words.

    Iterating a WordVocab yields its words in load order, so it can be
    handed straight to `filter_candidates` and `rank_probes`.
    """

    def __init__(self, words: List[str]) -> None:
        if not isinstance(words, list):
            raise TypeError("`words` must be a list of strings")
        if not all(isinstance(w, str) for w in words):
            raise TypeError("all items in `words` must be str")
        bad = [w for w in words if len(w) != WORD_LENGTH or not (w.isalpha() and w.isascii() and w.islower())]
        if bad:
            raise ValueError(f"words must be lowercase a-z of length {WORD_LENGTH}, got {bad[:3]!r}")

        # Enforce uniqueness (first occurrence policy should be handled by the loaders)
        if len(set(words)) != len(words):
            raise ValueError("duplicate words detected; input to WordVocab must be deduplicated")

        self._words: tuple[str, ...] = tuple(words)
        self._index = {w: i for i, w in enumerate(self._words)}

    # ---------- Construction helpers ----------

    @classmethod
    def from_csv(
        cls,
        path: str,
        column: str = "word",
        *,
        word_len: int = WORD_LENGTH,
        lowercase: bool = True,
        dedupe: bool = True,
        answers_only: bool = False,
    ) -> "WordVocab":
        """
        Load words from a CSV and build a WordVocab.

        Parameters
        ----------
        path : str
            Path to CSV file.
        column : str
            Column name containing words.
        word_len : int, default=5
            Required word length.
        lowercase : bool, default=True
            If True, lowercase words before validation.
        dedupe : bool, default=True
            If True, keep the first occurrence and drop later duplicates.
        answers_only : bool, default=False
            If True, keep only rows whose 'day' column is set (official answers).

        Raises
        ------
        FileNotFoundError, KeyError, ValueError
        """
        df = pd.read_csv(path)
        if column not in df.columns:
            raise KeyError(f"column '{column}' not found in {path}")
        if answers_only:
            if "day" not in df.columns:
                raise KeyError(f"column 'day' not found in {path}")
            df = df[df["day"].notna()]

        clean = _clean(df[column].tolist(), word_len=word_len, lowercase=lowercase, dedupe=dedupe)
        if not clean:
            raise ValueError("no valid words after filtering")

        log.info("loaded %d words from %s", len(clean), path)
        return cls(clean)

    @classmethod
    def from_text(cls, path: str, *, word_len: int = WORD_LENGTH) -> "WordVocab":
        """Load one word per line from a plain text file."""
        with open(path, "r", encoding="utf-8") as f:
            clean = _clean(f, word_len=word_len, lowercase=True, dedupe=True)
        if not clean:
            raise ValueError("no valid words after filtering")
        log.info("loaded %d words from %s", len(clean), path)
        return cls(clean)

    # ---------- Basic protocol ----------

    def __len__(self) -> int:
        """Number of words in the vocabulary."""
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._index

    def words(self) -> List[str]:
        """Return a copy of the internal word list."""
        return list(self._words)

    def index_of(self, word: str) -> int:
        """Return the index for `word`; raise KeyError if unknown."""
        try:
            return self._index[word]
        except KeyError:
            raise KeyError(f"unknown word: {word}") from None
