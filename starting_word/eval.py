"""
starting_word/eval.py

Rank opening probe words against the whole answer list, before any evidence.

Ranking is the same as the interactive helper's probe list (most pattern
groups first, then smallest average group), with the probe threshold lifted.
Extra columns are reported for comparison:
- worst_case: size of the largest group (lower is better)
- exp_remaining: expected remaining candidates after the first feedback
- entropy: information gain in bits (higher is better)

Usage:
  python -m starting_word.eval
  python -m starting_word.eval --csv word_list.csv --out opening_probes.csv --top 30 --limit-guesses 500
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import List, Sequence

import pandas as pd

from hint_engine.data_utils import load_vocab
from hint_engine.probes import ProbeMetrics, probe_metrics

log = logging.getLogger(__name__)

COLUMNS = ["guess", "partitions", "avg_group_size", "worst_case", "exp_remaining", "entropy"]


def evaluate_opening_probes(
    answers: Sequence[str],
    guesses: Sequence[str] | None = None,
    *,
    progress: bool = False,
) -> pd.DataFrame:
    """
    Score each candidate opening probe against the full answer set.

    Parameters
    ----------
    answers : sequence of str
        Words that could be the answer.
    guesses : sequence of str | None
        Probe words to score. If None, uses `answers`.
    progress : bool
        If True, prints a tiny progress indicator every 50 guesses.

    Returns
    -------
    pandas.DataFrame
        One row per guess with COLUMNS, best first.
    """
    if not answers:
        raise ValueError("answers must be non-empty")
    pool = guesses if guesses is not None else answers

    rows: List[ProbeMetrics] = []
    for i, g in enumerate(pool):
        rows.append(probe_metrics(g, answers))
        if progress and (i + 1) % 50 == 0:
            print(f"Scored {i + 1}/{len(pool)} guesses...", flush=True)

    log.debug("scored %d guesses against %d answers", len(rows), len(answers))

    df = pd.DataFrame(
        [[m.word, m.partitions, m.avg_group_size, m.worst_case, m.expected_remaining, m.entropy] for m in rows],
        columns=COLUMNS,
    )
    # mergesort is stable: ties keep input order
    df = df.sort_values(
        ["partitions", "avg_group_size"], ascending=[False, True], kind="mergesort"
    ).reset_index(drop=True)
    return df


def _print_top(df: pd.DataFrame, k: int = 20) -> None:
    print(f"\nTop {k} opening probes by pattern groups:")
    print(f"{'rank':>4}  {'guess':<8}  {'groups':>6}  {'avg':>7}  {'worst':>5}  {'exp_rem':>8}  {'entropy':>8}")
    for idx, r in enumerate(df.head(k).itertuples(index=False), start=1):
        print(
            f"{idx:>4}  {r.guess:<8}  {r.partitions:>6}  {r.avg_group_size:>7.2f}  "
            f"{r.worst_case:>5}  {r.exp_remaining:>8.2f}  {r.entropy:>8.3f}"
        )


def main():
    ap = argparse.ArgumentParser(description="Rank opening probe words over the full answer list")
    ap.add_argument("--csv", default="word_list.csv", help="Path to the word list")
    ap.add_argument("--out", default="opening_probes.csv", help="Where to write the full ranking")
    ap.add_argument("--top", type=int, default=20, help="How many rows to print")
    ap.add_argument("--limit-guesses", type=int, default=None, help="Only score the first N guesses")
    ap.add_argument("--answers-only", action="store_true", help="Use only rows with a 'day' value as answers")
    ap.add_argument("--verbose", "-v", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    answers = load_vocab(args.csv, answers_only=args.answers_only).words()
    guesses = load_vocab(args.csv).words()
    if args.limit_guesses is not None:
        guesses = guesses[: args.limit_guesses]

    print(f"Scoring {len(guesses)} guesses against {len(answers)} answers...", flush=True)
    t0 = time.perf_counter()
    df = evaluate_opening_probes(answers, guesses, progress=True)
    print(f"Done in {time.perf_counter() - t0:.2f}s", flush=True)
    _print_top(df, k=args.top)
    df.to_csv(args.out, index=False)
    print(f"Wrote results to {args.out}")


if __name__ == "__main__":
    main()
