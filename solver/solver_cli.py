"""
solver/solver_cli.py

Interactive Wordle hint helper (human-in-the-loop):
- YOU type each word you guessed and the colours the game showed you.
- Colours accepted as: 'gybby', '21001', a Python-like list '[0, 0, 2, 2, 2]',
  with '?' or '.' for a tile you have not coloured yet.
- After every row the helper shows how many words are still possible,
  letters worth probing, probe words that split the candidates best, and any
  contradictions in what you entered. It never tells you the answer.

Run:
  python -m solver.solver_cli --csv word_list.csv

Commands (at the guess prompt):
  undo            -> drop the last row
  reset           -> start over
  fix <letter>    -> clear grey tiles of a conflicting letter
  sample          -> show random example candidates
  list            -> show every candidate (when there are few enough)
  quit / q / exit -> exit
"""
from __future__ import annotations

import argparse
import logging
import re
from typing import List, Optional

from hint_engine.conflicts import resolve_conflict
from hint_engine.consts import ABSENT, DEFAULT_PROBE_LIMIT, MATCH, MAX_ROWS, PRESENT, PROBE_THRESHOLD, SAMPLE_SIZE, WORD_LENGTH
from hint_engine.data_utils import load_vocab
from hint_engine.feedback import pattern_to_string
from hint_engine.pipeline import HintReport, evaluate_grid
from hint_engine.sampler import WordSampler
from hint_engine.tiles import Grid, Row, Tile, TileState, key_states, row_from_feedback, row_is_blank

LIST_LIMIT = 200
QUIT_WORDS = {"q", "quit", "exit"}

_STATE_CHARS = {
    "g": TileState.GREEN, "2": TileState.GREEN,
    "y": TileState.YELLOW, "1": TileState.YELLOW,
    "b": TileState.GREY, "0": TileState.GREY,
    "?": TileState.UNKNOWN, ".": TileState.UNKNOWN,
}
_STATE_CODES = {TileState.GREY: ABSENT, TileState.YELLOW: PRESENT, TileState.GREEN: MATCH}


def parse_feedback(s: str) -> List[TileState]:
    """Parse a 5-char feedback string into tile states.
    Accepted forms:
      - letters: g/y/b  (green/yellow/black)
      - digits:  2/1/0
      - list:   [0, 1, 2, 2, 0]
      - '?' or '.' for an uncoloured tile
    Raises ValueError on invalid input.
    """
    s = s.strip().lower()
    # List-like form: [0,1,2,2,0]
    if s.startswith("[") and s.endswith("]"):
        nums = re.findall(r"[012]", s)
        if len(nums) != WORD_LENGTH:
            raise ValueError("list form must contain exactly five 0/1/2 values")
        return [_STATE_CHARS[x] for x in nums]

    if len(s) != WORD_LENGTH:
        raise ValueError("feedback must be length 5 (gybgy / 21001 / [0,1,2,2,0])")
    try:
        return [_STATE_CHARS[ch] for ch in s]
    except KeyError as e:
        raise ValueError("feedback must use only g/y/b, 2/1/0 or ?") from e


def parse_guess(s: str) -> str:
    """Normalise a typed guess; raise ValueError unless it is a 5-letter word."""
    guess = s.strip().lower()
    if len(guess) != WORD_LENGTH or not guess.isalpha():
        raise ValueError("please enter a 5-letter alphabetic word")
    return guess


def format_row(row: Row) -> str:
    """Echo a grid row as 'CRANE  bygbg', with '?' for uncoloured tiles."""
    word = "".join(t.letter or "_" for t in row).upper()
    codes = [_STATE_CODES.get(t.state) if t.letter else None for t in row]
    colours = list(pattern_to_string([ABSENT if c is None else c for c in codes]))
    for i, c in enumerate(codes):
        if c is None:
            colours[i] = "?"
    return f"{word}  {''.join(colours)}"


def format_keyboard(grid: Grid) -> str:
    """One line summarising the best known colour of every letter entered so far."""
    states = key_states(grid)
    parts = []
    for state in (TileState.GREEN, TileState.YELLOW, TileState.GREY):
        letters = sorted(letter.upper() for letter, st in states.items() if st == state)
        if letters:
            parts.append(f"{state.value} {' '.join(letters)}")
    return "Keyboard: " + (" | ".join(parts) if parts else "(nothing marked yet)")


def format_report(report: HintReport, prev_count: Optional[int] = None, grid: Optional[Grid] = None) -> str:
    """Render a HintReport (and, if given, the grid it came from) as the block shown after each row."""
    lines: List[str] = []
    if grid is not None:
        lines.extend(format_row(row) for row in grid if not row_is_blank(row))
        lines.append(format_keyboard(grid))
    for c in report.conflicts:
        lines.append(f"!! Conflict: {c.description}  (type 'fix {c.letter}' to clear its grey tiles)")

    count = report.analysis.count
    head = f"Remaining candidates: {count}"
    if prev_count is not None and prev_count != count:
        head += f" ({count - prev_count:+d})"
    lines.append(head)

    if count == 0:
        lines.append("No candidates remain. Check your feedback inputs.")
        return "\n".join(lines)

    if report.analysis.exploration_letters:
        letters = ", ".join(
            f"{letter.upper()} {report.analysis.overall_frequency[letter]:.0%}"
            for letter in report.analysis.exploration_letters
        )
        lines.append(f"Letters that split the candidates best: {letters}")

    if report.probes:
        lines.append("Probe words (most informative, not predictions):")
        for i, p in enumerate(report.probes, 1):
            mark = "  *candidate" if p.is_candidate else ""
            lines.append(f"  {i}. {p.word}  (groups={p.partitions}, avg={p.avg_group_size:.2f}){mark}")
    elif count > PROBE_THRESHOLD:
        lines.append(f"(probe words appear once {PROBE_THRESHOLD} or fewer candidates remain)")
    return "\n".join(lines)


def main():
    ap = argparse.ArgumentParser(description="Interactive Wordle hint helper (manual feedback)")
    ap.add_argument("--csv", default="word_list.csv", help="Path to the word list (.csv or one word per line)")
    ap.add_argument("--column", default="word", help="CSV column holding the words")
    ap.add_argument("--answers-only", action="store_true", help="Keep only rows with a 'day' value")
    ap.add_argument("--probe-limit", type=int, default=DEFAULT_PROBE_LIMIT, help="How many probe words to show")
    ap.add_argument("--probe-threshold", type=int, default=PROBE_THRESHOLD,
                    help="Only rank probes when at most this many candidates remain")
    ap.add_argument("--seed", type=int, default=None, help="Seed for random candidate samples")
    ap.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    vocab = load_vocab(args.csv, args.column, answers_only=args.answers_only)
    words = vocab.words()
    sampler = WordSampler(seed=args.seed)

    rows: List[List[Tile]] = []
    prev_count: Optional[int] = None

    def evaluate() -> HintReport:
        return evaluate_grid(rows, words, probe_limit=args.probe_limit, probe_threshold=args.probe_threshold)

    print(f"\nWordle hint helper: {len(vocab)} words loaded.")
    print("After EACH guess you make in the game, enter the word and the colours you saw.")
    print("Accepted: g/y/b, 2/1/0, [0,1,2,2,0], '?' for uncoloured. Type 'quit' to exit.\n")

    report = evaluate()
    while True:
        cmd = input(f"Guess {len(rows) + 1} (or undo/reset/fix X/sample/list/quit): ").strip().lower()
        if cmd in QUIT_WORDS:
            print("bye!")
            return
        if cmd == "undo":
            if rows:
                rows.pop()
        elif cmd == "reset":
            rows.clear()
            prev_count = None
        elif cmd.startswith("fix "):
            rows[:] = resolve_conflict(rows, cmd[4:].strip())
        elif cmd == "sample":
            shown = sampler.sample(report.candidates, SAMPLE_SIZE)
            print("Some possible words:", ", ".join(shown) if shown else "(none)")
            continue
        elif cmd == "list":
            if len(report.candidates) > LIST_LIMIT:
                print(f"Too many to list ({len(report.candidates)}); try 'sample'.")
            else:
                print("Candidates:", ", ".join(report.candidates) if report.candidates else "(none)")
            continue
        else:
            if len(rows) >= MAX_ROWS:
                print(f"The grid holds {MAX_ROWS} rows; use 'undo' or 'reset'.")
                continue
            try:
                guess = parse_guess(cmd)
            except ValueError as e:
                print(e)
                continue
            while True:
                fb = input("Feedback for that guess (g/y/b or 2/1/0 or [..]): ").strip()
                if fb.lower() in QUIT_WORDS:
                    print("bye!")
                    return
                try:
                    states = parse_feedback(fb)
                    break
                except ValueError as e:
                    print("Invalid feedback:", e)
            rows.append(row_from_feedback(guess, states))
            if all(s == TileState.GREEN for s in states):
                print("All green. Well solved!")
                return

        report = evaluate()
        print(format_report(report, prev_count, rows))
        prev_count = report.analysis.count


if __name__ == "__main__":
    main()
