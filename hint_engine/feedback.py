"""
Feedback utilities: the colour pattern a guess would get against an answer.

Patterns are lists of WORD_LENGTH ints:
    0 = absent  (grey; letter not present OR over-used relative to answer counts)
    1 = present (yellow; letter present but in a different position)
    2 = match   (green; letter matches the answer at that position)
"""

from collections import Counter
from typing import List, Sequence, Tuple

from hint_engine.consts import ABSENT, MATCH, PRESENT, WORD_LENGTH

_PATTERN_LETTERS = {ABSENT: "b", PRESENT: "y", MATCH: "g"}


def _check_word(word: str, name: str) -> None:
    if not isinstance(word, str):
        raise TypeError(f"{name} must be a string")
    if len(word) != WORD_LENGTH:
        raise ValueError(f"{name} must be length {WORD_LENGTH}")
    if not word.isalpha() or not word.islower():
        raise ValueError(f"{name} must be lowercase alphabetic")


def pattern_tuple(guess: str, answer: str) -> Tuple[int, ...]:
    """
    Unchecked two-pass scoring, returned as a hashable tuple.

    Used in the probe-scoring inner loop where inputs are already known to
    be vocabulary words.
    """
    pattern = [ABSENT] * len(guess)
    remaining = Counter()

    # Pass 1: greens consume their answer letter
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = MATCH
        else:
            remaining[a] += 1

    # Pass 2: yellows where unconsumed copies remain, else grey
    for i, g in enumerate(guess):
        if pattern[i] == ABSENT and remaining[g] > 0:
            pattern[i] = PRESENT
            remaining[g] -= 1

    return tuple(pattern)


def score_pattern(guess: str, answer: str) -> List[int]:
    """
    Compute the feedback for `guess` against a hypothetical `answer`.

    Duplicate handling follows the official two-pass rule: exact matches
    are marked first and consume their answer letter, then the remaining
    guess letters take unconsumed answer letters left to right. The number
    of non-absent marks for a letter therefore never exceeds its count in
    `answer`.

    Raises
    ------
    TypeError, ValueError
        If either word is not a lowercase alphabetic string of length 5.
    """
    _check_word(guess, "guess")
    _check_word(answer, "answer")
    return list(pattern_tuple(guess, answer))


def pattern_to_int(pattern: Sequence[int]) -> int:
    """Encode a 5-trit pattern into a single integer in [0, 242] (base 3)."""
    if not isinstance(pattern, (list, tuple)):
        raise TypeError("pattern must be a list or tuple of 5 integers in {0,1,2}")
    if len(pattern) != WORD_LENGTH:
        raise ValueError(f"pattern must have length {WORD_LENGTH}")
    value = 0
    for p in pattern:
        if not isinstance(p, int) or p not in (ABSENT, PRESENT, MATCH):
            raise ValueError("pattern elements must be integers in {0,1,2}")
        value = value * 3 + p
    return value


def int_to_pattern(code: int) -> List[int]:
    """Inverse of `pattern_to_int`."""
    if not isinstance(code, int) or not 0 <= code < 3 ** WORD_LENGTH:
        raise ValueError(f"pattern code must be an integer in [0, {3 ** WORD_LENGTH - 1}]")
    out: List[int] = []
    for _ in range(WORD_LENGTH):
        code, p = divmod(code, 3)
        out.append(p)
    return out[::-1]


def pattern_to_string(pattern: Sequence[int]) -> str:
    """Render a pattern as g/y/b letters, e.g. [0, 1, 2, 0, 2] -> 'bygbg'."""
    pattern_to_int(pattern)  # validates
    return "".join(_PATTERN_LETTERS[p] for p in pattern)


def consistent_with(word: str, guess: str, pattern: Sequence[int]) -> bool:
    """True if `word`, taken as the answer, would have produced `pattern` for `guess`."""
    pattern_to_int(pattern)
    return score_pattern(guess, word) == list(pattern)
