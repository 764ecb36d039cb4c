"""
consts.py

Shared constants for the hint engine. Anything a caller may want to tune
is also exposed as a keyword argument on the function that uses it.
"""

WORD_LENGTH = 5
MAX_ROWS = 6
ALPHABET = "abcdefghijklmnopqrstuvwxyz"

# Pattern codes, one per position
ABSENT = 0
PRESENT = 1
MATCH = 2

# Probe scoring is O(|vocabulary| * |candidates|); skip it above this size.
PROBE_THRESHOLD = 150
DEFAULT_PROBE_LIMIT = 5

EXPLORATION_LIMIT = 10
SAMPLE_SIZE = 20
