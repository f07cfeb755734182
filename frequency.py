# -*- coding: utf-8 -*-
"""
Letter-frequency statistics for English text.

Only ASCII letters are counted, case-insensitively. Digits, punctuation,
whitespace and non-ASCII characters are ignored.
"""

import string
from types import MappingProxyType
from typing import Dict, Mapping
from collections import Counter

EN_ALPHA = string.ascii_lowercase

_ASCII_LETTERS = frozenset(string.ascii_letters)


# ═══════════════════════════════════════════════════════════════════════════════
# REFERENCE DISTRIBUTION
# Standard English letter frequencies, a..z
# ═══════════════════════════════════════════════════════════════════════════════

EN_LETTER_FREQ: Mapping[str, float] = MappingProxyType({
    'a': 0.08167, 'b': 0.01492, 'c': 0.02782, 'd': 0.04253, 'e': 0.12702,
    'f': 0.02228, 'g': 0.02015, 'h': 0.06094, 'i': 0.06966, 'j': 0.00153,
    'k': 0.00772, 'l': 0.04025, 'm': 0.02406, 'n': 0.06749, 'o': 0.07507,
    'p': 0.01929, 'q': 0.00095, 'r': 0.05987, 's': 0.06327, 't': 0.09056,
    'u': 0.02758, 'v': 0.00978, 'w': 0.02360, 'x': 0.00150, 'y': 0.01974,
    'z': 0.00074,
})


def reference() -> Mapping[str, float]:
    """Read-only English table used by the solver."""
    return EN_LETTER_FREQ


# ═══════════════════════════════════════════════════════════════════════════════
# OBSERVED DISTRIBUTION
# ═══════════════════════════════════════════════════════════════════════════════

def letter_counts(text: str) -> Counter:
    # Membership is checked before lowering: the Kelvin sign U+212A lowers to 'k'
    return Counter(c.lower() for c in text if c in _ASCII_LETTERS)


def distribution(text: str) -> Dict[str, float]:
    """
    Relative frequency of every letter a..z in the text.
    A text without letters gives the all-zero distribution.
    """
    counts = letter_counts(text)
    n = sum(counts.values())
    if n == 0:
        return {c: 0.0 for c in EN_ALPHA}
    return {c: counts[c] / n for c in EN_ALPHA}


def index_of_coincidence(text: str) -> float:
    """
    Index of Coincidence.
    EN ≈ 0.0667, random ≈ 0.0385. Unchanged by any Caesar shift.
    """
    counts = letter_counts(text)
    n = sum(counts.values())
    if n < 2:
        return 0.0
    return sum(f * (f - 1) for f in counts.values()) / (n * (n - 1))
