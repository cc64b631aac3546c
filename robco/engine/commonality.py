"""
Terminal-hacking feedback ("likeness") for a single (guess, secret) pair.

Conventions:
  - commonality counts the index positions at which both strings hold the
    same character
  - only the first min(len(a), len(b)) positions are compared; the tail of
    the longer string contributes nothing
  - characters are Python str items (Unicode code points), never bytes

Examples:
  commonality("aabb", "aaaa") -> 2
  commonality("abc",  "ab")   -> 2
  commonality("héllo", "hello") -> 4
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


def commonality(a: str, b: str) -> int:
    """
    Number of positions at which `a` and `b` share the same character.

    Symmetric, pure, O(min(len(a), len(b))).
    """
    return sum(1 for ca, cb in zip(a, b) if ca == cb)


def commonality_matrix(words: Sequence[str]) -> np.ndarray:
    """
    Pairwise commonality for every pair of `words`.

    Returns:
      (n, n) integer array M with M[i, j] == commonality(words[i], words[j]).

    Words are encoded as code-point rows padded to the longest length; a
    validity mask keeps padded slots from ever counting as a match, which
    preserves the truncate-to-shorter rule.
    """
    n = len(words)
    width = max((len(w) for w in words), default=0)

    codes = np.zeros((n, width), dtype=np.int32)
    valid = np.zeros((n, width), dtype=bool)
    for i, w in enumerate(words):
        codes[i, : len(w)] = [ord(ch) for ch in w]
        valid[i, : len(w)] = True

    out = np.zeros((n, n), dtype=np.int32)
    # One position at a time keeps memory at O(n^2) instead of O(n^2 * width)
    for pos in range(width):
        col = codes[:, pos]
        ok = valid[:, pos]
        out += (col[:, None] == col[None, :]) & ok[:, None] & ok[None, :]
    return out
