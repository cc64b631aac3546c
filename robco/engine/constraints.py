"""
Candidate filtering given game history.

Given:
  - a pool of candidate passwords
  - a history of (guess, correctness) pairs

Return:
  - candidates that are consistent with ALL feedback seen so far.

This is the stateless counterpart of CandidatePool.filter: strategies and the
harness use it to reason about hypothetical feedback without touching a pool.
"""

from typing import Iterable, List, Tuple
from .commonality import commonality

# History is a sequence of (guess, correctness) tuples.
History = Iterable[Tuple[str, int]]  # (guess, correctness)


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words that would produce exactly the recorded correctness for
    every (guess, correctness) in `history`.

    Args:
      words   : iterable of candidate passwords
      history : iterable of (guess, correctness) seen so far

    Returns:
      List[str] of consistent candidates (order preserved as in `words`).
    """
    history = list(history)
    out: List[str] = []

    for w in words:
        if all(commonality(w, g) == c for g, c in history):
            out.append(w)

    return out
