"""
The candidate pool: every string that could still be the terminal password.

Invariants:
  - no duplicates
  - never empty; construction rejects an empty list, and filter/remove refuse
    to drop the last candidate
  - members are kept in ascending code-point order, which is the iteration
    order of candidates() and the tie-break order of recommend()

Every failing operation raises a HackerError before touching any state.
"""

from __future__ import annotations

from bisect import bisect_left, insort
from typing import Iterable, Iterator, List

from robco.engine import commonality, recommend as recommend_fn, validate_correctness
from .errors import (
    AlreadyPresent,
    EmptyPool,
    Impossible,
    InvalidCorrectness,
    LastCandidate,
    NotYetDetermined,
    UnknownCandidate,
)


class CandidateView:
    """
    Live, restartable view of a pool's members.

    Iterating twice walks the pool as it is at that moment, so a view taken
    before a filter() never yields stale members.
    """

    __slots__ = ("_pool",)

    def __init__(self, pool: "CandidatePool"):
        self._pool = pool

    def __iter__(self) -> Iterator[str]:
        return iter(self._pool._passwords)

    def __len__(self) -> int:
        return len(self._pool._passwords)

    def __contains__(self, item) -> bool:
        return item in self._pool

    def __repr__(self) -> str:
        return f"CandidateView({list(self)!r})"


class CandidatePool:
    def __init__(self, candidates: Iterable[str]):
        passwords = sorted(set(candidates))
        if not passwords:
            raise EmptyPool()
        self._passwords: List[str] = passwords

    # ---- read-only access ----

    def __len__(self) -> int:
        return len(self._passwords)

    def __iter__(self) -> Iterator[str]:
        return iter(self._passwords)

    def __contains__(self, password) -> bool:
        if not isinstance(password, str):
            return False
        i = bisect_left(self._passwords, password)
        return i < len(self._passwords) and self._passwords[i] == password

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._passwords!r})"

    def copy(self) -> "CandidatePool":
        return type(self)(self._passwords)

    def candidates(self) -> CandidateView:
        """All strings that could be the password, as a live view."""
        return CandidateView(self)

    @property
    def solved(self) -> bool:
        return len(self._passwords) == 1

    def answer(self) -> str:
        """
        The password, once only one candidate is left.

        Raises:
          NotYetDetermined while more than one candidate remains.
        """
        n = len(self._passwords)
        if n == 1:
            return self._passwords[0]
        if n == 0:
            raise EmptyPool()
        raise NotYetDetermined(n)

    # ---- feedback ----

    def filter(self, guess: str, correctness: int) -> None:
        """
        Keep only the candidates sharing exactly `correctness` characters
        (same character, same position) with `guess`.

        Checks, in order:
          1. guess must be a live candidate           -> UnknownCandidate
          2. 0 <= correctness <= len(guess)            -> InvalidCorrectness
          3. at least one candidate must survive      -> Impossible
        """
        if guess not in self:
            raise UnknownCandidate(guess)
        if not validate_correctness(guess, correctness):
            raise InvalidCorrectness(guess, correctness)

        kept = [pw for pw in self._passwords if commonality(pw, guess) == correctness]
        if not kept:
            raise Impossible(guess, correctness)
        self._passwords = kept

    def recommend(self) -> str:
        """
        The candidate that, guessed next, leaves the fewest candidates on
        average (see robco.engine.filtration). Ties go to the candidate that
        sorts first.

        O(n^2) commonality comparisons.
        """
        if not self._passwords:
            raise EmptyPool()
        return recommend_fn(self._passwords)

    # ---- manual edits ----

    def add(self, password: str) -> None:
        if password in self:
            raise AlreadyPresent(password)
        insort(self._passwords, password)

    def remove(self, password: str) -> None:
        if password not in self:
            raise UnknownCandidate(password)
        if len(self._passwords) == 1:
            raise LastCandidate(password)
        self._passwords.remove(password)
