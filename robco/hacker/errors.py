"""
Errors raised by CandidatePool.

Every error carries the offending values as attributes so callers can react
without parsing messages. All of them leave the pool unchanged.
"""

from __future__ import annotations


class HackerError(ValueError):
    """Base class for every pool error."""


class UnknownCandidate(HackerError):
    def __init__(self, password: str):
        self.password = password
        super().__init__(f'"{password}" is not in the list of available passwords.')


class AlreadyPresent(HackerError):
    def __init__(self, password: str):
        self.password = password
        super().__init__(f'cannot add "{password}": already present.')


class InvalidCorrectness(HackerError):
    def __init__(self, guess: str, correctness):
        self.guess = guess
        self.correctness = correctness
        super().__init__(f'"{guess}" cannot have {correctness} characters correct.')


class Impossible(HackerError):
    """Feedback that no remaining candidate agrees with."""

    def __init__(self, guess: str, correctness: int):
        self.guess = guess
        self.correctness = correctness
        super().__init__(
            f'no remaining password has {correctness} characters in common with "{guess}".')


class LastCandidate(HackerError):
    def __init__(self, password: str):
        self.password = password
        super().__init__(f'cannot remove "{password}": it is the only password left.')


class NotYetDetermined(HackerError):
    def __init__(self, remaining: int):
        self.remaining = remaining
        super().__init__(f"password not yet determined: {remaining} candidates remain.")


class EmptyPool(HackerError):
    def __init__(self):
        super().__init__("pool is empty.")
