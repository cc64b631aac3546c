from .pool import CandidatePool, CandidateView
from .errors import (
    HackerError,
    UnknownCandidate,
    AlreadyPresent,
    InvalidCorrectness,
    Impossible,
    LastCandidate,
    NotYetDetermined,
    EmptyPool,
)

__all__ = [
    "CandidatePool", "CandidateView",
    "HackerError", "UnknownCandidate", "AlreadyPresent", "InvalidCorrectness",
    "Impossible", "LastCandidate", "NotYetDetermined", "EmptyPool",
]
