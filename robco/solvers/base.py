from __future__ import annotations
import random
from typing import Dict, List, Type

from robco.engine import filter_candidates

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A guessing strategy.

    reset() hands the solver the passwords shown on the terminal (in pool
    order); next_guess(state) then receives a dict with keys:
      - "turn":    1-based attempt number
      - "history": list of (guess, correctness) so far
    and must return a password consistent with the whole history.
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.candidates: List[str] = []
        self.rng = random.Random()

    def reset(self, *, candidates: List[str], seed: int | None = None) -> None:
        self.candidates = list(candidates)
        if seed is not None:
            self.rng.seed(seed)

    def live_candidates(self, state: dict) -> List[str]:
        """Passwords still consistent with state["history"], in pool order."""
        return filter_candidates(self.candidates, state["history"])

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
