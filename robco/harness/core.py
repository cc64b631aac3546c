"""
Simulation harness core primitives.

- run_case:   hack a single terminal (one known secret) with a given solver.
- iter_batch: hack one terminal per secret, yielding each result as it is
              played (so callers can wrap it in a progress bar).
- run_batch:  the same, collected into a list.
- Attempts are capped at the harness layer (RobCo terminals lock after four).

These functions are intentionally UI-agnostic so they can be reused by
a CLI app, a notebook, or tests without changes.
"""

from __future__ import annotations
import logging
import random
import time
from typing import Dict, Iterator, List, Iterable, Tuple
from robco.engine import commonality
from robco.hacker import CandidatePool

log = logging.getLogger(__name__)

# Attempts a terminal allows before locking out.
DEFAULT_MAX_ATTEMPTS = 4


def _check_attempts(max_attempts: int) -> None:
    """Guardrail: a game needs at least one attempt."""
    if max_attempts < 1:
        raise ValueError(f"max_attempts must be at least 1; got {max_attempts}")


def run_case(
        solver,
        secret: str,
        *,
        candidates: Iterable[str],
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        seed: int | None = None,
) -> Dict:
    """
    Guess until the solver enters the secret or runs out of attempts.

    Args:
        solver:        an object implementing BaseSolver with next_guess(state)
        secret:        the terminal's real password; must be a candidate
        candidates:    the passwords shown on the terminal
        max_attempts:  guesses allowed before lockout
        seed:          RNG seed to make solver choices reproducible

    Returns:
        dict with keys:
            success (bool), guesses (int), time_ms (float),
            history (list[(guess, correctness)]), secret (str),
            pool_size (int, candidates left when the game ended)
    """
    _check_attempts(max_attempts)

    pool = CandidatePool(candidates)
    if secret not in pool:
        raise ValueError(f"secret {secret!r} is not one of the candidates")

    solver.reset(candidates=list(pool), seed=seed)

    # History accumulates (guess, correctness) tuples; solvers narrow with it
    history: List[Tuple[str, int]] = []

    t0 = time.time()
    for turn in range(1, max_attempts + 1):
        guess = solver.next_guess({"turn": turn, "history": list(history)})

        # The terminal reports likeness against the real password
        correctness = commonality(guess, secret)
        history.append((guess, correctness))

        if guess == secret:
            dt = (time.time() - t0) * 1000.0
            log.debug("solved %r in %d guesses", secret, turn)
            return {
                "success": True, "guesses": turn, "time_ms": dt,
                "history": history, "secret": secret, "pool_size": len(pool),
            }

        # Rejects guesses that were not live candidates; truthful feedback
        # about a live guess never empties the pool
        pool.filter(guess, correctness)

    dt = (time.time() - t0) * 1000.0
    log.debug("locked out on %r with %d candidates left", secret, len(pool))
    return {
        "success": False, "guesses": max_attempts, "time_ms": dt,
        "history": history, "secret": secret, "pool_size": len(pool),
    }


def pick_secrets(candidates: Iterable[str], *, seed: int | None = None,
                 sample: int | None = None) -> List[str]:
    """
    Secrets a batch will play: every candidate in pool order, or, with
    `sample`, K of them drawn without replacement by a Random(seed) shuffle.
    """
    if sample is not None and sample < 1:
        raise ValueError(f"sample must be at least 1; got {sample}")

    secrets = list(CandidatePool(candidates))
    if sample is not None and sample < len(secrets):
        random.Random(seed).shuffle(secrets)
        secrets = secrets[:sample]
    return secrets


def iter_batch(
        solver,
        candidates: List[str],
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        seed: int | None = None,
        sample: int | None = None,
) -> Iterator[Dict]:
    """
    Yield one run_case result per secret from pick_secrets().

    Arguments are checked before the first game, not on first iteration.
    Each case's seed is derived from the base seed to make runs reproducible
    but not identical across cases (seed + index).
    """
    _check_attempts(max_attempts)
    secrets = pick_secrets(candidates, seed=seed, sample=sample)

    def _games() -> Iterator[Dict]:
        for idx, secret in enumerate(secrets, start=1):
            case_seed = None if seed is None else (seed + idx)
            yield run_case(
                solver, secret, candidates=candidates,
                max_attempts=max_attempts, seed=case_seed,
            )

    return _games()


def run_batch(solver, candidates: List[str], **kwargs) -> List[Dict]:
    """All of iter_batch() as a list; takes the same keyword arguments."""
    return list(iter_batch(solver, candidates, **kwargs))
