"""
Feedback validation.

A correctness count is acceptable iff it is an int in [0, len(guess)].
CandidatePool.filter uses this before touching any state.
"""


def validate_correctness(guess: str, correctness: int) -> bool:
    """
    Return True if `correctness` is a plausible score for `guess`.

    bool is rejected even though it subclasses int.
    """
    if isinstance(correctness, bool) or not isinstance(correctness, int):
        return False
    return 0 <= correctness <= len(guess)
