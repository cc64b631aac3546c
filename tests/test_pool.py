import pytest
from robco.engine import commonality
from robco.hacker import (
    CandidatePool, UnknownCandidate, AlreadyPresent, InvalidCorrectness,
    Impossible, LastCandidate, NotYetDetermined, EmptyPool, HackerError,
)

WORDS = ["tires", "times", "tiles", "spies", "fries", "cries", "tries", "sides", "wires", "lines"]


def test_construct_dedupes_and_sorts():
    pool = CandidatePool(["b", "a", "b", "c", "a"])
    assert list(pool) == ["a", "b", "c"]
    assert len(pool) == 3
    assert "b" in pool and "z" not in pool and 1 not in pool


def test_construct_empty_raises():
    with pytest.raises(EmptyPool):
        CandidatePool([])
    with pytest.raises(HackerError):
        CandidatePool(iter(()))


def test_candidates_view_is_live_and_restartable():
    pool = CandidatePool(["aaaa", "aabb", "abab"])
    view = pool.candidates()
    assert list(view) == ["aaaa", "aabb", "abab"]
    assert list(view) == ["aaaa", "aabb", "abab"]
    pool.filter("aaaa", 2)
    assert list(view) == ["aabb", "abab"]
    assert len(view) == 2 and "aabb" in view and "aaaa" not in view


def test_filter_then_answer():
    pool = CandidatePool(["aaaa", "aabb", "abab"])
    pool.filter("aaaa", 2)
    # "abab" also matches "aaaa" at positions 0 and 2
    assert list(pool) == ["aabb", "abab"]
    with pytest.raises(NotYetDetermined) as ei:
        pool.answer()
    assert ei.value.remaining == 2
    assert not pool.solved

    pool.filter("aabb", 4)
    assert list(pool) == ["aabb"]
    assert pool.solved
    assert pool.answer() == "aabb"


def test_filter_unknown_guess():
    pool = CandidatePool(["ab", "ba"])
    with pytest.raises(UnknownCandidate) as ei:
        pool.filter("zz", 1)
    assert ei.value.password == "zz"
    assert list(pool) == ["ab", "ba"]


@pytest.mark.parametrize("correctness", [3, -1, "1", 1.0])
def test_filter_invalid_correctness(correctness):
    pool = CandidatePool(["ab"])
    with pytest.raises(InvalidCorrectness) as ei:
        pool.filter("ab", correctness)
    assert ei.value.guess == "ab"
    assert ei.value.correctness == correctness
    assert list(pool) == ["ab"]


def test_unknown_is_checked_before_correctness():
    pool = CandidatePool(["ab"])
    with pytest.raises(UnknownCandidate):
        pool.filter("zz", 99)


def test_filter_impossible_leaves_pool_alone():
    pool = CandidatePool(["aaaa", "aabb", "abab"])
    with pytest.raises(Impossible) as ei:
        pool.filter("aaaa", 3)
    assert (ei.value.guess, ei.value.correctness) == ("aaaa", 3)
    assert list(pool) == ["aaaa", "aabb", "abab"]


def test_filter_noop_when_all_share_commonality():
    # Shorter guess: extra characters of the longer candidates don't count
    pool = CandidatePool(["ab", "abc", "abd"])
    pool.filter("ab", 2)
    assert list(pool) == ["ab", "abc", "abd"]


def test_add_and_already_present():
    pool = CandidatePool(["ab"])
    pool.add("cd")
    assert list(pool) == ["ab", "cd"]
    with pytest.raises(AlreadyPresent) as ei:
        pool.add("cd")
    assert ei.value.password == "cd"
    assert list(pool) == ["ab", "cd"]
    pool.add("aa")
    assert list(pool) == ["aa", "ab", "cd"]


def test_remove():
    pool = CandidatePool(["ab", "cd"])
    with pytest.raises(UnknownCandidate) as ei:
        pool.remove("xy")
    assert ei.value.password == "xy"
    assert list(pool) == ["ab", "cd"]

    pool.remove("ab")
    assert list(pool) == ["cd"]
    with pytest.raises(LastCandidate):
        pool.remove("cd")
    assert list(pool) == ["cd"]


def test_recommend_is_member_and_deterministic():
    pool = CandidatePool(WORDS)
    r = pool.recommend()
    assert r in pool
    assert pool.recommend() == r
    assert CandidatePool(reversed(WORDS)).recommend() == r


def test_recommend_tie_goes_to_first_in_sorted_order():
    # every member has filtration power 5
    assert CandidatePool(["abab", "aabb", "aaaa"]).recommend() == "aaaa"
    assert CandidatePool(["abe", "abd", "abc", "aaa"]).recommend() == "abc"


def test_copy_is_independent():
    pool = CandidatePool(["aaaa", "aabb", "abab"])
    other = pool.copy()
    other.filter("aaaa", 2)
    assert len(pool) == 3 and len(other) == 2


@pytest.mark.parametrize("secret", WORDS)
def test_truthful_feedback_never_loses_the_secret(secret):
    pool = CandidatePool(WORDS)
    size = len(pool)
    for _ in range(len(WORDS)):
        if pool.solved:
            break
        guess = pool.recommend()
        pool.filter(guess, commonality(guess, secret))
        assert secret in pool
        assert len(pool) <= size
        size = len(pool)
    assert pool.answer() == secret
