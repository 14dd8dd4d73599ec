# tests/test_distance.py
import pytest

from trie_dictionary.core.distance import levenshtein_distance


@pytest.mark.parametrize(
    "a,b,expected",
    [
        ("", "", 0),
        ("", "abc", 3),
        ("abc", "", 3),
        ("kitten", "sitting", 3),
        ("flaw", "lawn", 2),
        ("worl", "world", 1),
        ("hello", "hello", 0),
        ("abc", "acb", 2),
    ],
)
def test_levenshtein_known_values(a, b, expected):
    assert levenshtein_distance(a, b) == expected


def test_levenshtein_symmetric():
    assert levenshtein_distance("intention", "execution") == levenshtein_distance("execution", "intention") == 5


def test_levenshtein_returns_int():
    assert type(levenshtein_distance("ab", "cd")) is int


def _two_row_distance(a, b):
    prev = list(range(len(b) + 1))
    for i, ca in enumerate(a, 1):
        curr = [i]
        for j, cb in enumerate(b, 1):
            curr.append(min(prev[j] + 1, curr[j - 1] + 1, prev[j - 1] + (ca != cb)))
        prev = curr
    return prev[-1]


def test_levenshtein_matches_row_by_row_reference():
    import random

    rng = random.Random(7)
    for _ in range(200):
        a = "".join(rng.choice("abc") for _ in range(rng.randint(0, 9)))
        b = "".join(rng.choice("abc") for _ in range(rng.randint(0, 9)))
        assert levenshtein_distance(a, b) == _two_row_distance(a, b), (a, b)


def test_levenshtein_insertion_chain():
    # every cell of the row depends on insertions to its left
    assert levenshtein_distance("a", "aaaaaa") == 5
    assert levenshtein_distance("b", "aaaaab") == 5
