from dataclasses import replace

import pytest

from fzy_score.bonus import compute_bonus, compute_bonuses
from fzy_score.models import DEFAULT_CONFIG as C


@pytest.mark.parametrize(
    ("current", "previous", "expected"),
    [
        ("A", "b", C.match_capital),
        ("A", "/", C.match_slash),
        ("A", "-", C.match_word),
        ("A", "_", C.match_word),
        ("A", " ", C.match_word),
        ("A", ".", C.match_dot),
        ("A", "B", 0.0),
        ("A", "1", 0.0),
        ("a", "/", C.match_slash),
        ("7", "-", C.match_word),
        ("a", ".", C.match_dot),
        ("a", "B", 0.0),
        ("a", "b", 0.0),
        ("-", "/", 0.0),
        (".", "a", 0.0),
        ("é", "/", 0.0),
    ],
)
def test_compute_bonus(current: str, previous: str, expected: float) -> None:
    assert compute_bonus(current, previous) == expected


def test_compute_bonuses_treats_start_as_after_slash() -> None:
    assert compute_bonuses("") == []
    assert compute_bonuses("a") == [C.match_slash]
    assert compute_bonuses("A") == [C.match_slash]
    assert compute_bonuses("-") == [0.0]


def test_compute_bonuses_for_path() -> None:
    assert compute_bonuses("src/fooBar.py") == [
        C.match_slash,
        0.0,
        0.0,
        0.0,
        C.match_slash,
        0.0,
        0.0,
        C.match_capital,
        0.0,
        0.0,
        0.0,
        C.match_dot,
        0.0,
    ]


def test_compute_bonuses_uses_config() -> None:
    config = replace(C, match_word=0.25)
    assert compute_bonuses("a_b", config) == [C.match_slash, 0.0, 0.25]
