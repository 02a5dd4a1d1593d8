from __future__ import annotations

from fzy_score.models import DEFAULT_CONFIG, ScoreConfig

WORD_SEPARATORS = frozenset("-_ ")


def _is_upper(char: str) -> bool:
    return "A" <= char <= "Z"


def _is_lower_or_digit(char: str) -> bool:
    return "a" <= char <= "z" or "0" <= char <= "9"


def _boundary_bonus(previous: str, config: ScoreConfig) -> float:
    if previous == "/":
        return config.match_slash
    if previous in WORD_SEPARATORS:
        return config.match_word
    if previous == ".":
        return config.match_dot
    return 0.0


def compute_bonus(
    current: str, previous: str, config: ScoreConfig = DEFAULT_CONFIG
) -> float:
    """Positional bonus for ``current`` given the character before it."""
    if _is_upper(current):
        if "a" <= previous <= "z":
            return config.match_capital
        return _boundary_bonus(previous, config)
    if _is_lower_or_digit(current):
        return _boundary_bonus(previous, config)
    return 0.0


def compute_bonuses(text: str, config: ScoreConfig = DEFAULT_CONFIG) -> list[float]:
    """One bonus per position of ``text``; the first character follows a virtual "/"."""
    bonuses: list[float] = []
    previous = "/"
    for current in text:
        bonuses.append(compute_bonus(current, previous, config))
        previous = current
    return bonuses
