from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

ScoreKind = Literal["no-match", "exact", "scored"]

SCORE_MIN = -math.inf
SCORE_MAX = math.inf


@dataclass(frozen=True)
class ScoreConfig:
    """Weights used by the bonus table and the score engine.

    Changing any of these changes ranking order, so callers that tune them
    should build a new instance with ``dataclasses.replace``.
    """

    gap_leading: float = -0.005
    gap_trailing: float = -0.005
    gap_inner: float = -0.01
    match_consecutive: float = 1.0
    match_slash: float = 0.9
    match_word: float = 0.8
    match_capital: float = 0.7
    match_dot: float = 0.6


DEFAULT_CONFIG = ScoreConfig()


def score_kind(value: float) -> ScoreKind:
    if value == SCORE_MIN:
        return "no-match"
    if value == SCORE_MAX:
        return "exact"
    return "scored"
