from __future__ import annotations

from fzy_score.bonus import compute_bonus, compute_bonuses
from fzy_score.models import (
    DEFAULT_CONFIG,
    SCORE_MAX,
    SCORE_MIN,
    ScoreConfig,
    ScoreKind,
    score_kind,
)
from fzy_score.search import has_match, score

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "SCORE_MAX",
    "SCORE_MIN",
    "ScoreConfig",
    "ScoreKind",
    "compute_bonus",
    "compute_bonuses",
    "has_match",
    "score",
    "score_kind",
]
