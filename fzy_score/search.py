from __future__ import annotations

import logging
import string

from fzy_score.bonus import compute_bonuses
from fzy_score.models import DEFAULT_CONFIG, SCORE_MAX, SCORE_MIN, ScoreConfig

logger = logging.getLogger(__name__)

# Only ASCII letters fold; everything else compares by identity.
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def has_match(pattern: str, text: str) -> bool:
    """Return whether ``pattern`` is a subsequence of ``text`` (case-sensitive)."""
    if not pattern:
        return True

    pattern_index = 0
    for char in text:
        if char == pattern[pattern_index]:
            pattern_index += 1
            if pattern_index == len(pattern):
                return True
    return False


def score(pattern: str, text: str, config: ScoreConfig = DEFAULT_CONFIG) -> float:
    """Score the best subsequence alignment of ``pattern`` in ``text``.

    Higher is better. ``SCORE_MIN`` means the pair cannot be ranked (empty
    pattern or pattern longer than text) and ``SCORE_MAX`` means every
    character of the text is consumed by the pattern. Callers are expected
    to filter candidates with :func:`has_match` first.
    """
    if not pattern or len(pattern) > len(text):
        logger.debug(
            "Unrankable pair: pattern length=%d text length=%d",
            len(pattern),
            len(text),
        )
        return SCORE_MIN
    if len(pattern) == len(text):
        logger.debug("Exact-length pair: length=%d", len(pattern))
        return SCORE_MAX

    bonuses = compute_bonuses(text, config)
    folded_pattern = pattern.translate(_ASCII_LOWER)
    folded_text = text.translate(_ASCII_LOWER)
    text_length = len(text)
    last_pattern_index = len(pattern) - 1

    # run: best score of a match ending exactly at ti.
    # best: best score of the prefix aligned somewhere in text[: ti + 1].
    previous_run = [0.0] * text_length
    current_run = [0.0] * text_length
    previous_best = [0.0] * text_length
    current_best = [0.0] * text_length

    for pattern_index, pattern_char in enumerate(folded_pattern):
        running_best = SCORE_MIN
        gap = (
            config.gap_trailing
            if pattern_index == last_pattern_index
            else config.gap_inner
        )

        for text_index, text_char in enumerate(folded_text):
            if pattern_char == text_char:
                if pattern_index == 0:
                    run = text_index * config.gap_leading + bonuses[text_index]
                elif text_index > 0:
                    run = max(
                        previous_best[text_index - 1] + bonuses[text_index],
                        previous_run[text_index - 1] + config.match_consecutive,
                    )
                else:
                    run = SCORE_MIN
                current_run[text_index] = run
                running_best = max(run, running_best + gap)
            else:
                current_run[text_index] = SCORE_MIN
                running_best += gap
            current_best[text_index] = running_best

        previous_run, current_run = current_run, previous_run
        previous_best, current_best = current_best, previous_best

    return previous_best[-1]
