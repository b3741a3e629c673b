"""
Small, pure numeric helpers shared by the scorers.

Keep domain logic out of here — generic math only.
"""

from __future__ import annotations

import math
from typing import Iterable, Mapping


def clamp01(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def clamp_score(value: float) -> float:
    """Clamp a composite score into [0, 100]."""
    return min(max(value, 0.0), 100.0)


def ratio_score(a: float, b: float, ideal: float = 1.0) -> float:
    """Score how close ``a / b`` is to *ideal*, in [0, 1].

    ``1 - |ln((a/b) / ideal)|`` clamped: exactly 1.0 at the ideal ratio,
    unchanged when *a* and *b* are scaled together, and decaying as the
    ratio moves away geometrically (2:1 and 1:2 score the same).

    Neutral value: both sides zero → 0.5 (nothing to balance yet).  A zero
    on one side only is a total imbalance and scores 0.
    """
    if a == 0 and b == 0:
        return 0.5
    if a <= 0 or b <= 0:
        return 0.0
    return clamp01(1.0 - abs(math.log((a / b) / ideal)))


def score_from_range(value: float, lo: float, hi: float) -> float:
    """Triangular band score in [0, 1].

    * ``value <= lo`` → ``value / lo`` (so ``lo`` itself scores 1)
    * ``value >= hi`` → ``1 - (value - hi) / hi``
    * inside the band → 1.0 only at the midpoint, falling off linearly to
      0 over the half-width.  The band is **not** flat-topped.
    """
    if value <= lo:
        return clamp01(value / lo) if lo > 0 else 1.0
    if value >= hi:
        return clamp01(1.0 - (value - hi) / (hi or 1.0))
    mid = (lo + hi) / 2
    half = (hi - lo) / 2
    return clamp01(1.0 - abs(value - mid) / half)


def shannon_entropy(weights: Iterable[float]) -> float:
    """Shannon entropy (bits) of the distribution *weights* normalise to.

    An all-zero distribution has zero entropy.
    """
    values = [max(w, 0.0) for w in weights]
    total = sum(values)
    if total <= 0:
        return 0.0
    entropy = 0.0
    for w in values:
        p = w / total
        if p > 0:
            entropy -= p * math.log2(p)
    return entropy


def entropy_score(totals: Mapping[str, float], categories: list[str]) -> float:
    """Diversity of *totals* over fixed *categories*, in [0, 100].

    Entropy divided by its maximum ``log2(len(categories))``, × 100.
    Keys outside *categories* are ignored.  Fewer than two categories or
    an empty distribution → 0.
    """
    if len(categories) < 2:
        return 0.0
    entropy = shannon_entropy(totals.get(c, 0.0) for c in categories)
    return 100.0 * clamp01(entropy / math.log2(len(categories)))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return int(math.floor(value + 0.5))


def safe_div(numerator: float, denominator: float, default: float = 0.0) -> float:
    """``numerator / denominator``, or *default* when the denominator is 0."""
    return numerator / denominator if denominator else default


def per_set_mean(total: float, sets: int) -> float:
    """Average of a per-set running sum, rounded to 9 places.

    Repeated float additions drift (3 × 0.4 / 3 is 0.40000000000000004);
    rounding keeps threshold comparisons on the intended side.
    """
    return round(safe_div(total, sets), 9)
