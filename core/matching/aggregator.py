#!/usr/bin/env python3
"""
Score Aggregator - Combine factor scores into the 0-100 MatchScore.

Formula: round_half_up(100 * sum(weight_f * score_f))

Employment type is not part of the weighted sum; see
MatchWeights.
"""

import math
import logging
from typing import Optional

from core.config_loader import MatchWeights
from core.matching.models import FactorScores

logger = logging.getLogger(__name__)


class ScoreAggregator:
    """Weighted sum of factor scores, converted to an integer percentage."""

    def __init__(self, weights: Optional[MatchWeights] = None):
        self.weights = weights or MatchWeights()

    def weighted_total(self, factors: FactorScores) -> float:
        w = self.weights
        return (
            factors.skills * w.skills +
            factors.experience * w.experience +
            factors.location * w.location +
            factors.salary * w.salary +
            factors.availability * w.availability +
            factors.education * w.education
        )

    def aggregate(self, factors: FactorScores) -> int:
        """
        Convert factor scores into a MatchScore.

        Halves round up (e.g. 67.5 -> 68). Result is clamped to [0, 100].
        """
        total = self.weighted_total(factors)
        score = int(math.floor(total * 100 + 0.5))
        return max(0, min(100, score))
