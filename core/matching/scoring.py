#!/usr/bin/env python3
"""
Pair scoring - MatchInput -> FactorScores -> MatchResult.

Shared by the application matcher, the ranker and the recommendation
engine. Holds no mutable state, so one MatchScorer can be used from many
threads at once.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence, TypeVar
import logging

from core.config_loader import MatchingConfig
from core.matching.aggregator import ScoreAggregator
from core.matching.builder import build_match_input, candidate_skill_years
from core.matching.factors import calculate_factor_scores, score_skills
from core.matching.models import (
    JobMatchAttributes, CandidateMatchAttributes, FactorScores, MatchResult
)

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


class MatchScorer:
    def __init__(self, config: Optional[MatchingConfig] = None):
        self.config = config or MatchingConfig()
        self.aggregator = ScoreAggregator(self.config.weights)

    def score(self, job: JobMatchAttributes, candidate: CandidateMatchAttributes) -> MatchResult:
        """Score a pair on all seven factors."""
        factors = calculate_factor_scores(build_match_input(job, candidate), self.config)
        result = MatchResult(score=self.aggregator.aggregate(factors), factors=factors)
        logger.debug(f"Job {job.job_id} / candidate {candidate.candidate_id}: {result.score}")
        return result

    def score_simplified(self, job: JobMatchAttributes, candidate: CandidateMatchAttributes) -> MatchResult:
        """
        Score a pair with only the skills factor computed.

        The remaining factors take the configured stand-in values, used when
        the candidate's full context has not been loaded.
        """
        stand_in = self.config.simplified_scores
        factors = FactorScores(
            skills=score_skills(job.skills, candidate_skill_years(candidate.skills), self.config),
            experience=stand_in.experience,
            location=stand_in.location,
            salary=stand_in.salary,
            availability=stand_in.availability,
            education=stand_in.education,
            employment_type=stand_in.employment_type,
        )
        return MatchResult(score=self.aggregator.aggregate(factors), factors=factors)


def map_in_order(fn: Callable[[T], R], items: Sequence[T], max_workers: Optional[int] = None) -> List[R]:
    """
    Apply fn to every item, returning results in input order.

    With max_workers set, items are scored on a thread pool of that size;
    otherwise in the calling thread. Exceptions propagate to the caller.
    """
    if not max_workers or max_workers <= 1 or len(items) <= 1:
        return [fn(item) for item in items]

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(fn, items))
