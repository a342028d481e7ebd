#!/usr/bin/env python3
"""
Recommendation Engine - Recommend open jobs to one candidate.

Scores a bounded pool of recent active jobs, skipping jobs the candidate
already applied to. By default only the skills factor is computed
precisely and the other factors take the configured stand-in values
(MatchingConfig.simplified_scores); set recommendation_full_scoring to
score every factor.
"""

from typing import List, Optional
import logging

from core.config_loader import MatchingConfig
from core.exceptions import InvalidInputError
from core.matching.interfaces import MatchingDataSource
from core.matching.models import JobScore, JobMatchAttributes
from core.matching.scoring import MatchScorer, map_in_order

logger = logging.getLogger(__name__)


class RecommendationEngine:
    def __init__(
        self,
        data_source: MatchingDataSource,
        config: Optional[MatchingConfig] = None,
        scorer: Optional[MatchScorer] = None
    ):
        self.data_source = data_source
        self.scorer = scorer or MatchScorer(config)
        self.config = self.scorer.config

    def recommend(self, candidate_id: str, limit: Optional[int] = None) -> List[JobScore]:
        """
        Recommend jobs for a candidate.

        Args:
            candidate_id: Candidate (user) identifier
            limit: Maximum results, defaults to recommendation_default_limit

        Returns:
            JobScore list, highest score first, at most `limit` long

        Raises:
            CandidateNotFoundError: If the candidate has no profile
            InvalidInputError: If limit < 1
        """
        if limit is None:
            limit = self.config.recommendation_default_limit
        if limit < 1:
            raise InvalidInputError(f"limit must be >= 1, got {limit}")

        candidate = self.data_source.load_candidate_for_matching(candidate_id)
        jobs = self.data_source.enumerate_active_jobs(self.config.recommendation_pool_size)

        unapplied = [
            job for job in jobs
            if not self.data_source.has_applied(job.job_id, candidate.candidate_id)
        ]

        if self.config.recommendation_full_scoring:
            score_pair = self.scorer.score
        else:
            score_pair = self.scorer.score_simplified

        def _score(job: JobMatchAttributes) -> JobScore:
            result = score_pair(job, candidate)
            return JobScore(job_id=job.job_id, score=result.score, factors=result.factors, job=job)

        scored = map_in_order(_score, unapplied, self.config.max_workers)

        recommendations = [s for s in scored if s.score >= self.config.recommend_min_score]
        recommendations.sort(key=lambda s: s.score, reverse=True)

        logger.info(
            f"Recommendations for candidate {candidate_id}: {len(recommendations)} of "
            f"{len(unapplied)} unapplied jobs scored >= {self.config.recommend_min_score} "
            f"({len(jobs) - len(unapplied)} already applied)"
        )
        return recommendations[:limit]
