#!/usr/bin/env python3
"""
Job Match Ranker - Rank eligible candidates for one job.

Candidates below rank_min_score are dropped; the rest are sorted by score,
highest first, keeping enumeration order among equal scores. Truncation is
left to the caller (see top_candidates).
"""

from typing import List, Optional
import logging

from core.config_loader import MatchingConfig
from core.exceptions import InvalidInputError, JobNotFoundError
from core.matching.interfaces import MatchingDataSource
from core.matching.models import CandidateScore, CandidateMatchAttributes
from core.matching.scoring import MatchScorer, map_in_order

logger = logging.getLogger(__name__)


class JobMatchRanker:
    def __init__(
        self,
        data_source: MatchingDataSource,
        config: Optional[MatchingConfig] = None,
        scorer: Optional[MatchScorer] = None
    ):
        self.data_source = data_source
        self.scorer = scorer or MatchScorer(config)
        self.config = self.scorer.config

    def rank(self, job_id: str) -> List[CandidateScore]:
        """
        Score every eligible candidate against a job.

        Raises:
            JobNotFoundError: If the job does not exist or is not active
        """
        job = self.data_source.load_job_for_matching(job_id)
        if not job.is_active:
            raise JobNotFoundError(job_id, f"Job not found or not active: {job_id}")

        candidates = self.data_source.enumerate_eligible_candidates()

        def _score(candidate: CandidateMatchAttributes) -> CandidateScore:
            result = self.scorer.score(job, candidate)
            return CandidateScore(
                candidate_id=candidate.candidate_id,
                score=result.score,
                factors=result.factors,
                candidate=candidate
            )

        scored = map_in_order(_score, candidates, self.config.max_workers)

        matches = [s for s in scored if s.score >= self.config.rank_min_score]
        # list.sort is stable: ties keep enumeration order
        matches.sort(key=lambda s: s.score, reverse=True)

        logger.info(
            f"Ranked job {job_id}: {len(matches)} of {len(candidates)} candidates "
            f"scored >= {self.config.rank_min_score}"
        )
        return matches

    def top_candidates(self, job_id: str, limit: int) -> List[CandidateScore]:
        if limit < 1:
            raise InvalidInputError(f"limit must be >= 1, got {limit}")
        return self.rank(job_id)[:limit]
