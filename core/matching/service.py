#!/usr/bin/env python3
"""
Matching Service - Public entry point of the matching engine.

Wires the application matcher, job ranker and recommendation engine to a
single data collaborator and configuration. The service itself is
stateless; build one per unit of work.
"""

from typing import List, Optional
import logging

from core.config_loader import MatchingConfig
from core.matching.application import ApplicationMatcher
from core.matching.interfaces import MatchingDataSource
from core.matching.models import MatchResult, CandidateScore, JobScore
from core.matching.ranking import JobMatchRanker
from core.matching.recommendations import RecommendationEngine
from core.matching.scoring import MatchScorer

logger = logging.getLogger(__name__)


class MatchingService:
    """
    Service for job/candidate matching.

    - compute_application_match: score one application and persist it
    - rank_candidates_for_job: candidates scoring >= 50, best first
    - recommend_jobs_for_candidate: unapplied jobs scoring >= 60, best first
    """

    def __init__(
        self,
        data_source: MatchingDataSource,
        config: Optional[MatchingConfig] = None
    ):
        self.data_source = data_source
        self.config = config or MatchingConfig()

        scorer = MatchScorer(self.config)
        self.application_matcher = ApplicationMatcher(data_source, scorer=scorer)
        self.ranker = JobMatchRanker(data_source, scorer=scorer)
        self.recommendation_engine = RecommendationEngine(data_source, scorer=scorer)

    def compute_application_match(self, application_id: str) -> int:
        return self.application_matcher.compute(application_id)

    def explain_application_match(self, application_id: str) -> MatchResult:
        """Factor breakdown for an application; nothing is persisted."""
        return self.application_matcher.explain(application_id)

    def rank_candidates_for_job(self, job_id: str) -> List[CandidateScore]:
        return self.ranker.rank(job_id)

    def similar_candidates(self, job_id: str, limit: int = 20) -> List[CandidateScore]:
        """Best `limit` candidates for a job."""
        return self.ranker.top_candidates(job_id, limit)

    def recommend_jobs_for_candidate(
        self,
        candidate_id: str,
        limit: Optional[int] = None
    ) -> List[JobScore]:
        return self.recommendation_engine.recommend(candidate_id, limit)
