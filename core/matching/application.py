#!/usr/bin/env python3
"""
Application Matcher - Score and persist the match for one application.

The only scoring path that writes. Recomputing overwrites the previous
score, so repeated or concurrent calls are safe under last-writer-wins.
"""

from typing import Optional
import logging

from core.config_loader import MatchingConfig
from core.matching.interfaces import MatchingDataSource
from core.matching.models import MatchResult
from core.matching.scoring import MatchScorer

logger = logging.getLogger(__name__)


class ApplicationMatcher:
    def __init__(
        self,
        data_source: MatchingDataSource,
        config: Optional[MatchingConfig] = None,
        scorer: Optional[MatchScorer] = None
    ):
        self.data_source = data_source
        self.scorer = scorer or MatchScorer(config)

    def explain(self, application_id: str) -> MatchResult:
        """
        Score an application without persisting it.

        Raises:
            ApplicationNotFoundError, JobNotFoundError, CandidateNotFoundError
        """
        application = self.data_source.load_application(application_id)
        job = self.data_source.load_job_for_matching(application.job_id)
        candidate = self.data_source.load_candidate_for_matching(application.candidate_id)
        return self.scorer.score(job, candidate)

    def compute(self, application_id: str) -> int:
        """
        Score an application and store the result on it.

        Returns:
            MatchScore (0-100)
        """
        try:
            result = self.explain(application_id)
            self.data_source.persist_application_score(application_id, result.score)
        except Exception as e:
            logger.error(f"Error calculating match score for application {application_id}: {e}")
            raise

        logger.info(f"Match score calculated for application {application_id}: {result.score}%")
        return result.score
