"""
Matching Data Source Interface - Abstract base for the engine's data collaborator.

The engine only reads attribute snapshots through this interface and writes
back a single score per application. Storage, eligibility rules and batch
loading strategy belong to the implementation.
"""
from abc import ABC, abstractmethod
from typing import List

from core.matching.models import (
    ApplicationRef, JobMatchAttributes, CandidateMatchAttributes
)


class MatchingDataSource(ABC):
    """
    Abstract interface for loading match attributes and persisting scores.
    """

    @abstractmethod
    def load_application(self, application_id: str) -> ApplicationRef:
        """
        Resolve an application to its job and candidate.

        Raises ApplicationNotFoundError if it does not exist.
        """
        pass

    @abstractmethod
    def load_job_for_matching(self, job_id: str) -> JobMatchAttributes:
        """
        Load a job posting with its skill requirements.

        Raises JobNotFoundError if it does not exist.
        """
        pass

    @abstractmethod
    def load_candidate_for_matching(self, candidate_id: str) -> CandidateMatchAttributes:
        """
        Load a candidate profile with its skills.

        Raises CandidateNotFoundError if it does not exist.
        """
        pass

    @abstractmethod
    def enumerate_eligible_candidates(self) -> List[CandidateMatchAttributes]:
        """Return every candidate eligible for a ranking pass, skills included."""
        pass

    @abstractmethod
    def enumerate_active_jobs(self, limit: int) -> List[JobMatchAttributes]:
        """Return up to `limit` open jobs, most recent first, skills included."""
        pass

    @abstractmethod
    def has_applied(self, job_id: str, candidate_id: str) -> bool:
        pass

    @abstractmethod
    def persist_application_score(self, application_id: str, score: int) -> None:
        """Overwrite the stored match score of an application."""
        pass
