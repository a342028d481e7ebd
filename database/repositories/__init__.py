from database.repositories.base import BaseRepository
from database.repositories.job_posting import JobPostingRepository
from database.repositories.candidate import CandidateRepository
from database.repositories.application import ApplicationRepository

__all__ = [
    'BaseRepository',
    'JobPostingRepository',
    'CandidateRepository',
    'ApplicationRepository',
]
