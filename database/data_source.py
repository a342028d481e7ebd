"""
SQLAlchemy implementation of the matching engine's data collaborator.

Converts ORM rows into plain attribute snapshots while the session is
open, so scoring never touches the database. Enumerations load skills
for every row with one batched query instead of one query per row.
"""

import logging
from typing import List, Optional, Any, Dict

from sqlalchemy.orm import Session

from core.exceptions import (
    ApplicationNotFoundError, JobNotFoundError, CandidateNotFoundError
)
from core.matching.interfaces import MatchingDataSource
from core.matching.models import (
    ApplicationRef, SkillRequirement, CandidateSkill,
    JobMatchAttributes, CandidateMatchAttributes
)
from database.models import JobPosting, JobSkill, JobSeekerProfile, JobSeekerSkill
from database.repositories import (
    JobPostingRepository, CandidateRepository, ApplicationRepository
)

logger = logging.getLogger(__name__)


def _to_float(value: Any) -> Optional[float]:
    """Numeric columns come back as Decimal; keep None as None."""
    if value is None:
        return None
    return float(value)


def _job_to_attributes(
    job: JobPosting,
    skills: List[JobSkill],
    company_name: Optional[str] = None
) -> JobMatchAttributes:
    return JobMatchAttributes(
        job_id=str(job.id),
        title=job.title,
        experience_level=job.experience_level,
        salary_min=_to_float(job.salary_min),
        salary_max=_to_float(job.salary_max),
        location_city=job.location_city,
        location_state=job.location_state,
        is_remote=bool(job.is_remote),
        is_active=job.status == 'active',
        employment_type=job.employment_type,
        education_requirements=job.education_requirements,
        skills=[
            SkillRequirement(
                skill_id=str(s.skill_id),
                is_required=bool(s.is_required),
                min_years_required=s.min_years_required or 0
            )
            for s in skills
        ],
        company_name=company_name,
        posted_date=job.posted_date,
    )


def _profile_to_attributes(
    profile: JobSeekerProfile,
    skills: List[JobSeekerSkill]
) -> CandidateMatchAttributes:
    return CandidateMatchAttributes(
        candidate_id=str(profile.user_id),
        profile_id=str(profile.id),
        years_of_experience=profile.years_of_experience,
        desired_salary_min=_to_float(profile.desired_salary_min),
        desired_salary_max=_to_float(profile.desired_salary_max),
        location_city=profile.location_city,
        location_state=profile.location_state,
        willing_to_relocate=bool(profile.willing_to_relocate),
        remote_preference=profile.remote_preference,
        availability=profile.availability,
        skills=[
            CandidateSkill(skill_id=str(s.skill_id), years_of_experience=s.years_of_experience or 0)
            for s in skills
        ],
        first_name=profile.first_name,
        last_name=profile.last_name,
        headline=profile.headline,
    )


class SqlMatchingDataSource(MatchingDataSource):
    """MatchingDataSource backed by a SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db
        self.jobs = JobPostingRepository(db)
        self.candidates = CandidateRepository(db)
        self.applications = ApplicationRepository(db)

    def load_application(self, application_id: str) -> ApplicationRef:
        application = self.applications.get_by_id(application_id)
        if application is None:
            raise ApplicationNotFoundError(application_id)
        return ApplicationRef(
            application_id=str(application.id),
            job_id=str(application.job_id),
            candidate_id=str(application.job_seeker_id)
        )

    def load_job_for_matching(self, job_id: str) -> JobMatchAttributes:
        job = self.jobs.get_by_id(job_id)
        if job is None:
            raise JobNotFoundError(job_id)
        skills = self.jobs.get_skills_for_jobs([job.id])[job.id]
        company_names = self.jobs.get_company_names([job.company_id])
        return _job_to_attributes(job, skills, company_names.get(job.company_id))

    def load_candidate_for_matching(self, candidate_id: str) -> CandidateMatchAttributes:
        profile = self.candidates.get_profile_by_user_id(candidate_id)
        if profile is None:
            raise CandidateNotFoundError(candidate_id)
        skills = self.candidates.get_skills_for_profiles([profile.id])[profile.id]
        return _profile_to_attributes(profile, skills)

    def enumerate_eligible_candidates(self) -> List[CandidateMatchAttributes]:
        profiles = self.candidates.get_eligible_profiles()
        skills_by_profile = self.candidates.get_skills_for_profiles(p.id for p in profiles)
        logger.debug(f"Loaded {len(profiles)} eligible candidate profiles")
        return [_profile_to_attributes(p, skills_by_profile[p.id]) for p in profiles]

    def enumerate_active_jobs(self, limit: int) -> List[JobMatchAttributes]:
        jobs = self.jobs.get_open_jobs(limit)
        skills_by_job = self.jobs.get_skills_for_jobs(j.id for j in jobs)
        company_names: Dict[Any, str] = self.jobs.get_company_names(j.company_id for j in jobs)
        logger.debug(f"Loaded {len(jobs)} active jobs (limit {limit})")
        return [
            _job_to_attributes(j, skills_by_job[j.id], company_names.get(j.company_id))
            for j in jobs
        ]

    def has_applied(self, job_id: str, candidate_id: str) -> bool:
        return self.applications.exists(job_id, candidate_id)

    def persist_application_score(self, application_id: str, score: int) -> None:
        updated = self.applications.set_match_score(application_id, score)
        if updated == 0:
            raise ApplicationNotFoundError(application_id)
