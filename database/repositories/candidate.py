import logging
from typing import List, Optional, Dict, Any, Iterable

from sqlalchemy import select

from database.models import User, JobSeekerProfile, JobSeekerSkill
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class CandidateRepository(BaseRepository):
    def get_profile_by_user_id(self, user_id: Any) -> Optional[JobSeekerProfile]:
        stmt = select(JobSeekerProfile).where(JobSeekerProfile.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def get_eligible_profiles(self) -> List[JobSeekerProfile]:
        """
        Profiles eligible for ranking passes.

        Active, email-verified users whose availability is not 'not_looking'.
        A profile with no availability set is included.
        """
        stmt = (
            select(JobSeekerProfile)
            .join(User, User.id == JobSeekerProfile.user_id)
            .where(
                User.status == 'active',
                User.email_verified.is_(True),
                (JobSeekerProfile.availability.is_(None)) |
                (JobSeekerProfile.availability != 'not_looking')
            )
            .order_by(JobSeekerProfile.id)
        )
        return self._all(stmt)

    def get_skills_for_profiles(self, profile_ids: Iterable[Any]) -> Dict[Any, List[JobSeekerSkill]]:
        """Batch load candidate skills with a single IN (...) query."""
        profile_ids = list(profile_ids)
        result: Dict[Any, List[JobSeekerSkill]] = {profile_id: [] for profile_id in profile_ids}
        if not profile_ids:
            return result

        stmt = select(JobSeekerSkill).where(JobSeekerSkill.job_seeker_id.in_(profile_ids))
        for row in self._all(stmt):
            result[row.job_seeker_id].append(row)
        return result
