import logging
from typing import List, Optional, Dict, Any, Iterable
from datetime import datetime, timezone

from sqlalchemy import select, or_

from database.models import JobPosting, JobSkill, Company
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class JobPostingRepository(BaseRepository):
    def get_by_id(self, job_id: Any) -> Optional[JobPosting]:
        return self._get(JobPosting, job_id)

    def get_open_jobs(self, limit: int, now: Optional[datetime] = None) -> List[JobPosting]:
        """Active postings whose deadline has not passed, newest first."""
        now = now or datetime.now(timezone.utc)
        stmt = (
            select(JobPosting)
            .where(
                JobPosting.status == 'active',
                or_(JobPosting.application_deadline.is_(None), JobPosting.application_deadline > now)
            )
            .order_by(JobPosting.posted_date.desc(), JobPosting.id)
            .limit(limit)
        )
        return self._all(stmt)

    def get_skills_for_jobs(self, job_ids: Iterable[Any]) -> Dict[Any, List[JobSkill]]:
        """Batch load skill requirements with a single IN (...) query."""
        job_ids = list(job_ids)
        result: Dict[Any, List[JobSkill]] = {job_id: [] for job_id in job_ids}
        if not job_ids:
            return result

        stmt = select(JobSkill).where(JobSkill.job_id.in_(job_ids)).order_by(JobSkill.id)
        for row in self._all(stmt):
            result[row.job_id].append(row)
        return result

    def get_company_names(self, company_ids: Iterable[Any]) -> Dict[Any, str]:
        company_ids = [c for c in set(company_ids) if c is not None]
        if not company_ids:
            return {}
        stmt = select(Company.id, Company.name).where(Company.id.in_(company_ids))
        return {company_id: name for company_id, name in self.db.execute(stmt).all()}
