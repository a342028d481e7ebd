import logging
from typing import Optional, Any

from sqlalchemy import select, update

from database.models import Application
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class ApplicationRepository(BaseRepository):
    def get_by_id(self, application_id: Any) -> Optional[Application]:
        return self._get(Application, application_id)

    def exists(self, job_id: Any, job_seeker_id: Any) -> bool:
        stmt = select(Application.id).where(
            Application.job_id == job_id,
            Application.job_seeker_id == job_seeker_id
        ).limit(1)
        return self.db.execute(stmt).first() is not None

    def set_match_score(self, application_id: Any, score: int) -> int:
        """Overwrite the match score. Returns the number of rows updated."""
        stmt = (
            update(Application)
            .where(Application.id == application_id)
            .values(match_score=score)
        )
        result = self.db.execute(stmt)
        return result.rowcount
