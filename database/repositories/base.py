from typing import Any, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session


class BaseRepository:
    """Query object bound to a Session. Commit and rollback belong to the unit of work."""

    def __init__(self, db: Session):
        self.db = db

    def _get(self, model, entity_id: Any) -> Optional[Any]:
        stmt = select(model).where(model.id == entity_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def _all(self, stmt) -> List[Any]:
        return list(self.db.execute(stmt).scalars().all())
