import contextlib
import logging

from database.database import SessionLocal
from database.data_source import SqlMatchingDataSource

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def matching_uow(session_factory=None):
    """Per-unit-of-work transaction scope.

    Yields a SqlMatchingDataSource bound to a fresh Session. Commits on
    success, rolls back on exception, always closes.

    Usage:
        with matching_uow() as data_source:
            score = MatchingService(data_source).compute_application_match(application_id)
        # commit happens automatically on successful exit
    """
    session = (session_factory or SessionLocal)()
    try:
        yield SqlMatchingDataSource(session)
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
