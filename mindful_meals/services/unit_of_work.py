"""Transaction scope shared by the services."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from mindful_meals.services.errors import ConflictError, InternalError

logger = logging.getLogger(__name__)


@contextmanager
def unit_of_work(db: Session) -> Iterator[Session]:
    """Commit everything done inside the block once, or nothing at all.

    Database errors are rolled back and re-raised as typed service errors.
    """
    try:
        yield db
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Integrity error, rolled back: {e.orig}")
        raise ConflictError("Resource already exists") from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Database operation failed")
        raise InternalError("Database operation failed") from e
    except Exception:
        db.rollback()
        raise
