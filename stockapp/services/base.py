# services/base.py
from typing import Callable, Generic, Optional, TypeVar
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from stockapp.services.exceptions import (
    ConstraintViolationError,
    PersistenceError,
    ServiceError,
)
from stockapp.utils.logging import get_logger

T = TypeVar("T")

logger = get_logger(__name__)


class BaseService(Generic[T]):
    def __init__(self, db: Session):
        self.db = db

    async def _handle_db_operation(
        self,
        operation: Callable[[], T],
        on_conflict: Optional[Callable[[], ServiceError]] = None,
    ) -> T:
        """Run a write and commit it, rolling back and raising a service error on failure."""
        try:
            result = operation()
            self.db.commit()
            return result
        except IntegrityError as e:
            self.db.rollback()
            logger.warning("Database integrity error: {}", e.orig)
            error = on_conflict() if on_conflict else ConstraintViolationError(
                "Database constraint violation"
            )
            raise error from e
        except Exception as e:
            self.db.rollback()
            logger.error("Database operation error: {}", e)
            raise PersistenceError("Internal server error") from e
