"""
Base repository providing common CRUD operations.
"""

from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar, List, Optional, Type
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pghub.exceptions import ApplicationError, DatabaseError

T = TypeVar('T')

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """
    Generic base repository providing common CRUD operations.
    All specific repositories should inherit from this class.

    Reads run directly on the session. Every mutation runs inside
    ``transaction()``, which commits on success and rolls back on any failure.
    """

    def __init__(self, db: Session, model: Type[T]):
        """
        Initialize the repository.

        Args:
            db: SQLAlchemy database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    @contextmanager
    def transaction(self, operation: str) -> Iterator[Session]:
        """
        Scope a unit of work to a single commit.

        Args:
            operation: Human-readable operation name used in error messages

        Yields:
            The session to perform the writes on

        Raises:
            DatabaseError: If the store rejects the writes; the transaction is rolled back
        """
        try:
            yield self.db
            self.db.commit()
        except ApplicationError:
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Database error during {operation}: {e}", exc_info=True)
            raise DatabaseError(operation, f"An error occurred while {operation}.") from e
        except Exception:
            self.db.rollback()
            raise

    def create(self, obj: T) -> T:
        """
        Create a new record in the database.

        Args:
            obj: Model instance to create

        Returns:
            Created model instance
        """
        with self.transaction(f"creating the {self._entity_name()}"):
            self.db.add(obj)
        self.db.refresh(obj)
        return obj

    def get_by_id(self, id: str) -> Optional[T]:
        """
        Retrieve a record by its ID.

        Args:
            id: Primary key value

        Returns:
            Model instance or None if not found
        """
        return self.db.query(self.model).filter(self.model.id == id).first()

    def get_all(self, limit: Optional[int] = None, offset: int = 0) -> List[T]:
        """
        Retrieve all records.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip

        Returns:
            List of model instances
        """
        query = self.db.query(self.model).order_by(self.model.created_at, self.model.id)
        if offset:
            query = query.offset(offset)
        if limit:
            query = query.limit(limit)
        return query.all()

    def delete_by_id(self, id: str) -> bool:
        """
        Delete a record by its ID.

        Args:
            id: Primary key value

        Returns:
            True if deleted, False if not found
        """
        with self.transaction(f"deleting the {self._entity_name()}"):
            obj = self.get_by_id(id)
            if obj is None:
                return False
            self.db.delete(obj)
        return True

    def exists(self, id: str) -> bool:
        """
        Check if a record exists by ID.

        Args:
            id: Primary key value

        Returns:
            True if exists, False otherwise
        """
        return self.db.query(self.model).filter(self.model.id == id).count() > 0

    def _entity_name(self) -> str:
        return self.model.__name__.lower()
