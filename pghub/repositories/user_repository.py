"""
User repository for user-specific data access operations.
"""

from typing import Optional
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from pghub.exceptions import DuplicateEmailError
from pghub.models import User
from .base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User model operations."""

    def __init__(self, db: Session):
        super().__init__(db, User)

    def create(self, user: User) -> User:
        """
        Persist a new user with a lowercased email.

        Args:
            user: Transient User entity

        Returns:
            The stored user

        Raises:
            DuplicateEmailError: If the email is already registered
            DatabaseError: If the insert fails for any other reason
        """
        user.email = user.email.lower()
        with self.transaction("creating the user"):
            self.db.add(user)
            self._flush_unique(user.email)
        self.db.refresh(user)
        return user

    def update(self, user: User) -> Optional[User]:
        """
        Overwrite every value of an existing user with those of ``user``.

        Args:
            user: Transient User carrying the target ID and the new values

        Returns:
            The updated user, or None if no user has that ID

        Raises:
            DuplicateEmailError: If the new email belongs to another user
        """
        with self.transaction("updating the user"):
            existing = self.get_by_id(user.id)
            if existing is None:
                return None

            existing.email = user.email.lower()
            existing.first_name = user.first_name
            existing.last_name = user.last_name
            self._flush_unique(existing.email)
        return existing

    def delete(self, user_id: str) -> bool:
        """
        Delete a user by ID.

        Returns:
            True if a user was removed, False if it did not exist
        """
        return self.delete_by_id(user_id)

    def email_exists(self, email: str, exclude_id: Optional[str] = None) -> bool:
        """
        Check whether an email is already registered, ignoring case.

        This is advisory: the unique constraint on ``users.email`` is what
        actually rejects a duplicate that slips in between check and insert.

        Args:
            email: Address to look up
            exclude_id: User to ignore (the one being updated)

        Returns:
            True if another user has this email
        """
        query = self.db.query(self.model).filter(func.lower(self.model.email) == email.lower())
        if exclude_id:
            query = query.filter(self.model.id != exclude_id)
        return query.count() > 0

    def _flush_unique(self, email: str) -> None:
        try:
            self.db.flush()
        except IntegrityError as e:
            message = str(e.orig).lower()
            if 'uq_users_email' in message or 'users.email' in message:
                raise DuplicateEmailError(email) from e
            raise
