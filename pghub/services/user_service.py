"""
User Service

Handles business logic for user operations, including the email
uniqueness check performed before registering a user.
"""

from typing import List
from sqlalchemy.orm import Session
import logging

from pghub.constants import ErrorMessages
from pghub.dtos.request.user_request import CreateUserRequest, UpdateUserRequest
from pghub.dtos.response.user_response import UserResponse
from pghub.exceptions import DuplicateEmailError, UserNotFoundError, ValidationError
from pghub.mappers.user_mapper import to_user_entity, to_user_response
from pghub.repositories.user_repository import UserRepository
from pghub.utils.logging_utils import log_operation
from pghub.validators.user_validator import validate_user_request
from .interfaces import IUserService

logger = logging.getLogger(__name__)


class UserService(IUserService):
    """Service for user-related business logic."""

    def __init__(self, db: Session):
        """
        Initialize UserService.

        Args:
            db: Database session
        """
        self.db = db
        self.user_repo = UserRepository(db)

    @log_operation("get_user")
    def get_by_id(self, user_id: str) -> UserResponse:
        user = self.user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return to_user_response(user)

    @log_operation("list_users")
    def get_all(self) -> List[UserResponse]:
        return [to_user_response(user) for user in self.user_repo.get_all()]

    @log_operation("create_user")
    def create(self, request: CreateUserRequest) -> UserResponse:
        """
        Register a user.

        Args:
            request: Validated against the user rules before anything is stored

        Returns:
            The stored user, with its email lowercased

        Raises:
            ValidationError: If any field rule fails
            DuplicateEmailError: If the email is already registered
        """
        self._validate(request)

        if not self.is_email_unique(request.email):
            raise DuplicateEmailError(request.email.lower())

        user = self.user_repo.create(to_user_entity(request))
        logger.info(f"Registered user {user.id}")
        return to_user_response(user)

    @log_operation("update_user")
    def update(self, user_id: str, request: UpdateUserRequest) -> UserResponse:
        """
        Replace every value of an existing user.

        Raises:
            ValidationError: If any field rule fails
            UserNotFoundError: If the user does not exist
            DuplicateEmailError: If the new email belongs to another user
        """
        self._validate(request)

        if not self.user_repo.exists(user_id):
            raise UserNotFoundError(user_id)

        if self.user_repo.email_exists(request.email, exclude_id=user_id):
            raise DuplicateEmailError(request.email.lower())

        updated = self.user_repo.update(to_user_entity(request, user_id=user_id))
        if updated is None:
            # Removed between the existence check and the update
            raise UserNotFoundError(user_id)
        return to_user_response(updated)

    @log_operation("delete_user")
    def delete(self, user_id: str) -> bool:
        return self.user_repo.delete(user_id)

    def is_email_unique(self, email: str) -> bool:
        """True when no user is registered with this email, ignoring case."""
        return not self.user_repo.email_exists(email)

    def _validate(self, request: CreateUserRequest | UpdateUserRequest) -> None:
        violations = validate_user_request(request)
        if violations:
            raise ValidationError(
                ErrorMessages.VALIDATION_FAILED,
                [violation.to_dict() for violation in violations],
            )
