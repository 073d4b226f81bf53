"""
Service Interfaces

Abstract base classes for service layer following Dependency Inversion Principle.
This allows for dependency injection and easier testing/mocking.
"""

from abc import ABC, abstractmethod
from typing import List

from pghub.dtos.request.post_request import CreatePostRequest, UpdatePostRequest
from pghub.dtos.request.user_request import CreateUserRequest, UpdateUserRequest
from pghub.dtos.response.post_response import PostResponse
from pghub.dtos.response.user_response import UserResponse


class IPostService(ABC):
    """
    Abstract interface for post management services.
    """

    @abstractmethod
    def get_by_id(self, post_id: str) -> PostResponse:
        """
        Get a post with its attachments.

        Raises:
            PostNotFoundError: If the post does not exist
        """
        pass

    @abstractmethod
    def get_all(self, page_number: int, page_size: int) -> List[PostResponse]:
        """Get one page of posts."""
        pass

    @abstractmethod
    def create(self, request: CreatePostRequest) -> PostResponse:
        """
        Create a post and its attachments.

        Raises:
            ValidationError: If any field rule fails
        """
        pass

    @abstractmethod
    def update(self, post_id: str, request: UpdatePostRequest) -> PostResponse:
        """
        Replace a post's fields and attachments.

        Raises:
            ValidationError: If any field rule fails
            PostNotFoundError: If the post does not exist
        """
        pass

    @abstractmethod
    def delete(self, post_id: str) -> bool:
        """Delete a post; True if one was removed."""
        pass


class IUserService(ABC):
    """
    Abstract interface for user management services.
    """

    @abstractmethod
    def get_by_id(self, user_id: str) -> UserResponse:
        pass

    @abstractmethod
    def get_all(self) -> List[UserResponse]:
        pass

    @abstractmethod
    def create(self, request: CreateUserRequest) -> UserResponse:
        """
        Register a user.

        Raises:
            ValidationError: If any field rule fails
            DuplicateEmailError: If the email is already registered
        """
        pass

    @abstractmethod
    def update(self, user_id: str, request: UpdateUserRequest) -> UserResponse:
        pass

    @abstractmethod
    def delete(self, user_id: str) -> bool:
        pass

    @abstractmethod
    def is_email_unique(self, email: str) -> bool:
        pass
