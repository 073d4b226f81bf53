"""
User Mapper

Conversions between the User entity and its DTOs.
"""

from typing import Optional

from pghub.models import User
from pghub.dtos.request.user_request import CreateUserRequest, UpdateUserRequest
from pghub.dtos.response.user_response import UserResponse


def to_user_entity(request: CreateUserRequest | UpdateUserRequest, user_id: Optional[str] = None) -> User:
    """
    Build an unsaved User entity from a request DTO.

    Args:
        request: Incoming user DTO
        user_id: Identifier of the user being replaced, for updates

    Returns:
        Transient User entity
    """
    return User(
        id=user_id,
        email=request.email,
        first_name=request.first_name,
        last_name=request.last_name,
    )


def to_user_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )
