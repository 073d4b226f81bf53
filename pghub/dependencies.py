"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating service instances,
following the Dependency Inversion Principle. Routes depend on the service
interfaces, so tests can override these providers with fakes.
"""

from sqlalchemy.orm import Session
from fastapi import Depends

from pghub.database import get_db
from pghub.services.interfaces import IPostService, IUserService
from pghub.services.post_service import PostService
from pghub.services.user_service import UserService


def get_post_service(db: Session = Depends(get_db)) -> IPostService:
    """
    Factory function for creating PostService instances.

    Args:
        db: Database session (injected)

    Returns:
        IPostService: Post service implementation
    """
    return PostService(db)


def get_user_service(db: Session = Depends(get_db)) -> IUserService:
    """
    Factory function for creating UserService instances.

    Args:
        db: Database session (injected)

    Returns:
        IUserService: User service implementation
    """
    return UserService(db)
