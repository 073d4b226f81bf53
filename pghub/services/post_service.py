"""
Post Service

Handles business logic for post operations: validating requests, mapping
between DTOs and entities, and turning missing posts into typed errors.
"""

from typing import List
from sqlalchemy.orm import Session
import logging

from pghub.constants import ErrorMessages
from pghub.dtos.request.post_request import CreatePostRequest, UpdatePostRequest
from pghub.dtos.response.post_response import PostResponse
from pghub.exceptions import PostNotFoundError, ValidationError
from pghub.mappers.post_mapper import to_post_entity, to_post_response
from pghub.repositories.post_repository import PostRepository
from pghub.utils.logging_utils import log_operation
from pghub.validators.post_validator import validate_post_request
from .interfaces import IPostService

logger = logging.getLogger(__name__)


class PostService(IPostService):
    """Service for post-related business logic."""

    def __init__(self, db: Session):
        """
        Initialize PostService.

        Args:
            db: Database session
        """
        self.db = db
        self.post_repo = PostRepository(db)

    @log_operation("get_post")
    def get_by_id(self, post_id: str) -> PostResponse:
        post = self.post_repo.get_by_id(post_id)
        if post is None:
            raise PostNotFoundError(post_id)
        return to_post_response(post)

    @log_operation("list_posts")
    def get_all(self, page_number: int, page_size: int) -> List[PostResponse]:
        posts = self.post_repo.get_page(page_number, page_size)
        return [to_post_response(post) for post in posts]

    @log_operation("create_post")
    def create(self, request: CreatePostRequest) -> PostResponse:
        """
        Create a post with one attachment per requested file name.

        Args:
            request: Validated against the post rules before anything is stored

        Returns:
            The created post, re-read from the database so generated fields are set
        """
        self._validate(request)

        created = self.post_repo.create(to_post_entity(request))
        logger.info(f"Created post {created.id} with {len(request.attachments)} attachment(s)")
        return self.get_by_id(post_id=created.id)

    @log_operation("update_post")
    def update(self, post_id: str, request: UpdatePostRequest) -> PostResponse:
        """
        Replace a post's title, content and full attachment set.

        Args:
            post_id: Post UUID
            request: New values; attachments not listed are removed

        Returns:
            The updated post, re-read from the database

        Raises:
            ValidationError: If any field rule fails
            PostNotFoundError: If the post does not exist
        """
        self._validate(request)

        if not self.post_repo.exists(post_id):
            raise PostNotFoundError(post_id)

        updated = self.post_repo.update(post_id, to_post_entity(request))
        if updated is None:
            # Removed between the existence check and the update
            raise PostNotFoundError(post_id)

        return self.get_by_id(post_id=updated.id)

    @log_operation("delete_post")
    def delete(self, post_id: str) -> bool:
        deleted = self.post_repo.delete(post_id)
        if not deleted:
            logger.info(f"Delete requested for missing post {post_id}")
        return deleted

    def _validate(self, request: CreatePostRequest | UpdatePostRequest) -> None:
        violations = validate_post_request(request)
        if violations:
            raise ValidationError(
                ErrorMessages.VALIDATION_FAILED,
                [violation.to_dict() for violation in violations],
            )
