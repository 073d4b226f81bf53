"""
Post repository for post and attachment data access operations.
"""

from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from pghub.models import Post, Attachment
from .base_repository import BaseRepository


class PostRepository(BaseRepository[Post]):
    """Repository for Post model operations. Attachments are persisted through their post."""

    def __init__(self, db: Session):
        super().__init__(db, Post)

    def get_by_id(self, id: str) -> Optional[Post]:
        """
        Get a post with its attachments eagerly loaded.

        Args:
            id: Post UUID

        Returns:
            Post instance with attachments, or None if not found
        """
        return self.db.query(self.model).options(
            selectinload(self.model.attachments)
        ).filter(self.model.id == id).first()

    def get_page(self, page_number: int, page_size: int) -> List[Post]:
        """
        Get one page of posts.

        Args:
            page_number: 1-based page index
            page_size: Number of posts per page

        Returns:
            Posts on the requested page, oldest first
        """
        return self.get_all(limit=page_size, offset=(page_number - 1) * page_size)

    def update(self, post_id: str, incoming: Post) -> Optional[Post]:
        """
        Replace a post's fields and its whole attachment set.

        The existing attachments are removed and one new attachment is
        inserted per attachment on ``incoming``; nothing is diffed.

        Args:
            post_id: UUID of the post to update
            incoming: Transient Post carrying the new values

        Returns:
            The updated post, or None if no post has that ID
        """
        with self.transaction("updating the post"):
            post = self.get_by_id(post_id)
            if post is None:
                return None

            post.title = incoming.title
            post.content = incoming.content

            post.attachments.clear()
            for attachment in incoming.attachments:
                post.attachments.append(Attachment(file_name=attachment.file_name))
        return post

    def delete(self, post_id: str) -> bool:
        """
        Delete a post and its attachments.

        Args:
            post_id: Post UUID

        Returns:
            True if a post was removed, False if it did not exist
        """
        return self.delete_by_id(post_id)

    def count_attachments(self, post_id: str) -> int:
        return self.db.query(Attachment).filter(Attachment.post_id == post_id).count()
