"""
Post Request DTOs

DTOs for post-related API requests.
"""

from pydantic import BaseModel, Field
from typing import List


class AttachmentRequest(BaseModel):
    """An attachment to store with a post, identified only by its file name."""

    file_name: str = Field("", description="Attachment file name")


class CreatePostRequest(BaseModel):
    """
    Request DTO for creating a post.

    One attachment is created per entry in ``attachments``.
    """

    title: str = Field("", description="Post title")
    content: str = Field("", description="Post body")
    attachments: List[AttachmentRequest] = Field(default_factory=list, description="Attachments to create")

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "title": "Flat share near the university",
                "content": "Two rooms available from October.",
                "attachments": [{"file_name": "living-room.jpg"}]
            }
        }


class UpdatePostRequest(BaseModel):
    """
    Request DTO for updating a post.

    Every scalar field is replaced and the attachment list replaces the
    post's current attachments entirely.
    """

    title: str = Field("", description="Post title")
    content: str = Field("", description="Post body")
    attachments: List[AttachmentRequest] = Field(default_factory=list, description="Replacement attachments")
