"""
Post Response DTOs

DTOs for post-related API responses.
"""

from pydantic import BaseModel, Field
from datetime import datetime
from typing import List


class AttachmentResponse(BaseModel):
    """Response DTO for an attachment."""

    id: str = Field(description="Attachment ID")
    file_name: str = Field(description="Attachment file name")

    class Config:
        """Pydantic configuration."""
        from_attributes = True


class PostResponse(BaseModel):
    """
    Response DTO for a post with its attachments.

    This DTO separates the API response from the database model,
    allowing them to evolve independently.
    """

    id: str = Field(description="Post ID")
    title: str = Field(description="Post title")
    content: str = Field(description="Post body")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")
    attachments: List[AttachmentResponse] = Field(default_factory=list, description="Attachments in order")

    class Config:
        """Pydantic configuration."""
        from_attributes = True
