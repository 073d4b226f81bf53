"""
Post Mapper

Conversions between Post/Attachment entities and their DTOs.
"""

from typing import List

from pghub.models import Post, Attachment
from pghub.dtos.request.post_request import AttachmentRequest, CreatePostRequest, UpdatePostRequest
from pghub.dtos.response.post_response import AttachmentResponse, PostResponse


def to_attachment_entities(attachments: List[AttachmentRequest]) -> List[Attachment]:
    """Build new, unsaved attachments from request entries, keeping their order."""
    return [Attachment(file_name=attachment.file_name) for attachment in attachments]


def to_post_entity(request: CreatePostRequest | UpdatePostRequest) -> Post:
    """
    Build an unsaved Post entity from a create or update request.

    Args:
        request: Incoming post DTO

    Returns:
        Transient Post carrying one Attachment per requested file name
    """
    post = Post(title=request.title, content=request.content)
    for attachment in to_attachment_entities(request.attachments):
        post.attachments.append(attachment)
    return post


def to_attachment_response(attachment: Attachment) -> AttachmentResponse:
    return AttachmentResponse(id=attachment.id, file_name=attachment.file_name)


def to_post_response(post: Post) -> PostResponse:
    """
    Convert a persisted Post into its response DTO.

    Args:
        post: Post loaded from the database

    Returns:
        PostResponse with attachments in stored order
    """
    return PostResponse(
        id=post.id,
        title=post.title,
        content=post.content,
        created_at=post.created_at,
        updated_at=post.updated_at,
        attachments=[to_attachment_response(a) for a in post.attachments],
    )
