"""
Entity/DTO mapping layer.

One explicit function per conversion, so that every field copied across the
API boundary is visible and type-checked.
"""

from .post_mapper import to_attachment_response, to_post_entity, to_post_response
from .user_mapper import to_user_entity, to_user_response

__all__ = [
    "to_attachment_response",
    "to_post_entity",
    "to_post_response",
    "to_user_entity",
    "to_user_response",
]
