"""
Request DTOs

DTOs for incoming API requests. These decouple the API from database models
and provide a clear contract for what data the API expects.

Field rules (lengths, formats) are not enforced here; they are evaluated by
the validators package so that every violation can be reported at once.
"""

from .post_request import AttachmentRequest, CreatePostRequest, UpdatePostRequest
from .user_request import CreateUserRequest, UpdateUserRequest

__all__ = [
    "AttachmentRequest",
    "CreatePostRequest",
    "UpdatePostRequest",
    "CreateUserRequest",
    "UpdateUserRequest",
]
