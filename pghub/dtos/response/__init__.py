"""
Response DTOs

DTOs for outgoing API responses. These decouple the API from database models
and provide a clear contract for what data the API returns.
"""

from .post_response import AttachmentResponse, PostResponse
from .user_response import UserResponse

__all__ = ["AttachmentResponse", "PostResponse", "UserResponse"]
