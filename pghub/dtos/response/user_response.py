"""
User Response DTOs
"""

from pydantic import BaseModel, Field
from datetime import datetime


class UserResponse(BaseModel):
    """Response DTO for a user."""

    id: str = Field(description="User ID")
    email: str = Field(description="Lowercased email address")
    first_name: str = Field(description="First name")
    last_name: str = Field(description="Last name")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    class Config:
        """Pydantic configuration."""
        from_attributes = True
