"""
User Request DTOs
"""

from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    """Request DTO for registering a user."""

    email: str = Field("", description="Email address, stored lowercased")
    first_name: str = Field("", description="First name")
    last_name: str = Field("", description="Last name")

    class Config:
        """Pydantic configuration."""
        json_schema_extra = {
            "example": {
                "email": "jane.doe@example.com",
                "first_name": "Jane",
                "last_name": "Doe"
            }
        }


class UpdateUserRequest(BaseModel):
    """Request DTO for replacing a user's values."""

    email: str = Field("", description="Email address, stored lowercased")
    first_name: str = Field("", description="First name")
    last_name: str = Field("", description="Last name")
