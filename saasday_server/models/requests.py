"""
Pydantic request models for the auth endpoints
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional


def _strip(value):
    if isinstance(value, str):
        return value.strip()
    return value


class LoginRequest(BaseModel):
    """Login request model"""
    email: str = Field(..., min_length=1, max_length=255, description="Account email")
    password: str = Field(..., min_length=1, max_length=128, description="Account password")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "password123"
            }
        }
    )

    @field_validator('email', mode='before')
    @classmethod
    def strip_email(cls, v):
        return _strip(v)


class SignupRequest(BaseModel):
    """Signup request model"""
    email: str = Field(..., min_length=1, max_length=255, description="Account email")
    password: str = Field(..., min_length=1, max_length=128, description="Account password")
    username: Optional[str] = Field(None, max_length=50, description="Optional username")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "SecurePass123",
                "username": "newuser"
            }
        }
    )

    @field_validator('email', mode='before')
    @classmethod
    def strip_email(cls, v):
        return _strip(v)

    @field_validator('username', mode='before')
    @classmethod
    def blank_username_is_none(cls, v):
        """Treat a blank username the same as a missing one"""
        if isinstance(v, str):
            return v.strip() or None
        return v
