"""
Request models for the auth API using Pydantic
"""
from saasday_server.models.requests import (
    LoginRequest,
    SignupRequest,
)

__all__ = [
    'LoginRequest',
    'SignupRequest',
]
