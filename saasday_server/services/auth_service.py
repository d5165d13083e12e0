"""
Authentication service - the seam between the auth routes and a credential backend
"""
import logging
from typing import Any, Dict

from saasday_server.exceptions import AuthUnavailableError
from saasday_server.models.requests import LoginRequest, SignupRequest

logger = logging.getLogger(__name__)


class AuthService:
    """
    Service for handling authentication business logic.

    This base service has no credential store: both operations raise
    AuthUnavailableError so callers get an explicit 501 instead of a hung
    request. Deployments subclass it (or pass any object with the same two
    methods to ``create_app``) to provide real signup and login.
    """

    def __init__(self):
        self.logger = logger

    def signup(self, payload: SignupRequest) -> Dict[str, Any]:
        """
        Handle user signup

        Returns:
            dict: public user fields, e.g. {'id': ..., 'email': ..., 'username': ...}

        Raises:
            ValidationError: the account cannot be created from this payload
            AuthUnavailableError: no credential backend is configured
        """
        self.logger.warning("[AUTH] Signup requested but no credential backend is configured")
        raise AuthUnavailableError("Signup is not available on this server")

    def login(self, payload: LoginRequest) -> Dict[str, Any]:
        """
        Handle user login

        Returns:
            dict: public user fields, e.g. {'id': ..., 'email': ...}

        Raises:
            AuthenticationError: credentials were rejected
            AuthUnavailableError: no credential backend is configured
        """
        self.logger.warning("[AUTH] Login requested but no credential backend is configured")
        raise AuthUnavailableError("Login is not available on this server")
