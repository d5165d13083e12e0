"""
Custom exceptions for the SaaS Day auth API
"""
class SaasDayException(Exception):
    """Base exception for the auth API"""
    status_code = 500

    def __init__(self, message: str, error_code: str = None, details: dict = None):
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {
            'success': False,
            'error': self.message,
            'error_code': self.error_code,
            'details': self.details,
        }

class ValidationError(SaasDayException):
    """Input validation failed"""
    status_code = 400

class AuthenticationError(SaasDayException):
    """Authentication failed"""
    status_code = 401

class AuthUnavailableError(SaasDayException):
    """No credential backend is configured for this deployment"""
    status_code = 501

class ConfigurationError(SaasDayException):
    """Invalid startup configuration"""
    pass
