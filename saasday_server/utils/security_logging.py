"""
Security event logging for the auth API
"""
import logging
import os
from datetime import datetime, timezone
from typing import Optional

logger = logging.getLogger('security')

_SECURITY_FORMAT = '%(asctime)s [SECURITY] %(levelname)s: %(message)s'


def setup_security_logging(log_file: Optional[str]) -> Optional[logging.Handler]:
    """Attach a file handler for security events; no-op when ``log_file`` is empty"""
    if not log_file:
        return None

    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(log_file):
            return handler

    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = logging.FileHandler(log_file)
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter(_SECURITY_FORMAT))
    logger.addHandler(file_handler)
    return file_handler


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def log_failed_login(email: str, ip_address: str, reason: str = "Invalid credentials"):
    """Log failed login attempt"""
    logger.warning(
        f"Failed login attempt - Email: {email}, IP: {ip_address}, Reason: {reason}",
        extra={
            'event': 'failed_login',
            'email': email,
            'ip_address': ip_address,
            'reason': reason,
            'timestamp': _now()
        }
    )


def log_successful_login(email: str, ip_address: str, user_id=None):
    """Log successful login"""
    logger.info(
        f"Successful login - Email: {email}, IP: {ip_address}, User ID: {user_id}",
        extra={
            'event': 'successful_login',
            'email': email,
            'ip_address': ip_address,
            'user_id': user_id,
            'timestamp': _now()
        }
    )


def log_signup(email: str, ip_address: str, user_id=None):
    """Log account creation"""
    logger.info(
        f"Signup - Email: {email}, IP: {ip_address}, User ID: {user_id}",
        extra={
            'event': 'signup',
            'email': email,
            'ip_address': ip_address,
            'user_id': user_id,
            'timestamp': _now()
        }
    )


def log_gate_rejection(endpoint: str, ip_address: str, reason: str):
    """Log a request stopped by the auth middleware"""
    logger.warning(
        f"Auth gate rejected request - Endpoint: {endpoint}, IP: {ip_address}, Reason: {reason}",
        extra={
            'event': 'gate_rejection',
            'endpoint': endpoint,
            'ip_address': ip_address,
            'reason': reason,
            'timestamp': _now()
        }
    )
