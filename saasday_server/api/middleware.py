"""
HTTP middleware for the auth API - request logging and the auth gate.

The request logger is installed app-wide as a before/after request pair, so it
runs ahead of any route decorator. ``auth_middleware`` wraps individual views
and asks the app's configured gate whether the request may continue.
"""
import hmac
import logging
import time
from functools import wraps
from typing import Callable, Iterable

from flask import Flask, current_app, g, request

from saasday_server.exceptions import AuthenticationError
from saasday_server.utils.security_logging import log_gate_rejection

logger = logging.getLogger('saasday_server.requests')

EXTENSION_KEY = 'saasday'

AuthGate = Callable[[object], None]


def allow_all(req) -> None:
    """Pass-through gate: every request may continue"""
    return None


def api_key_gate(keys: Iterable[str], header: str = 'X-API-Key') -> AuthGate:
    """Build a gate that requires ``header`` to carry one of ``keys``"""
    allowed = [k.encode('utf-8') for k in keys if k]
    if not allowed:
        raise ValueError("api_key_gate needs at least one key")

    def gate(req) -> None:
        supplied = req.headers.get(header, '')
        if not supplied:
            raise AuthenticationError(f"Missing {header} header")
        supplied_bytes = supplied.encode('utf-8')
        if not any(hmac.compare_digest(supplied_bytes, key) for key in allowed):
            raise AuthenticationError(f"Invalid {header}")

    return gate


def auth_middleware(view):
    """Run the app's auth gate before ``view``; a gate failure short-circuits with 401"""
    @wraps(view)
    def wrapper(*args, **kwargs):
        gate = current_app.extensions[EXTENSION_KEY]['auth_gate']
        try:
            gate(request)
        except AuthenticationError as e:
            log_gate_rejection(request.path, request.remote_addr or 'unknown', e.message)
            raise
        g.auth_checked = True
        return view(*args, **kwargs)
    return wrapper


def _log_request():
    g.request_started = time.perf_counter()
    logger.info(
        "[REQUEST] %s %s from %s (%s bytes)",
        request.method,
        request.path,
        request.remote_addr or 'unknown',
        request.content_length or 0,
    )


def _log_response(response):
    started = g.pop('request_started', None)
    elapsed_ms = (time.perf_counter() - started) * 1000 if started is not None else 0.0
    logger.info(
        "[RESPONSE] %s %s -> %s in %.1fms",
        request.method,
        request.path,
        response.status_code,
        elapsed_ms,
    )
    return response


def install_request_logger(app: Flask) -> None:
    """Record every request and its response on the diagnostic log"""
    app.before_request(_log_request)
    app.after_request(_log_response)
