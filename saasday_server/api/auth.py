"""
Authentication blueprint for the SaaS Day API, mounted at /api/auth
"""
import logging

from flask import Blueprint, current_app, jsonify, request
from pydantic import ValidationError as PydanticValidationError

from saasday_server.api.middleware import EXTENSION_KEY, auth_middleware
from saasday_server.exceptions import AuthenticationError, ValidationError
from saasday_server.models.requests import LoginRequest, SignupRequest
from saasday_server.utils.security_logging import (
    log_failed_login,
    log_signup,
    log_successful_login,
)

logger = logging.getLogger(__name__)

bp = Blueprint('auth', __name__)


def _parse_body(model):
    """Validate the JSON body against ``model`` or raise ValidationError"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Invalid input: request body must be a JSON object")
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        fields = {}
        for err in e.errors():
            name = '.'.join(str(part) for part in err['loc']) or 'body'
            fields[name] = err['msg']
        summary = ', '.join(f"{k}: {v}" for k, v in fields.items())
        raise ValidationError(f"Invalid input: {summary}", details={'fields': fields}) from None


def _service():
    return current_app.extensions[EXTENSION_KEY]['auth_service']


def _client_ip():
    return request.remote_addr or 'unknown'


@bp.route('/signup', methods=['POST'])
@auth_middleware
def signup():
    """Create an account
    ---
    tags:
      - Authentication
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [email, password]
          properties:
            email: {type: string}
            password: {type: string}
            username: {type: string}
    responses:
      201:
        description: Account created
      400:
        description: Invalid input
      401:
        description: Rejected by the auth gate
      501:
        description: No credential backend configured
    """
    payload = _parse_body(SignupRequest)
    user = _service().signup(payload)
    log_signup(payload.email, _client_ip(), user.get('id'))
    logger.info(f"[AUTH] Signup succeeded for {payload.email}")
    return jsonify({'success': True, 'user': user}), 201


@bp.route('/login', methods=['POST'])
@auth_middleware
def login():
    """Log in with email and password
    ---
    tags:
      - Authentication
    parameters:
      - in: body
        name: body
        required: true
        schema:
          type: object
          required: [email, password]
          properties:
            email: {type: string}
            password: {type: string}
    responses:
      200:
        description: Logged in
      400:
        description: Invalid input
      401:
        description: Invalid credentials or rejected by the auth gate
      501:
        description: No credential backend configured
    """
    payload = _parse_body(LoginRequest)
    try:
        user = _service().login(payload)
    except AuthenticationError as e:
        log_failed_login(payload.email, _client_ip(), e.message)
        raise
    log_successful_login(payload.email, _client_ip(), user.get('id'))
    return jsonify({'success': True, 'user': user}), 200
