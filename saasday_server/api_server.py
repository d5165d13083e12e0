import logging
import sys
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from saasday_server import __version__
from saasday_server.api.auth import bp as auth_bp
from saasday_server.api.docs import init_swagger
from saasday_server.api.middleware import (
    EXTENSION_KEY,
    allow_all,
    api_key_gate,
    install_request_logger,
)
from saasday_server.config import Settings
from saasday_server.exceptions import ConfigurationError, SaasDayException
from saasday_server.services.auth_service import AuthService
from saasday_server.utils.security_logging import setup_security_logging

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'

logger = logging.getLogger(__name__)


def configure_logging(level: str = 'INFO') -> None:
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(SaasDayException)
    def handle_app_error(e):
        if e.status_code >= 500:
            logger.error(f"[API] {e.error_code}: {e.message}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        if e.code is None:
            return e
        return jsonify({
            'success': False,
            'error': e.description,
            'error_code': type(e).__name__,
            'details': {}
        }), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        logger.error(f"[API] Unhandled error: {e}", exc_info=e)
        return jsonify({
            'success': False,
            'error': 'Internal server error',
            'error_code': 'InternalServerError',
            'details': {}
        }), 500


def create_app(settings: Optional[Settings] = None, auth_service=None, auth_gate=None) -> Flask:
    """
    Build the auth API application.

    Args:
        settings: runtime settings (read from the environment when omitted)
        auth_service: object with ``signup`` and ``login``; defaults to AuthService
        auth_gate: callable run by auth_middleware; defaults to the API key gate
            when keys are configured, otherwise a pass-through
    """
    if settings is None:
        settings = Settings.from_env()
    if auth_gate is None:
        auth_gate = api_key_gate(settings.auth_api_keys) if settings.auth_api_keys else allow_all

    app = Flask(__name__)
    app.config['SETTINGS'] = settings
    CORS(app, origins=settings.cors_origins)

    app.extensions[EXTENSION_KEY] = {
        'auth_gate': auth_gate,
        'auth_service': auth_service or AuthService(),
    }

    setup_security_logging(settings.security_log_file)
    install_request_logger(app)
    _register_error_handlers(app)

    app.register_blueprint(auth_bp, url_prefix='/api/auth')

    @app.route('/health')
    def _health():
        """Health check endpoint"""
        return jsonify({
            'status': 'ok',
            'service': 'SaaS Day API',
            'version': __version__,
        })

    init_swagger(app)
    return app


def main():
    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        configure_logging()
        logger.error(f"[BOOT] {e.message}")
        sys.exit(1)

    configure_logging(settings.log_level)
    app = create_app(settings)
    logger.info(f"Backend : Server is running on http://localhost:{settings.port}")
    app.run(host=settings.host, port=settings.port)


if __name__ == '__main__':
    main()
