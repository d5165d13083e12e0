"""
OpenAPI/Swagger documentation for the SaaS Day API
"""
import logging

from flasgger import Swagger

from saasday_server import __version__

logger = logging.getLogger(__name__)

swagger_config = {
    "headers": [],
    "specs": [
        {
            "endpoint": 'apispec',
            "route": '/api/apispec.json',
            "rule_filter": lambda rule: rule.rule.startswith('/api/auth'),
            "model_filter": lambda tag: True,
        }
    ],
    "static_url_path": "/flasgger_static",
    "swagger_ui": True,
    "specs_route": "/api/docs"
}

swagger_template = {
    "swagger": "2.0",
    "info": {
        "title": "SaaS Day API",
        "description": "Signup and login endpoints for the Building a SaaS project",
        "version": __version__,
    },
    "schemes": ["http", "https"],
    "securityDefinitions": {
        "apiKey": {
            "type": "apiKey",
            "name": "X-API-Key",
            "in": "header",
            "description": "Required only when AUTH_API_KEYS is configured"
        }
    },
    "tags": [
        {
            "name": "Authentication",
            "description": "User authentication endpoints"
        }
    ]
}


def init_swagger(app):
    """Initialize Swagger documentation; the API still serves if this fails"""
    try:
        return Swagger(app, config=swagger_config, template=swagger_template)
    except Exception as e:
        logger.warning(f"[DOCS] Swagger initialization failed: {e}")
        return None
