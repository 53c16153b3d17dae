"""
Security initialization module.

This module initializes all security features for the Flask application.
"""

from flask import Flask
from flask_cors import CORS

from .security_headers import SecurityHeaders

PAGINATION_HEADERS = ['X-Total-Count', 'X-Total-Pages', 'X-Page', 'X-Per-Page']


def init_security(app: Flask):
    """
    Initialize all security features for the Flask app.

    Args:
        app: Flask application instance
    """
    # Initialize security headers
    SecurityHeaders.init_app(app)

    # CORS for the browser client, limited to the API routes
    origins = app.config.get('CORS_ORIGINS') or []
    CORS(
        app,
        resources={f"{app.config['API_PREFIX']}/*": {'origins': origins}},
        methods=['GET', 'POST', 'PUT', 'DELETE', 'OPTIONS'],
        expose_headers=PAGINATION_HEADERS,
        send_wildcard='*' in origins,
    )

    app.logger.info(f"Security headers initialized (CORS origins: {', '.join(origins)})")
