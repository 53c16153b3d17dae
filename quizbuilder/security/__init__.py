"""
Security module for the application.

This module provides:
- Security headers
- CORS for the browser client (flask-cors)
"""

from .security_headers import SecurityHeaders
from .security_init import PAGINATION_HEADERS, init_security

__all__ = [
    'PAGINATION_HEADERS',
    'SecurityHeaders',
    'init_security',
]
