# catalog_admin/auth/__init__.py
"""
Authentication module for the admin client.
"""

from catalog_admin.auth.session_context import TokenStore, SessionContext
from catalog_admin.auth.auth_service import AuthenticationService

__all__ = [
    "TokenStore",
    "SessionContext",
    "AuthenticationService",
]
