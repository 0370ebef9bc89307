"""
Backend access: the authenticated API client and the entity services.
"""

from catalog_admin.services.api_client import APIClient
from catalog_admin.services.entities import UserService, ProductService, ProductCategoryService

__all__ = ["APIClient", "UserService", "ProductService", "ProductCategoryService"]
