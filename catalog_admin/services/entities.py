"""
Entity services for users, products and product categories.
"""

from catalog_admin.data.models import ProductCategoryDto, ProductDto, UserDto
from catalog_admin.services.entity_service import EntityService


class UserService(EntityService[UserDto]):
    resource = "Users"
    dto_model = UserDto


class ProductService(EntityService[ProductDto]):
    resource = "Products"
    dto_model = ProductDto


class ProductCategoryService(EntityService[ProductCategoryDto]):
    resource = "ProductCategories"
    dto_model = ProductCategoryDto
