"""
Products page.

Besides the product list, the page keeps the full category list so the form
can offer a category for each product.
"""

import logging
from typing import Any, Dict, List

from catalog_admin.controllers.resource_controller import ResourcePageController
from catalog_admin.data.models import (
    CreateProductDto, ProductCategoryDto, ProductDto, UpdateProductDto
)
from catalog_admin.data.validation import FormValidator
from catalog_admin.errors import ResponseParseError, SessionExpiredError

logger = logging.getLogger("catalog_admin.controllers.products")


class ProductsPageController(ResourcePageController):
    message_keys = {
        "created": "Product.productCreated",
        "updated": "Product.productUpdated",
        "deleted": "Product.productDeleted",
        "fetch_error": "Product.failedToLoadProducts",
        "create_error": "Product.errorCreatingProduct",
        "update_error": "Product.errorUpdatingProduct",
        "delete_error": "Product.errorDeletingProduct",
        "delete_title": "Product.deleteProductTitle",
        "delete_message": "Product.deleteProductMessage",
    }

    def __init__(self, service, category_service, translator, **kwargs):
        super().__init__(service, translator, **kwargs)
        self.category_service = category_service
        self.categories: List[ProductCategoryDto] = []

    async def load(self) -> None:
        if await self.load_categories():
            await super().load()

    async def load_categories(self) -> bool:
        """
        Load the category options; on failure the option list is empty.

        Returns:
            bool: False if the session ended while loading
        """
        try:
            result = await self.category_service.list()
        except SessionExpiredError as e:
            self._session_expired(e, "list categories")
            return False
        except ResponseParseError as e:
            self.error_handler.handle_data_error(e, context="list categories")
            self.categories = []
            return True

        if result.success and result.data is not None:
            self.categories = list(result.data)
        else:
            logger.warning(f"Could not load categories: {result.message}")
            self.categories = []
        self._notify()
        return True

    def category_name(self, category_id: str) -> str:
        for category in self.categories:
            if category.id == category_id:
                return category.name
        return ""

    def empty_form(self) -> Dict[str, Any]:
        return {"name": "", "description": "", "category_id": ""}

    def form_from_row(self, row: ProductDto) -> Dict[str, Any]:
        return {"name": row.name, "description": row.description, "category_id": row.category_id}

    def validate(self, values: Dict[str, Any], creating: bool) -> Dict[str, str]:
        return FormValidator.validate_product(values)

    def build_create_dto(self, values: Dict[str, Any]) -> CreateProductDto:
        return CreateProductDto(
            name=values["name"].strip(),
            description=values["description"].strip(),
            category_id=str(values["category_id"]),
        )

    def build_update_dto(self, item_id: str, values: Dict[str, Any]) -> UpdateProductDto:
        return UpdateProductDto(
            id=item_id,
            name=values["name"].strip(),
            description=values["description"].strip(),
            category_id=str(values["category_id"]),
        )
