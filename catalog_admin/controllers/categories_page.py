"""
Product categories page.
"""

from typing import Any, Dict

from catalog_admin.controllers.resource_controller import ResourcePageController
from catalog_admin.data.models import (
    CreateProductCategoryDto, ProductCategoryDto, UpdateProductCategoryDto
)
from catalog_admin.data.validation import FormValidator


class CategoriesPageController(ResourcePageController):
    message_keys = {
        "created": "Category.categoryCreated",
        "updated": "Category.categoryUpdated",
        "deleted": "Category.categoryDeleted",
        "fetch_error": "Category.errorFetchingCategories",
        "create_error": "Category.errorCreatingCategory",
        "update_error": "Category.errorUpdatingCategory",
        "delete_error": "Category.errorDeletingCategory",
        "delete_title": "Category.deleteCategoryTitle",
        "delete_message": "Category.deleteCategoryMessage",
    }

    def empty_form(self) -> Dict[str, Any]:
        return {"name": "", "description": ""}

    def form_from_row(self, row: ProductCategoryDto) -> Dict[str, Any]:
        return {"name": row.name, "description": row.description}

    def validate(self, values: Dict[str, Any], creating: bool) -> Dict[str, str]:
        return FormValidator.validate_category(values)

    def build_create_dto(self, values: Dict[str, Any]) -> CreateProductCategoryDto:
        return CreateProductCategoryDto(
            name=values["name"].strip(),
            description=values["description"].strip(),
        )

    def build_update_dto(self, item_id: str, values: Dict[str, Any]) -> UpdateProductCategoryDto:
        return UpdateProductCategoryDto(
            id=item_id,
            name=values["name"].strip(),
            description=values["description"].strip(),
        )
