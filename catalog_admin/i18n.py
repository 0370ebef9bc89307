"""
Localization for the Catalog Admin client.

Only the strings produced by the client core live here (notifications,
errors, validation messages and confirmations). Labels belong to the
front end.
"""

import re
import logging
from typing import Dict, Optional

logger = logging.getLogger("catalog_admin.i18n")

LANGUAGE_KEY = "lang"
DEFAULT_LANGUAGE = "en"

SUPPORTED_LANGUAGES = {
    "en": "English",
    "es": "Español",
}

RESOURCES: Dict[str, Dict[str, str]] = {
    "en": {
        "General.loginFailed": "Login failed",
        "General.errorServer": "Error connecting to server",
        "General.requestFailed": "Request failed",
        "General.delete": "Delete",
        "General.cancel": "Cancel",
        "Login.emailRequired": "Email is required",
        "Login.emailInvalid": "Invalid email format",
        "Login.passwordRequired": "Password is required",
        "Login.passwordMin": "Password must be at least 6 characters",
        "Product.nameRequired": "Name is required",
        "Product.descriptionRequired": "Description is required",
        "Product.categoryRequired": "Category is required",
        "Product.productCreated": "Product created successfully",
        "Product.productUpdated": "Product updated successfully",
        "Product.productDeleted": "Product deleted successfully",
        "Product.failedToLoadProducts": "Failed to load products",
        "Product.errorCreatingProduct": "Error creating product",
        "Product.errorUpdatingProduct": "Error updating product",
        "Product.errorDeletingProduct": "Error deleting product",
        "Product.deleteProductTitle": "Delete Product",
        "Product.deleteProductMessage": "Are you sure you want to delete {{name}}?",
        "Category.nameCategoryRequired": "Name is required",
        "Category.descriptionCategoryRequired": "Description is required",
        "Category.categoryCreated": "Category created successfully",
        "Category.categoryUpdated": "Category updated successfully",
        "Category.categoryDeleted": "Category deleted successfully",
        "Category.errorFetchingCategories": "Error fetching categories",
        "Category.errorCreatingCategory": "Error creating category",
        "Category.errorUpdatingCategory": "Error updating category",
        "Category.errorDeletingCategory": "Error deleting category",
        "Category.deleteCategoryTitle": "Delete Category",
        "Category.deleteCategoryMessage": "Are you sure you want to delete \"{{name}}\"?",
        "User.userCreated": "User created successfully",
        "User.userUpdated": "User updated successfully",
        "User.userDeleted": "User deleted successfully",
        "User.errorFetchingUsers": "Error fetching users",
        "User.errorCreatingUser": "Error creating user",
        "User.errorUpdatingUser": "Error updating user",
        "User.errorDeletingUser": "Error deleting user",
        "User.deleteUserTitle": "Delete User",
        "User.deleteUserMessage": "Are you sure you want to delete {{name}}?",
        "User.firstNameRequired": "First name is required",
        "User.lastNameRequired": "Last name is required",
        "User.emailRequired": "Email is required",
        "User.emailInvalid": "Invalid email format",
        "User.phoneRequired": "Phone is required",
        "User.phoneInvalid": "Invalid phone number",
        "User.passwordRequired": "Password is required",
        "User.passwordMin": "Password must be at least 6 characters",
    },
    "es": {
        "General.loginFailed": "Inicio de sesión fallido",
        "General.errorServer": "Error al conectar con el servidor",
        "General.requestFailed": "La solicitud falló",
        "General.delete": "Eliminar",
        "General.cancel": "Cancelar",
        "Login.emailRequired": "El correo es obligatorio",
        "Login.emailInvalid": "Formato de correo inválido",
        "Login.passwordRequired": "La contraseña es obligatoria",
        "Login.passwordMin": "La contraseña debe tener al menos 6 caracteres",
        "Product.nameRequired": "El nombre es obligatorio",
        "Product.descriptionRequired": "La descripción es obligatoria",
        "Product.categoryRequired": "La categoría es obligatoria",
        "Product.productCreated": "Producto creado exitosamente",
        "Product.productUpdated": "Producto actualizado exitosamente",
        "Product.productDeleted": "Producto eliminado exitosamente",
        "Product.failedToLoadProducts": "No se pudieron cargar los productos",
        "Product.errorCreatingProduct": "Error al crear el producto",
        "Product.errorUpdatingProduct": "Error al actualizar el producto",
        "Product.errorDeletingProduct": "Error al eliminar el producto",
        "Product.deleteProductTitle": "Eliminar producto",
        "Product.deleteProductMessage": "¿Seguro que deseas eliminar {{name}}?",
        "Category.nameCategoryRequired": "El nombre es obligatorio",
        "Category.descriptionCategoryRequired": "La descripción es obligatoria",
        "Category.categoryCreated": "Categoría creada exitosamente",
        "Category.categoryUpdated": "Categoría actualizada exitosamente",
        "Category.categoryDeleted": "Categoría eliminada exitosamente",
        "Category.errorFetchingCategories": "Error al obtener las categorías",
        "Category.errorCreatingCategory": "Error al crear la categoría",
        "Category.errorUpdatingCategory": "Error al actualizar la categoría",
        "Category.errorDeletingCategory": "Error al eliminar la categoría",
        "Category.deleteCategoryTitle": "Eliminar categoría",
        "Category.deleteCategoryMessage": "¿Seguro que deseas eliminar \"{{name}}\"?",
        "User.userCreated": "Usuario creado exitosamente",
        "User.userUpdated": "Usuario actualizado exitosamente",
        "User.userDeleted": "Usuario eliminado exitosamente",
        "User.errorFetchingUsers": "Error al obtener los usuarios",
        "User.errorCreatingUser": "Error al crear el usuario",
        "User.errorUpdatingUser": "Error al actualizar el usuario",
        "User.errorDeletingUser": "Error al eliminar el usuario",
        "User.deleteUserTitle": "Eliminar usuario",
        "User.deleteUserMessage": "¿Seguro que deseas eliminar {{name}}?",
        "User.firstNameRequired": "El nombre es obligatorio",
        "User.lastNameRequired": "El apellido es obligatorio",
        "User.emailRequired": "El correo es obligatorio",
        "User.emailInvalid": "Formato de correo inválido",
        "User.phoneRequired": "El teléfono es obligatorio",
        "User.phoneInvalid": "Número de teléfono inválido",
        "User.passwordRequired": "La contraseña es obligatoria",
        "User.passwordMin": "La contraseña debe tener al menos 6 caracteres",
    },
}

_PLACEHOLDER = re.compile(r"\{\{\s*(\w+)\s*\}\}")


class LocalePreference:
    """Persisted two-letter language code."""

    def __init__(self, storage, default: str = DEFAULT_LANGUAGE):
        self.storage = storage
        self.default = default if default in SUPPORTED_LANGUAGES else DEFAULT_LANGUAGE

    @property
    def language(self) -> str:
        stored = self.storage.get_item(LANGUAGE_KEY)
        if stored in SUPPORTED_LANGUAGES:
            return stored
        return self.default

    def set_language(self, code: str) -> None:
        if code not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {code}")
        self.storage.set_item(LANGUAGE_KEY, code)


class Translator:
    """Looks up display strings in the active language."""

    def __init__(self, preference: Optional[LocalePreference] = None, language: Optional[str] = None):
        self.preference = preference
        self._language = language or (preference.language if preference else DEFAULT_LANGUAGE)

    @property
    def language(self) -> str:
        return self._language

    def change_language(self, code: str) -> None:
        """Switch the active language and persist the choice."""
        if code not in SUPPORTED_LANGUAGES:
            raise ValueError(f"Unsupported language: {code}")
        if self.preference:
            self.preference.set_language(code)
        self._language = code
        logger.info(f"Language changed to {code}")

    def t(self, key: str, **params) -> str:
        """
        Translate a key, interpolating {{name}} placeholders.

        Falls back to English, then to the key itself.
        """
        text = RESOURCES.get(self._language, {}).get(key)
        if text is None:
            text = RESOURCES[DEFAULT_LANGUAGE].get(key, key)
        if params:
            text = _PLACEHOLDER.sub(
                lambda m: str(params.get(m.group(1), m.group(0))), text)
        return text
