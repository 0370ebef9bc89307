"""
Client-side form validation for the Catalog Admin client.

Validators return a mapping of field name to translation key. An empty
mapping means the form can be submitted. Nothing that fails validation is
ever sent to the server.
"""

import re
from typing import Any, Dict, Mapping

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PHONE_PATTERN = re.compile(r"^[0-9+\-\s()]{7,20}$")
PASSWORD_MIN_LENGTH = 6


def _value(data: Mapping[str, Any], field: str) -> str:
    value = data.get(field)
    return "" if value is None else str(value)


def _is_blank(data: Mapping[str, Any], field: str) -> bool:
    return not _value(data, field).strip()


class InputValidator:
    """
    Utility class for validating user input.
    """

    @staticmethod
    def validate_required(data: Mapping[str, Any], fields: Mapping[str, str]) -> Dict[str, str]:
        """
        Check that required fields are present and non-blank.

        Args:
            data: Submitted form values
            fields: Field name -> translation key used when the field is missing

        Returns:
            Dict[str, str]: Field errors
        """
        return {field: key for field, key in fields.items() if _is_blank(data, field)}

    @staticmethod
    def is_valid_email(email: str) -> bool:
        return bool(EMAIL_PATTERN.match(email or ""))

    @staticmethod
    def is_valid_phone(phone: str) -> bool:
        return bool(PHONE_PATTERN.match(phone or ""))

    @staticmethod
    def is_valid_password(password: str) -> bool:
        return len(password or "") >= PASSWORD_MIN_LENGTH


class FormValidator:
    """Per-form validation rules."""

    @staticmethod
    def validate_login(data: Mapping[str, Any]) -> Dict[str, str]:
        errors = InputValidator.validate_required(data, {
            "email": "Login.emailRequired",
            "password": "Login.passwordRequired",
        })
        if "email" not in errors and not InputValidator.is_valid_email(_value(data, "email")):
            errors["email"] = "Login.emailInvalid"
        if "password" not in errors and not InputValidator.is_valid_password(_value(data, "password")):
            errors["password"] = "Login.passwordMin"
        return errors

    @staticmethod
    def validate_user(data: Mapping[str, Any], creating: bool) -> Dict[str, str]:
        """
        Validate the user form.

        The password is only part of the form when creating a user.
        """
        required = {
            "first_name": "User.firstNameRequired",
            "last_name": "User.lastNameRequired",
            "email": "User.emailRequired",
            "phone": "User.phoneRequired",
        }
        if creating:
            required["password"] = "User.passwordRequired"

        errors = InputValidator.validate_required(data, required)
        if "email" not in errors and not InputValidator.is_valid_email(_value(data, "email")):
            errors["email"] = "User.emailInvalid"
        if "phone" not in errors and not InputValidator.is_valid_phone(_value(data, "phone")):
            errors["phone"] = "User.phoneInvalid"
        if creating and "password" not in errors and \
                not InputValidator.is_valid_password(_value(data, "password")):
            errors["password"] = "User.passwordMin"
        return errors

    @staticmethod
    def validate_category(data: Mapping[str, Any]) -> Dict[str, str]:
        return InputValidator.validate_required(data, {
            "name": "Category.nameCategoryRequired",
            "description": "Category.descriptionCategoryRequired",
        })

    @staticmethod
    def validate_product(data: Mapping[str, Any]) -> Dict[str, str]:
        return InputValidator.validate_required(data, {
            "name": "Product.nameRequired",
            "description": "Product.descriptionRequired",
            "category_id": "Product.categoryRequired",
        })
