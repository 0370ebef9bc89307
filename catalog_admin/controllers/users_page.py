"""
Users page.
"""

from typing import Any, Dict

from catalog_admin.controllers.resource_controller import ResourcePageController
from catalog_admin.data.models import CreateUserDto, UpdateUserDto, UserDto
from catalog_admin.data.validation import FormValidator


class UsersPageController(ResourcePageController):
    message_keys = {
        "created": "User.userCreated",
        "updated": "User.userUpdated",
        "deleted": "User.userDeleted",
        "fetch_error": "User.errorFetchingUsers",
        "create_error": "User.errorCreatingUser",
        "update_error": "User.errorUpdatingUser",
        "delete_error": "User.errorDeletingUser",
        "delete_title": "User.deleteUserTitle",
        "delete_message": "User.deleteUserMessage",
    }

    def empty_form(self) -> Dict[str, Any]:
        return {"first_name": "", "last_name": "", "email": "", "phone": "", "password": ""}

    def form_from_row(self, row: UserDto) -> Dict[str, Any]:
        # The password is not editable here
        return {
            "first_name": row.first_name,
            "last_name": row.last_name,
            "email": row.email,
            "phone": row.phone,
        }

    def validate(self, values: Dict[str, Any], creating: bool) -> Dict[str, str]:
        return FormValidator.validate_user(values, creating)

    def build_create_dto(self, values: Dict[str, Any]) -> CreateUserDto:
        return CreateUserDto(
            first_name=values["first_name"].strip(),
            last_name=values["last_name"].strip(),
            email=values["email"].strip(),
            phone=values["phone"].strip(),
            password=values["password"],
        )

    def build_update_dto(self, item_id: str, values: Dict[str, Any]) -> UpdateUserDto:
        return UpdateUserDto(
            id=item_id,
            first_name=values["first_name"].strip(),
            last_name=values["last_name"].strip(),
            email=values["email"].strip(),
            phone=values["phone"].strip(),
        )
