"""
Login page flow.
"""

import logging
from typing import Dict

import requests

from catalog_admin.controllers.notifications import ERROR, Toast
from catalog_admin.data.models import LoginDto
from catalog_admin.data.validation import FormValidator
from catalog_admin.errors import CatalogAdminError, ErrorHandler
from catalog_admin.navigation import HOME_PATH

logger = logging.getLogger("catalog_admin.controllers.login")


class LoginController:
    """
    Validates credentials, exchanges them for a token and opens the session.

    Re-submitting while a request is outstanding is not prevented.
    """

    def __init__(self, auth_service, session_context, navigator, translator,
                 toast_duration_ms: int = 3000, error_handler: ErrorHandler = None):
        self.auth_service = auth_service
        self.session_context = session_context
        self.navigator = navigator
        self.translator = translator
        self.error_handler = error_handler or ErrorHandler(translator)
        self.toast = Toast(toast_duration_ms)
        self.field_errors: Dict[str, str] = {}

    async def submit(self, email: str, password: str) -> bool:
        """
        Attempt to log in.

        Returns:
            bool: True when the session was started
        """
        error_keys = FormValidator.validate_login({"email": email, "password": password})
        self.field_errors = {field: self.translator.t(key) for field, key in error_keys.items()}
        if self.field_errors:
            logger.info(f"Login form invalid: {sorted(self.field_errors)}")
            return False

        try:
            result = await self.auth_service.login(LoginDto(user_name=email, password=password))
        except (requests.RequestException, CatalogAdminError) as e:
            self.error_handler.handle_network_error(e, "login")
            self.toast.show(self.translator.t("General.errorServer"), ERROR)
            return False

        token = result.data.access_token if result.data else None
        if result.success and token:
            self.session_context.begin(token)
            logger.info(f"User {email} logged in")
            self.navigator.navigate(HOME_PATH)
            return True

        error_msg = (
            (result.data.message if result.data else None)
            or result.message
            or self.translator.t("General.loginFailed")
        )
        logger.warning(f"Login rejected for {email}: {error_msg}")
        self.toast.show(error_msg, ERROR)
        return False
