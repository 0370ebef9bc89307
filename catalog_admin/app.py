"""
Composition root for the Catalog Admin client.

AdminApplication wires the session context, request gateway, services and
page controllers together. A front end creates one instance and renders the
controllers' state.
"""

import logging
from typing import Optional

import requests

from catalog_admin.auth.auth_service import AuthenticationService
from catalog_admin.auth.session_context import SessionContext, TokenStore
from catalog_admin.config import AppSettings
from catalog_admin.controllers.categories_page import CategoriesPageController
from catalog_admin.controllers.login_controller import LoginController
from catalog_admin.controllers.products_page import ProductsPageController
from catalog_admin.controllers.users_page import UsersPageController
from catalog_admin.errors import ErrorHandler
from catalog_admin.i18n import LocalePreference, Translator
from catalog_admin.navigation import HOME_PATH, LOGIN_PATH, Navigator
from catalog_admin.services.api_client import APIClient
from catalog_admin.services.entities import ProductCategoryService, ProductService, UserService
from catalog_admin.storage import JsonFileStorage, MemoryStorage

logger = logging.getLogger("catalog_admin.app")


class AdminApplication:
    """The admin client with all of its components."""

    def __init__(self, settings=AppSettings, token_storage=None, preference_storage=None,
                 http_session: Optional[requests.Session] = None):
        """
        Build the application.

        Args:
            settings: Settings class or object (defaults to AppSettings)
            token_storage: Storage for the access token. Defaults to the
                configured session file, or memory.
            preference_storage: Storage for the language preference. Defaults
                to the configured preferences file.
            http_session (requests.Session, optional): HTTP session for login and
                the API client. By default each gets its own session.
        """
        self.settings = settings

        if token_storage is None:
            token_storage = JsonFileStorage(settings.SESSION_FILE) if settings.SESSION_FILE else MemoryStorage()
        if preference_storage is None:
            preference_storage = JsonFileStorage(settings.PREFERENCES_FILE)

        self.locale = LocalePreference(preference_storage, default=settings.DEFAULT_LANGUAGE)
        self.translator = Translator(self.locale)
        self.error_handler = ErrorHandler(self.translator)
        self.session_context = SessionContext(TokenStore(token_storage), self.locale)

        initial_path = HOME_PATH if self.session_context.is_authenticated() else LOGIN_PATH
        self.navigator = Navigator(initial_path)

        self.api_client = APIClient(
            self.session_context,
            self.navigator,
            base_url=settings.API_BASE_URL,
            http_session=http_session or requests.Session(),
            timeout=settings.REQUEST_TIMEOUT
        )
        self.auth_service = AuthenticationService(
            self.session_context,
            base_url=settings.API_BASE_URL,
            http_session=http_session or requests.Session(),
            timeout=settings.REQUEST_TIMEOUT
        )

        self.user_service = UserService(self.api_client, self.error_handler)
        self.product_service = ProductService(self.api_client, self.error_handler)
        self.category_service = ProductCategoryService(self.api_client, self.error_handler)

        page_options = {
            "page_size": settings.PAGE_SIZE,
            "toast_duration_ms": settings.TOAST_DURATION_MS,
            "error_handler": self.error_handler,
        }
        self.login = LoginController(
            self.auth_service, self.session_context, self.navigator, self.translator,
            toast_duration_ms=settings.TOAST_DURATION_MS, error_handler=self.error_handler
        )
        self.users_page = UsersPageController(self.user_service, self.translator, **page_options)
        self.products_page = ProductsPageController(
            self.product_service, self.category_service, self.translator, **page_options)
        self.categories_page = CategoriesPageController(
            self.category_service, self.translator, **page_options)

        logger.info(f"Application initialized for {settings.API_BASE_URL}")

    def is_authenticated(self) -> bool:
        return self.session_context.is_authenticated()

    def logout(self) -> None:
        """Log out and return to the login page."""
        self.auth_service.logout()
        self.navigator.navigate(LOGIN_PATH)

    def change_language(self, code: str) -> None:
        self.translator.change_language(code)
