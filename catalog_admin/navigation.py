"""
Application navigation state.

The route table itself belongs to the front end; this module only tracks
where the application currently is and tells listeners when that changes.
"""

import logging
from typing import Callable, List

logger = logging.getLogger("catalog_admin.navigation")

LOGIN_PATH = "/login"
HOME_PATH = "/users"
USERS_PATH = "/users"
PRODUCTS_PATH = "/products"
CATEGORIES_PATH = "/product-categories"


class Navigator:
    """Holds the current route and notifies subscribers of changes."""

    def __init__(self, initial_path: str = LOGIN_PATH):
        self.current_path = initial_path
        self._listeners: List[Callable[[str], None]] = []

    def subscribe(self, callback: Callable[[str], None]) -> Callable[[], None]:
        """
        Register a route listener.

        Returns:
            Callable: Function that removes the listener
        """
        self._listeners.append(callback)
        return lambda: self._listeners.remove(callback)

    def navigate(self, path: str) -> None:
        """Move the application to the given path."""
        logger.info(f"Navigating from {self.current_path} to {path}")
        self.current_path = path
        for listener in list(self._listeners):
            listener(path)

    @property
    def at_login(self) -> bool:
        return self.current_path == LOGIN_PATH
