# catalog_admin/controllers/resource_controller.py
"""
Generic paginated CRUD page controller.

One controller drives the list, pagination, create/edit form, delete
confirmation and notifications of a resource page. Entity pages subclass it
and only describe their form: default values, row-to-form mapping,
validation, DTO construction and message keys.

After any successful mutation the current page is fetched again; rows are
never patched locally. Each fetch carries a generation number and a
response belonging to a superseded fetch is dropped.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar, Dict, List, Optional

from pydantic import BaseModel

from catalog_admin.controllers.notifications import SUCCESS, Toast
from catalog_admin.data.models import ApiResult
from catalog_admin.errors import ErrorHandler, ResponseParseError, SessionExpiredError

logger = logging.getLogger("catalog_admin.controllers")

CREATE = "create"
EDIT = "edit"


class PageStatus(enum.Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERRORED = "errored"


@dataclass
class FormModal:
    """State of an open create/edit form."""
    mode: str
    values: Dict[str, Any]
    target: Optional[BaseModel] = None
    field_errors: Dict[str, str] = field(default_factory=dict)
    error: Optional[str] = None
    submitting: bool = False


@dataclass
class ConfirmDelete:
    """State of an open delete confirmation."""
    target: BaseModel
    title: str
    message: str
    confirm_label: str
    cancel_label: str
    error: Optional[str] = None


class ResourcePageController:
    """
    Paginated list with create, edit and delete for one resource.

    Subclasses must define `message_keys` with the keys: created, updated,
    deleted, fetch_error, create_error, update_error, delete_error,
    delete_title and delete_message.
    """

    message_keys: ClassVar[Dict[str, str]] = {}

    def __init__(self, service, translator, page_size: int = 5,
                 toast_duration_ms: int = 3000, error_handler: ErrorHandler = None):
        """
        Initialize the page controller.

        Args:
            service: EntityService for the resource
            translator: Translator for user-facing messages
            page_size (int): Rows per page
            toast_duration_ms (int): How long notifications stay visible
            error_handler (ErrorHandler, optional): Maps exceptions to messages
        """
        self.service = service
        self.translator = translator
        self.page_size = page_size
        self.error_handler = error_handler or ErrorHandler(translator)

        self.status = PageStatus.IDLE
        self.items: List[BaseModel] = []
        self.page = 1
        self.total_pages = 1
        self.total_items = 0
        self.error: Optional[str] = None
        self.modal: Optional[FormModal] = None
        self.confirm_delete: Optional[ConfirmDelete] = None
        self.toast = Toast(toast_duration_ms, on_change=self._notify)

        self._generation = 0
        self._listeners: List[Callable[["ResourcePageController"], None]] = []

    # Hooks for entity pages

    def empty_form(self) -> Dict[str, Any]:
        raise NotImplementedError

    def form_from_row(self, row: BaseModel) -> Dict[str, Any]:
        raise NotImplementedError

    def validate(self, values: Dict[str, Any], creating: bool) -> Dict[str, str]:
        """Return field -> translation key for every invalid field."""
        raise NotImplementedError

    def build_create_dto(self, values: Dict[str, Any]) -> BaseModel:
        raise NotImplementedError

    def build_update_dto(self, item_id: str, values: Dict[str, Any]) -> BaseModel:
        raise NotImplementedError

    def display_name(self, row: BaseModel) -> str:
        return getattr(row, "display_name", str(row.id))

    # Observers

    def subscribe(self, callback: Callable[["ResourcePageController"], None]) -> Callable[[], None]:
        """
        Register a state listener, called after every state change.

        Returns:
            Callable: Function that removes the listener
        """
        self._listeners.append(callback)
        return lambda: self._listeners.remove(callback)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _t(self, message: str, **params) -> str:
        return self.translator.t(self.message_keys[message], **params)

    # Listing and pagination

    async def load(self) -> None:
        """Fetch the current page when the page is first shown."""
        await self.refresh()

    async def refresh(self) -> None:
        """Fetch the current page, replacing the displayed rows."""
        self._generation += 1
        generation = self._generation

        self.status = PageStatus.LOADING
        self.error = None
        self._notify()

        try:
            result = await self.service.list_paged(self.page, self.page_size)
        except SessionExpiredError as e:
            if generation == self._generation:
                self._session_expired(e, "list")
            return
        except ResponseParseError as e:
            self.error_handler.handle_data_error(e, context="list")
            result = ApiResult(success=False)

        if generation != self._generation:
            logger.debug(f"Discarding stale response for page {self.page} (generation {generation})")
            return

        if result.success and result.data is not None:
            paged = result.data
            self.items = list(paged.items)
            self.total_pages = max(paged.total_pages, 1)
            self.total_items = paged.total_items
            self.status = PageStatus.LOADED

            if self.page > self.total_pages:
                # The collection shrank below the current page
                logger.info(f"Page {self.page} no longer exists, moving to {self.total_pages}")
                self.page = self.total_pages
                await self.refresh()
                return
        else:
            self.items = []
            self.total_pages = 1
            self.total_items = 0
            self.status = PageStatus.ERRORED
            self.error = result.message or self._t("fetch_error")
            logger.warning(f"Failed to load page {self.page}: {self.error}")

        self._notify()

    @property
    def can_go_previous(self) -> bool:
        return self.page > 1

    @property
    def can_go_next(self) -> bool:
        return self.page < self.total_pages

    async def set_page(self, page: int) -> None:
        """Move to a page, clamped to [1, total_pages]."""
        target = min(max(page, 1), self.total_pages)
        if target == self.page:
            return
        self.page = target
        await self.refresh()

    async def next_page(self) -> None:
        await self.set_page(self.page + 1)

    async def previous_page(self) -> None:
        await self.set_page(self.page - 1)

    # Create and edit

    def open_create(self) -> None:
        self.modal = FormModal(mode=CREATE, values=self.empty_form())
        self._notify()

    def open_edit(self, row: BaseModel) -> None:
        self.modal = FormModal(mode=EDIT, values=self.form_from_row(row), target=row)
        self._notify()

    def close_modal(self) -> None:
        self.modal = None
        self._notify()

    async def submit_form(self, values: Dict[str, Any]) -> bool:
        """
        Validate and submit the open form.

        On failure the form stays open with its values and an inline error.

        Returns:
            bool: True when the server accepted the change
        """
        modal = self.modal
        if modal is None:
            return False

        modal.values = {**modal.values, **values}
        creating = modal.mode == CREATE
        error_keys = self.validate(modal.values, creating)
        modal.field_errors = {name: self.translator.t(key) for name, key in error_keys.items()}
        if modal.field_errors:
            self._notify()
            return False

        modal.error = None
        modal.submitting = True
        self._notify()

        action = "create" if creating else "update"
        try:
            if creating:
                result = await self.service.create(self.build_create_dto(modal.values))
            else:
                item_id = modal.target.id
                result = await self.service.update(item_id, self.build_update_dto(item_id, modal.values))
        except SessionExpiredError as e:
            self._session_expired(e, action)
            return False
        except ResponseParseError as e:
            self.error_handler.handle_data_error(e, data=modal.values, context=action)
            result = ApiResult(success=False)
        finally:
            modal.submitting = False

        if not result.success:
            modal.error = result.message or self._t(f"{action}_error")
            logger.warning(f"Failed to {action} {self.service.resource}: {modal.error}")
            self._notify()
            return False

        if self.modal is modal:
            self.modal = None
        self.toast.show(self._t("created" if creating else "updated"), SUCCESS)
        await self.refresh()
        return True

    # Delete

    def request_delete(self, row: BaseModel) -> None:
        """Ask for confirmation before deleting a row."""
        self.confirm_delete = ConfirmDelete(
            target=row,
            title=self._t("delete_title"),
            message=self._t("delete_message", name=self.display_name(row)),
            confirm_label=self.translator.t("General.delete"),
            cancel_label=self.translator.t("General.cancel"),
        )
        self._notify()

    def cancel_delete(self) -> None:
        self.confirm_delete = None
        self._notify()

    async def confirm_delete_action(self) -> bool:
        """
        Delete the row awaiting confirmation.

        Returns:
            bool: True when the row was deleted
        """
        confirm = self.confirm_delete
        if confirm is None:
            return False

        try:
            result = await self.service.delete(confirm.target.id)
        except SessionExpiredError as e:
            self._session_expired(e, "delete")
            return False
        except ResponseParseError as e:
            self.error_handler.handle_data_error(e, context="delete")
            result = ApiResult(success=False)

        if not result.success:
            confirm.error = result.message or self._t("delete_error")
            logger.warning(f"Failed to delete {self.service.resource} {confirm.target.id}: {confirm.error}")
            self._notify()
            return False

        if self.confirm_delete is confirm:
            self.confirm_delete = None
        self.toast.show(self._t("deleted"), SUCCESS)
        await self.refresh()
        return True

    def _session_expired(self, error: SessionExpiredError, context: str) -> None:
        self.error_handler.handle_auth_error(error, context)
        self._generation += 1
        self.status = PageStatus.IDLE
        self.items = []
        self.error = None
        self.modal = None
        self.confirm_delete = None
        self._notify()
