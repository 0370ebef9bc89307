"""
Generic REST service for one backend resource.

Each operation is a single round trip through the API client and comes back
as an ApiResult. Business and transport failures become success=False
results; authorization failures propagate as SessionExpiredError.
"""

from typing import Any, ClassVar, Generic, List, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from catalog_admin.data.models import ApiResult, PagedResult
from catalog_admin.errors import ErrorHandler, ResponseParseError

DtoT = TypeVar("DtoT", bound=BaseModel)


class EntityService(Generic[DtoT]):
    """
    REST wrapper for a single resource type.

    Subclasses set `resource` (the path segment) and `dto_model`.
    """

    resource: ClassVar[str] = ""
    dto_model: ClassVar[Type[BaseModel]]

    def __init__(self, api_client, error_handler: Optional[ErrorHandler] = None):
        """
        Initialize the service.

        Args:
            api_client: APIClient through which every request is sent
            error_handler (ErrorHandler, optional): Maps exceptions to messages
        """
        self.api_client = api_client
        self.error_handler = error_handler or ErrorHandler()

    async def list(self) -> ApiResult[List[DtoT]]:
        return await self._call(List[self.dto_model], "GET", self.resource)

    async def get_by_id(self, item_id: str) -> ApiResult[DtoT]:
        return await self._call(self.dto_model, "GET", f"{self.resource}/{item_id}")

    async def create(self, dto: BaseModel) -> ApiResult[DtoT]:
        return await self._call(self.dto_model, "POST", self.resource, json=dto.to_payload())

    async def update(self, item_id: str, dto: BaseModel) -> ApiResult[DtoT]:
        return await self._call(
            self.dto_model, "PUT", f"{self.resource}/{item_id}", json=dto.to_payload())

    async def delete(self, item_id: str) -> ApiResult[Any]:
        return await self._call(Any, "DELETE", f"{self.resource}/{item_id}")

    async def list_paged(self, page: int, page_size: int) -> ApiResult[PagedResult[DtoT]]:
        return await self._call(
            PagedResult[self.dto_model],
            "GET",
            f"{self.resource}/paged",
            params={"page": page, "pageSize": page_size}
        )

    async def _call(self, data_type, method: str, endpoint: str, **kwargs) -> ApiResult:
        """
        Send one request and interpret the body as a result envelope.

        Raises:
            SessionExpiredError: Propagated from the API client
            ResponseParseError: A 2xx response did not carry a valid envelope
        """
        result_type = ApiResult[data_type]
        context = f"{method} {endpoint}"

        try:
            response = await self.api_client.request(method, endpoint, **kwargs)
        except requests.RequestException as e:
            return result_type.fail(self.error_handler.handle_network_error(e, context))

        return self._parse(result_type, response, context)

    def _parse(self, result_type, response: requests.Response, context: str) -> ApiResult:
        success_status = 200 <= response.status_code < 300

        try:
            body = response.json()
        except ValueError as e:
            if success_status:
                raise ResponseParseError(
                    f"Response to {context} is not JSON", response.status_code) from e
            return result_type.fail(
                self.error_handler.handle_http_error(response.status_code, context=context))

        try:
            return result_type.model_validate(body)
        except ValidationError as e:
            if success_status:
                raise ResponseParseError(
                    f"Response to {context} is not a valid result envelope: {e}",
                    response.status_code) from e
            return result_type.fail(
                self.error_handler.handle_http_error(response.status_code, body, context=context))
