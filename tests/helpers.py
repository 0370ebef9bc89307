"""Shared helpers for the test suite."""

import json
from typing import Any, List

import requests

from catalog_admin.data.models import ApiResult, PagedResult, ProductCategoryDto, UserDto

BASE_URL = "http://backend.test/api"


def make_response(status_code: int, json_body: Any = None, text: str = None) -> requests.Response:
    """Build a real requests.Response with the given status and body."""
    response = requests.Response()
    response.status_code = status_code
    if json_body is not None:
        response._content = json.dumps(json_body).encode("utf-8")
        response.headers["Content-Type"] = "application/json"
    else:
        response._content = (text or "").encode("utf-8")
        response.headers["Content-Type"] = "text/html"
    response.encoding = "utf-8"
    return response


def envelope(data: Any = None, success: bool = True, message: str = None) -> dict:
    return {"success": success, "data": data, "message": message}


def user_json(index: int) -> dict:
    return {
        "id": f"u{index}",
        "firstName": f"First{index}",
        "lastName": f"Last{index}",
        "email": f"user{index}@example.com",
        "phone": "+1 555 0100",
    }


def make_user(index: int) -> UserDto:
    return UserDto.model_validate(user_json(index))


def make_category(index: int) -> ProductCategoryDto:
    return ProductCategoryDto(id=f"c{index}", name=f"Category {index}", description="Things")


def paged(items: List[Any], total_items: int, page: int, page_size: int = 5, model=UserDto) -> ApiResult:
    total_pages = max(1, -(-total_items // page_size))
    return ApiResult[PagedResult[model]].ok(PagedResult[model](
        items=items,
        total_items=total_items,
        page=page,
        total_pages=total_pages,
        page_size=page_size,
    ))
