"""
Data models for the Catalog Admin client.

This module defines Pydantic models for the backend's result envelope,
paged results and the entity DTOs. Fields are snake_case in Python and
camelCase on the wire.
"""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class WireModel(BaseModel):
    """Base model mapping snake_case attributes to camelCase JSON."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        coerce_numbers_to_str=True,
    )

    def to_payload(self) -> dict:
        """Serialize for a request body."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ApiResult(WireModel, Generic[T]):
    """
    Standard result envelope returned by every backend call.
    """
    success: bool = Field(..., description="Whether the operation was successful")
    data: Optional[T] = Field(None, description="Response data")
    message: Optional[str] = Field(None, description="Human-readable message")

    @classmethod
    def ok(cls, data: T, message: Optional[str] = None) -> "ApiResult[T]":
        return cls(success=True, data=data, message=message)

    @classmethod
    def fail(cls, message: str) -> "ApiResult[T]":
        return cls(success=False, data=None, message=message)


class PagedResult(WireModel, Generic[T]):
    """
    One page of a collection.
    """
    items: List[T] = Field(default_factory=list)
    total_items: int = 0
    page: int = 1
    total_pages: int = 1
    page_size: int = 0

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


# Authentication

class LoginDto(WireModel):
    user_name: str
    password: str


class LoginUserResponseDto(WireModel):
    access_token: Optional[str] = None
    message: Optional[str] = None


# Users

class UserDto(WireModel):
    id: str
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()


class CreateUserDto(WireModel):
    first_name: str
    last_name: str
    email: str
    phone: str
    password: str


class UpdateUserDto(WireModel):
    """Update body; password is omitted from the payload when unset."""
    id: str
    first_name: str
    last_name: str
    email: str
    phone: str
    password: Optional[str] = None


# Product categories

class ProductCategoryDto(WireModel):
    id: str
    name: str = ""
    description: str = ""

    @property
    def display_name(self) -> str:
        return self.name


class CreateProductCategoryDto(WireModel):
    name: str
    description: str


class UpdateProductCategoryDto(WireModel):
    id: str
    name: str
    description: str


# Products

class ProductDto(WireModel):
    id: str
    name: str = ""
    description: str = ""
    category_id: str = ""
    category_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.name


class CreateProductDto(WireModel):
    name: str
    description: str
    category_id: str


class UpdateProductDto(WireModel):
    id: str
    name: str
    description: str
    category_id: str
