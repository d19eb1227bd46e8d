from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class PaginationRequest(BaseModel):
    page: int | None = None  # None means default page
    limit: int | None = None  # None means default limit
    total_items: int = 0


class ItemRange(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: int  # 1-based, 0 when there are no items
    end: int


class PaginationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_page: int = Field(ge=1)
    total_pages: int = Field(ge=0)
    page_size: int = Field(ge=1)
    total_items: int = Field(ge=0)
    has_next_page: bool
    has_previous_page: bool
    next_page: int | None = None
    previous_page: int | None = None
    offset: int = Field(ge=0)
    item_range: ItemRange


class PageParams(BaseModel):
    model_config = ConfigDict(frozen=True)

    page: int
    limit: int


class MetaLink(BaseModel):
    model_config = ConfigDict(frozen=True)

    relation: str  # prev, next
    url: str


class Page(BaseModel, Generic[T]):
    items: list[T]
    pagination: PaginationResult
