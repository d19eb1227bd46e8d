from pagemeta.models.pagination import (
    ItemRange,
    MetaLink,
    Page,
    PageParams,
    PaginationRequest,
    PaginationResult,
)

__all__ = [
    "ItemRange",
    "MetaLink",
    "Page",
    "PageParams",
    "PaginationRequest",
    "PaginationResult",
]
