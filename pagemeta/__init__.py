from pagemeta.core.pagination import ELLIPSIS, calculate, calculate_request, page_numbers, paginate
from pagemeta.models.pagination import (
    ItemRange,
    MetaLink,
    Page,
    PageParams,
    PaginationRequest,
    PaginationResult,
)
from pagemeta.services.query import parse_query_params, parse_query_string
from pagemeta.services.seo import meta_links

__all__ = [
    "ELLIPSIS",
    "ItemRange",
    "MetaLink",
    "Page",
    "PageParams",
    "PaginationRequest",
    "PaginationResult",
    "calculate",
    "calculate_request",
    "meta_links",
    "page_numbers",
    "paginate",
    "parse_query_params",
    "parse_query_string",
]
