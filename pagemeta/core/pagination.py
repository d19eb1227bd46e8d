"""Pagination arithmetic and page-selector helpers."""

import math
from typing import Sequence, TypeVar

from pagemeta.core.config import get_settings
from pagemeta.core.logging import get_logger
from pagemeta.models.pagination import ItemRange, Page, PaginationRequest, PaginationResult

T = TypeVar("T")

ELLIPSIS = "..."

log = get_logger(__name__)


def clamp_limit(limit: int, max_limit: int) -> int:
    """Page size bounded to [1, max_limit]."""
    return min(max(limit, 1), max_limit)


def calculate(total_items: int, page: int | None = None, limit: int | None = None) -> PaginationResult:
    """
    Compute pagination metadata for one page.
    Out-of-range input is clamped, never rejected: a page past the end is capped
    to the last page (or page 1 when there are no items).
    """
    s = get_settings()
    requested_page = s.default_page if page is None else page
    requested_limit = s.default_limit if limit is None else limit

    page = max(requested_page, 1)
    limit = clamp_limit(requested_limit, s.max_limit)
    total = max(total_items, 0)
    total_pages = math.ceil(total / limit)

    current_page = min(page, max(total_pages, 1))
    offset = (current_page - 1) * limit
    has_next = current_page < total_pages
    has_previous = current_page > 1

    if current_page != requested_page or limit != requested_limit or total != total_items:
        log.debug(
            "pagination_clamped",
            requested_page=requested_page,
            current_page=current_page,
            requested_limit=requested_limit,
            page_size=limit,
            requested_total_items=total_items,
            total_items=total,
        )

    return PaginationResult(
        current_page=current_page,
        total_pages=total_pages,
        page_size=limit,
        total_items=total,
        has_next_page=has_next,
        has_previous_page=has_previous,
        next_page=current_page + 1 if has_next else None,
        previous_page=current_page - 1 if has_previous else None,
        offset=offset,
        item_range=ItemRange(
            start=0 if total == 0 else offset + 1,
            end=min(offset + limit, total),
        ),
    )


def calculate_request(request: PaginationRequest) -> PaginationResult:
    """calculate() driven by a PaginationRequest."""
    return calculate(request.total_items, page=request.page, limit=request.limit)


def page_numbers(current_page: int, total_pages: int, max_visible: int | None = None) -> list[int | str]:
    """
    Page numbers for a page-selector widget, e.g. [1, "...", 48, 49, 50, 51, 52, "...", 100].
    First and last pages are always present; ELLIPSIS marks skipped runs.
    """
    if max_visible is None:
        max_visible = get_settings().max_visible_pages
    if total_pages <= max_visible:
        return list(range(1, total_pages + 1))

    half = max_visible // 2
    pages: list[int | str] = [1]

    start = max(current_page - half, 2)
    end = min(current_page + half, total_pages - 1)

    # Near the start, then near the end; both may apply in turn
    if start <= 2:
        start = 2
        end = min(max_visible, total_pages - 1)
    if end >= total_pages - 1:
        end = total_pages - 1
        start = max(2, total_pages - max_visible + 1)

    if start > 2:
        pages.append(ELLIPSIS)
    pages.extend(range(start, end + 1))
    if end < total_pages - 1:
        pages.append(ELLIPSIS)
    if total_pages > 1:
        pages.append(total_pages)
    return pages


def paginate(items: Sequence[T], page: int | None = None, limit: int | None = None) -> Page[T]:
    """Slice items to the requested page; return the slice with its metadata."""
    result = calculate(len(items), page=page, limit=limit)
    window = list(items[result.offset:result.offset + result.page_size])
    return Page(items=window, pagination=result)
