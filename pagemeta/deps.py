"""Shared FastAPI dependencies."""

from fastapi import Request

from pagemeta.models.pagination import PageParams
from pagemeta.services.query import parse_query_params


async def get_page_params(request: Request) -> PageParams:
    """Dependency: page/limit from the query string, clamped instead of rejected."""
    return parse_query_params(request.query_params)
