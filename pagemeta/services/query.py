"""Pagination params from untrusted query-string input."""

import math
from typing import Any, Mapping
from urllib.parse import parse_qs

from pagemeta.core.config import get_settings
from pagemeta.core.pagination import clamp_limit
from pagemeta.models.pagination import PageParams

# float() spellings that are not numbers in a query string
_NON_FINITE = ("inf", "infinity", "nan")


def _first(value: Any) -> Any:
    # parse_qs-style dicts hold a list per key
    if isinstance(value, (list, tuple)):
        return value[0] if value else None
    return value


def _to_number(raw: Any, default: int) -> float:
    """
    Numeric value of raw, or default when absent, non-numeric, NaN or zero.
    +/-Infinity is kept so callers can clamp it; other spellings (inf, nan, 1_0) are non-numeric.
    """
    raw = _first(raw)
    if raw is None:
        return default
    text = str(raw).strip()
    unsigned = text.lstrip("+-")
    if "_" in text or (unsigned.lower() in _NON_FINITE and unsigned != "Infinity"):
        return default
    try:
        value = float(text)
    except (TypeError, ValueError):
        return default
    if math.isnan(value) or value == 0:
        return default
    return value


def parse_query_params(query: Mapping[str, Any]) -> PageParams:
    """
    Read page and limit from raw query values; never fails.
    A literal "0" is treated the same as a missing value.
    """
    s = get_settings()
    page = max(_to_number(query.get("page"), s.default_page), 1)
    if math.isinf(page):
        page = s.default_page
    limit = clamp_limit(_to_number(query.get("limit"), s.default_limit), s.max_limit)
    return PageParams(page=int(page), limit=int(limit))


def parse_query_string(query: str) -> PageParams:
    """parse_query_params over a raw query string such as "page=2&limit=20"."""
    return parse_query_params(parse_qs(query.lstrip("?")))
