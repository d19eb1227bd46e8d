"""rel=prev/next links for paginated pages."""

from pagemeta.models.pagination import MetaLink, PaginationResult


def meta_links(base_url: str, result: PaginationResult) -> list[MetaLink]:
    """prev link first, then next. base_url is used as given (no escaping or query merging)."""
    links: list[MetaLink] = []
    if result.has_previous_page:
        links.append(MetaLink(relation="prev", url=f"{base_url}?page={result.previous_page}"))
    if result.has_next_page:
        links.append(MetaLink(relation="next", url=f"{base_url}?page={result.next_page}"))
    return links
