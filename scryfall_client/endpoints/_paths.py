from urllib.parse import quote

import httpx


def segment(value: object) -> str:
    """Percent-encode a single path segment."""
    return quote(str(value), safe="")


def with_query(path: str, params: dict[str, str | int | bool | None]) -> str:
    """Append a query string to a path, skipping None values."""
    filtered = {
        key: str(value).lower() if isinstance(value, bool) else value
        for key, value in params.items()
        if value is not None
    }
    if not filtered:
        return path
    return f"{path}?{httpx.QueryParams(filtered)}"
