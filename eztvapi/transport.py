import logging
from collections.abc import Mapping
from urllib.parse import quote

import httpx

from .config import Settings
from .errors import InvalidEndpoint, TransportError, UnexpectedStatus

logger = logging.getLogger(__name__)


def create_client(settings: Settings) -> httpx.Client:
    """Create an HTTP client configured from settings."""
    return httpx.Client(
        timeout=settings.timeout_seconds,
        headers={"User-Agent": settings.user_agent},
        follow_redirects=True,
    )


def path_segment(value: str | int) -> str:
    """Percent-encode a value used as a single path segment."""
    return quote(str(value), safe="")


def build_url(
    base_url: str,
    path: str,
    params: Mapping[str, str | int | None] | None = None,
) -> str:
    """Join base_url and path and append the query string.

    Query parameters are sorted by name and None values are dropped.
    """
    try:
        base = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        raise InvalidEndpoint(f"invalid endpoint {base_url!r}: {e}") from e
    if base.scheme not in ("http", "https") or not base.host:
        raise InvalidEndpoint(f"invalid endpoint {base_url!r}")

    url = base_url.rstrip("/") + "/" + path.lstrip("/")
    query = sorted(
        (name, str(value)) for name, value in (params or {}).items() if value is not None
    )
    try:
        return str(httpx.URL(url, params=query))
    except httpx.InvalidURL as e:
        raise InvalidEndpoint(f"invalid URL {url!r}: {e}") from e


def fetch(
    client: httpx.Client, url: str, expected_status: int | None = None
) -> tuple[bytes, int]:
    """GET url and return the body and status code.

    Any non-2xx answer raises UnexpectedStatus, as does any other status than
    expected_status when it is given.
    """
    logger.debug(f"GET {url}")
    try:
        response = client.get(url)
    except httpx.HTTPError as e:
        raise TransportError(f"request to {url} failed: {e}") from e

    if not response.is_success or (
        expected_status is not None and response.status_code != expected_status
    ):
        raise UnexpectedStatus(response.status_code, url)
    return response.content, response.status_code
