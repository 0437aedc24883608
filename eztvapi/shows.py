import logging

import httpx

from .config import Settings
from .errors import InvalidArgument, MissingArgument, ShowNotFound
from .filters import filter_season, find_episode
from .models import Show, ShowEpisode, Status
from .normalize import show_from_wire, status_from_wire
from .transport import build_url, create_client, fetch, path_segment
from .wire import decode_show, decode_shows, decode_status

logger = logging.getLogger(__name__)


class ShowClient:
    """Client for the show metadata API."""

    def __init__(
        self,
        client: httpx.Client | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or Settings()
        self._owns_client = client is None
        self.client = client or create_client(self.settings)
        self.base_url = self.settings.show_api_url

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            self.client.close()

    def _get(self, path: str, params: dict | None = None) -> bytes:
        body, _ = fetch(self.client, build_url(self.base_url, path, params))
        return body

    def ping(self) -> Status:
        """Check that the API is alive and return its status."""
        return status_from_wire(decode_status(self._get("/")))

    def get_show_details(self, imdb_id: str) -> Show:
        """Get a show and all its episodes from an IMDb id."""
        if not imdb_id:
            raise MissingArgument("imdb_id is required")

        wire = decode_show(self._get(f"/show/{path_segment(imdb_id)}"))
        # The API answers {} for unknown ids
        if not wire.title:
            raise ShowNotFound(f"show {imdb_id} not found")
        return show_from_wire(wire)

    def get_episode(self, imdb_id: str, season: int, episode: int) -> ShowEpisode:
        show = self.get_show_details(imdb_id)
        return find_episode(show.episodes, season, episode)

    def get_season(self, imdb_id: str, season: int) -> list[ShowEpisode]:
        """Get every episode of a season, in the order the API lists them."""
        show = self.get_show_details(imdb_id)
        return filter_season(show.episodes, season)

    def list_shows(self, page: int) -> list[Show]:
        """List one page of shows."""
        return self._get_shows(page)

    def search_show(self, keyword: str) -> list[Show]:
        """Search shows by keyword, returning the first page of matches."""
        if not keyword:
            raise MissingArgument("keyword is required")
        return self._get_shows(1, keyword)

    def _get_shows(self, page: int, keyword: str | None = None) -> list[Show]:
        if page <= 0:
            raise InvalidArgument(f"page must be positive, got {page}")

        body = self._get(f"/shows/{path_segment(page)}", {"keywords": keyword})
        shows = [show_from_wire(wire) for wire in decode_shows(body)]
        logger.debug(f"Fetched {len(shows)} shows from page {page}")
        return shows
