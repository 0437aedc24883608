import logging

import httpx

from .config import Settings
from .errors import EpisodeNotFound, InvalidArgument, MissingArgument, ShowNotFound
from .filters import filter_episode, filter_season
from .models import EpisodeTorrent, TorrentPage
from .normalize import page_from_wire, strip_imdb_prefix
from .transport import build_url, create_client, fetch
from .wire import decode_torrent_page

logger = logging.getLogger(__name__)

TORRENTS_PATH = "/api/get-torrents"


class TorrentClient:
    """Client for the torrent index API."""

    def __init__(
        self,
        client: httpx.Client | None = None,
        settings: Settings | None = None,
    ):
        self.settings = settings or Settings()
        self._owns_client = client is None
        self.client = client or create_client(self.settings)
        self.base_url = self.settings.torrent_api_url
        self.page_size = self.settings.page_size
        self.max_pages = self.settings.max_pages

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            self.client.close()

    def fetch_page(
        self, page: int, limit: int, imdb_id: str | None = None
    ) -> TorrentPage:
        """Fetch a single page of torrents, optionally for one show.

        imdb_id may be given with or without its "tt" prefix.
        """
        if page <= 0:
            raise InvalidArgument(f"page must be positive, got {page}")
        if limit <= 0:
            raise InvalidArgument(f"limit must be positive, got {limit}")

        params = {
            "imdb_id": strip_imdb_prefix(imdb_id) if imdb_id else None,
            "limit": limit,
            "page": page,
        }
        url = build_url(self.base_url, TORRENTS_PATH, params)
        body, _ = fetch(self.client, url, expected_status=200)
        return page_from_wire(decode_torrent_page(body))

    def get_show_torrents(self, imdb_id: str) -> list[EpisodeTorrent]:
        """Get every torrent of a show, following pagination."""
        if not imdb_id:
            raise MissingArgument("imdb_id is required")

        torrents: list[EpisodeTorrent] = []
        for page in range(1, self.max_pages + 1):
            result = self.fetch_page(page, self.page_size, imdb_id)

            # Unknown ids get a 200 with no results instead of a 404
            if page == 1 and (not result.imdb_id or result.torrents_count == 0):
                raise ShowNotFound(f"show {imdb_id} not found")

            torrents.extend(result.torrents)
            logger.info(
                f"Fetched {len(result.torrents)} torrents for {imdb_id}, page {page}"
            )

            if len(result.torrents) < self.page_size:
                break
        else:
            logger.info(f"Stopped after {self.max_pages} pages for {imdb_id}")

        return torrents

    def get_episode_torrents(
        self, imdb_id: str, season: int, episode: int
    ) -> list[EpisodeTorrent]:
        """Get every torrent of one episode of a show."""
        torrents = filter_episode(self.get_show_torrents(imdb_id), season, episode)
        if not torrents:
            raise EpisodeNotFound(
                f"no torrents for {imdb_id} S{season:02d}E{episode:02d}"
            )
        return torrents

    def get_season_torrents(self, imdb_id: str, season: int) -> list[EpisodeTorrent]:
        return filter_season(self.get_show_torrents(imdb_id), season)

    def get_torrents(self, limit: int, page: int) -> list[EpisodeTorrent]:
        """Get one page of the latest torrents across all shows."""
        return self.fetch_page(page, limit).torrents
