from pathlib import Path

import httpx
import pytest

from eztvapi.config import Settings
from eztvapi.shows import ShowClient
from eztvapi.torrents import TorrentClient

FIXTURES = Path(__file__).parent / "fixtures"


class FakeServer:
    """Answers requests from a list of responses and records what was asked."""

    def __init__(self, responses: list[httpx.Response]):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]

    @property
    def request_uris(self) -> list[str]:
        return [request.url.raw_path.decode() for request in self.requests]


def make_torrent(torrent_id: int, season: int = 1, episode: int = 1) -> dict:
    """Build a raw torrent entry the way the torrent index sends it."""
    return {
        "id": torrent_id,
        "hash": f"{torrent_id:040x}",
        "filename": f"Show.S{season:02d}E{episode:02d}.720p.mkv",
        "episode_url": f"https://eztv.io/ep/{torrent_id}/",
        "torrent_url": f"//zoink.ch/torrent/{torrent_id}.torrent",
        "magnet_url": f"magnet:?xt=urn:btih:{torrent_id:040x}",
        "title": f"Show S{season:02d}E{episode:02d} 720p",
        "imdb_id": "0383795",
        "season": str(season),
        "episode": str(episode),
        "small_screenshot": f"//ezimg.ch/thumbs/{torrent_id}-small.jpg",
        "large_screenshot": f"//ezimg.ch/thumbs/{torrent_id}-large.jpg",
        "seeds": 10,
        "peers": 2,
        "date_released_unix": 1588784249,
        "size_bytes": "1024",
    }


def make_page(torrents: list[dict], imdb_id: str = "0383795", count: int = 1000) -> dict:
    return {
        "torrents_count": count,
        "limit": 100,
        "page": 1,
        "imdb_id": imdb_id,
        "torrents": torrents,
    }


@pytest.fixture
def fixture_bytes():
    """Load a response body from tests/fixtures."""

    def load(name: str) -> bytes:
        return (FIXTURES / name).read_bytes()

    return load


@pytest.fixture
def settings():
    return Settings(
        show_api_url="http://shows.test",
        torrent_api_url="http://torrents.test",
    )


@pytest.fixture
def fake_server():
    """Create a FakeServer and an httpx client wired to it."""
    clients = []

    def create(*responses: httpx.Response) -> tuple[FakeServer, httpx.Client]:
        server = FakeServer(responses)
        client = httpx.Client(transport=httpx.MockTransport(server))
        clients.append(client)
        return server, client

    yield create

    for client in clients:
        client.close()


@pytest.fixture
def show_client(settings):
    """ShowClient factory serving the given responses."""

    def create(*responses: httpx.Response) -> tuple[FakeServer, ShowClient]:
        server = FakeServer(responses)
        client = httpx.Client(transport=httpx.MockTransport(server))
        return server, ShowClient(client, settings)

    return create


@pytest.fixture
def torrent_client(settings):
    """TorrentClient factory serving the given responses."""

    def create(*responses: httpx.Response) -> tuple[FakeServer, TorrentClient]:
        server = FakeServer(responses)
        client = httpx.Client(transport=httpx.MockTransport(server))
        return server, TorrentClient(client, settings)

    return create
