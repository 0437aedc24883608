"""Raw wire records for both upstream services.

These mirror the JSON exactly as the servers send it, quirks included:
numbers may arrive as strings, any field may be missing or null. They are
only an intermediate step, see ``normalize`` for the public records.
"""

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from .errors import EmptyResponse, MalformedResponse

# "{}" is the smallest valid JSON document the show service can send
MIN_BODY_SIZE = 2


class WireModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class WireStatus(WireModel):
    status: str | None = None
    uptime: int | None = None
    server: str | None = None
    updated: int | None = None
    total_shows: int | None = Field(default=None, alias="totalShows")
    version: str | None = None


class WireShowTorrent(WireModel):
    peers: int | None = None
    seeds: int | None = None
    url: str | None = None


class WireShowEpisode(WireModel):
    season: int | None = None
    episode: int | None = None
    title: str | None = None
    overview: str | None = None
    first_aired: int | None = None
    tvdb_id: int | None = None
    torrents: dict[str, WireShowTorrent | None] | None = None


class WireShowRating(WireModel):
    percentage: float | None = None
    votes: int | None = None
    loved: int | None = None
    hated: int | None = None


class WireShowImages(WireModel):
    poster: str | None = None
    fanart: str | None = None
    banner: str | None = None


class WireShow(WireModel):
    id: str | None = Field(default=None, alias="_id")
    imdb_id: str | None = None
    tvdb_id: str | int | None = None
    slug: str | None = None
    title: str | None = None
    synopsis: str | None = None
    network: str | None = None
    country: str | None = None
    runtime: str | int | None = None
    year: str | int | None = None
    status: str | None = None
    air_day: str | None = None
    air_time: str | None = None
    num_seasons: int | None = None
    last_updated: int | None = None
    genres: list[str] | None = None
    rating: WireShowRating | None = None
    images: WireShowImages | None = None
    episodes: list[WireShowEpisode | None] | None = None


class WireTorrent(WireModel):
    id: int | None = None
    hash: str | None = None
    filename: str | None = None
    episode_url: str | None = None
    torrent_url: str | None = None
    magnet_url: str | None = None
    title: str | None = None
    imdb_id: str | int | None = None
    season: str | int | None = None
    episode: str | int | None = None
    small_screenshot: str | None = None
    large_screenshot: str | None = None
    seeds: int | None = None
    peers: int | None = None
    date_released_unix: int | None = None
    size_bytes: str | int | None = None


class WireTorrentPage(WireModel):
    torrents_count: int | None = None
    limit: int | None = None
    page: int | None = None
    imdb_id: str | int | None = None
    torrents: list[WireTorrent] | None = None


_status_adapter = TypeAdapter(WireStatus)
_show_adapter = TypeAdapter(WireShow)
_show_list_adapter = TypeAdapter(list[WireShow])
_torrent_page_adapter = TypeAdapter(WireTorrentPage)


def _check_body(body: bytes) -> None:
    if len(body) < MIN_BODY_SIZE:
        raise EmptyResponse(f"response body is {len(body)} bytes long")


def _validate(adapter: TypeAdapter, body: bytes):
    try:
        return adapter.validate_json(body)
    except ValidationError as e:
        raise MalformedResponse(str(e)) from e


def decode_status(body: bytes) -> WireStatus:
    _check_body(body)
    return _validate(_status_adapter, body)


def decode_show(body: bytes) -> WireShow:
    """Decode a single show object from the show service."""
    _check_body(body)
    return _validate(_show_adapter, body)


def decode_shows(body: bytes) -> list[WireShow]:
    """Decode a JSON array of shows from the show service."""
    _check_body(body)
    return _validate(_show_list_adapter, body)


def decode_torrent_page(body: bytes) -> WireTorrentPage:
    """Decode one page of the torrent index.

    The torrent service has no empty-body quirk, so a short body is just a
    malformed one.
    """
    return _validate(_torrent_page_adapter, body)
