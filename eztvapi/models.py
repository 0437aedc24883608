"""Pydantic models for the records returned by the eztv API clients."""

from pydantic import BaseModel, ConfigDict, field_serializer
from whenever import Instant


class Status(BaseModel):
    """Health snapshot of the show service."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    status: str = ""
    uptime: int = 0
    server: str = ""
    updated: int = 0
    total_shows: int = 0
    version: str = ""


class ShowTorrent(BaseModel):
    """Torrent attached to a show episode for one quality."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    peers: int = 0
    seeds: int = 0
    url: str = ""


class ShowRating(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    percentage: float = 0.0
    votes: int = 0
    loved: int = 0
    hated: int = 0


class ShowImages(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    poster: str = ""
    fanart: str = ""
    banner: str = ""


class ShowEpisode(BaseModel):
    """A single episode of a show."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    season: int
    episode: int
    title: str = ""
    overview: str = ""
    first_aired: int = 0
    tvdb_id: int = 0
    torrents: dict[str, ShowTorrent] = {}  # keyed by quality, e.g. "480p"


class Show(BaseModel):
    """A show with its metadata and episodes."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = ""
    imdb_id: str = ""
    tvdb_id: str = ""
    slug: str = ""
    title: str
    synopsis: str = ""
    network: str = ""
    country: str = ""
    runtime: str = ""
    year: str = ""
    status: str = ""
    air_day: str = ""
    air_time: str = ""
    num_seasons: int = 0
    last_updated: int = 0
    genres: list[str] = []
    rating: ShowRating = ShowRating()
    images: ShowImages = ShowImages()
    episodes: list[ShowEpisode] = []


class EpisodeTorrent(BaseModel):
    """Torrent entry from the torrent index, with all fields normalized."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: int
    hash: str
    filename: str
    episode_url: str
    torrent_url: str
    magnet_url: str
    title: str
    imdb_id: str
    season: int
    episode: int
    small_screenshot: str
    large_screenshot: str
    seeds: int
    peers: int
    date_released: Instant
    size_bytes: int

    @field_serializer("date_released")
    def serialize_date_released(self, value: Instant) -> str:
        return value.format_iso()


class TorrentPage(BaseModel):
    """One page of results from the torrent index."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    torrents_count: int
    limit: int
    page: int
    imdb_id: str
    torrents: list[EpisodeTorrent]
