"""Normalization of wire records into the public models.

Every function here is pure: it takes a wire record and returns a public
record, or raises MalformedResponse when a field cannot be coerced.
"""

from whenever import Instant

from .errors import MalformedResponse
from .models import (
    EpisodeTorrent,
    Show,
    ShowEpisode,
    ShowImages,
    ShowRating,
    ShowTorrent,
    Status,
    TorrentPage,
)
from .wire import (
    WireShow,
    WireShowEpisode,
    WireStatus,
    WireTorrent,
    WireTorrentPage,
)

IMDB_PREFIX = "tt"


def parse_int(value: str | int | None, field: str) -> int:
    """Parse an integer the torrent service may send as a string.

    Missing and empty values count as 0.
    """
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    value = value.strip()
    if not value:
        return 0
    try:
        return int(value)
    except ValueError as e:
        raise MalformedResponse(f"{field}: {value!r} is not an integer") from e


def parse_size(value: str | int | None) -> int:
    size = parse_int(value, "size_bytes")
    if size < 0:
        raise MalformedResponse(f"size_bytes: {size} is negative")
    return size


def normalize_imdb_id(value: str | int | None) -> str:
    """Add the "tt" prefix the torrent service strips from IMDb ids."""
    if value is None:
        return ""
    value = str(value).strip()
    if not value or value.startswith(IMDB_PREFIX):
        return value
    return IMDB_PREFIX + value


def strip_imdb_prefix(imdb_id: str) -> str:
    """Return the bare numeric id the torrent service expects in queries."""
    return imdb_id.removeprefix(IMDB_PREFIX)


def absolute_url(value: str | None) -> str:
    """Turn a scheme-relative URL ("//host/path") into an https one."""
    if not value:
        return ""
    if value.startswith("//"):
        return "https:" + value
    return value


def release_instant(value: int | None) -> Instant:
    try:
        return Instant.from_timestamp(value or 0)
    except (ValueError, OverflowError) as e:
        raise MalformedResponse(f"date_released_unix: {value!r} is out of range") from e


def status_from_wire(wire: WireStatus) -> Status:
    return Status(
        status=wire.status or "",
        uptime=wire.uptime or 0,
        server=wire.server or "",
        updated=wire.updated or 0,
        total_shows=wire.total_shows or 0,
        version=wire.version or "",
    )


def episode_from_wire(wire: WireShowEpisode) -> ShowEpisode:
    torrents = {}
    for quality, torrent in (wire.torrents or {}).items():
        if torrent is None:
            continue
        torrents[quality] = ShowTorrent(
            peers=torrent.peers or 0,
            seeds=torrent.seeds or 0,
            url=torrent.url or "",
        )

    return ShowEpisode(
        season=wire.season or 0,
        episode=wire.episode or 0,
        title=wire.title or "",
        overview=wire.overview or "",
        first_aired=wire.first_aired or 0,
        tvdb_id=wire.tvdb_id or 0,
        torrents=torrents,
    )


def show_from_wire(wire: WireShow) -> Show:
    rating = wire.rating
    images = wire.images

    return Show(
        id=wire.id or "",
        imdb_id=wire.imdb_id or "",
        tvdb_id=str(wire.tvdb_id or ""),
        slug=wire.slug or "",
        title=wire.title or "",
        synopsis=wire.synopsis or "",
        network=wire.network or "",
        country=wire.country or "",
        runtime=str(wire.runtime or ""),
        year=str(wire.year or ""),
        status=wire.status or "",
        air_day=wire.air_day or "",
        air_time=wire.air_time or "",
        num_seasons=wire.num_seasons or 0,
        last_updated=wire.last_updated or 0,
        genres=wire.genres or [],
        rating=ShowRating(
            percentage=rating.percentage or 0.0,
            votes=rating.votes or 0,
            loved=rating.loved or 0,
            hated=rating.hated or 0,
        )
        if rating
        else ShowRating(),
        images=ShowImages(
            poster=images.poster or "",
            fanart=images.fanart or "",
            banner=images.banner or "",
        )
        if images
        else ShowImages(),
        episodes=[episode_from_wire(e) for e in wire.episodes or [] if e is not None],
    )


def torrent_from_wire(wire: WireTorrent) -> EpisodeTorrent:
    """Build an EpisodeTorrent, fixing up every quirky field on the way."""
    return EpisodeTorrent(
        id=wire.id or 0,
        hash=wire.hash or "",
        filename=wire.filename or "",
        episode_url=absolute_url(wire.episode_url),
        torrent_url=absolute_url(wire.torrent_url),
        magnet_url=wire.magnet_url or "",
        title=wire.title or "",
        imdb_id=normalize_imdb_id(wire.imdb_id),
        season=parse_int(wire.season, "season"),
        episode=parse_int(wire.episode, "episode"),
        small_screenshot=absolute_url(wire.small_screenshot),
        large_screenshot=absolute_url(wire.large_screenshot),
        seeds=wire.seeds or 0,
        peers=wire.peers or 0,
        date_released=release_instant(wire.date_released_unix),
        size_bytes=parse_size(wire.size_bytes),
    )


def page_from_wire(wire: WireTorrentPage) -> TorrentPage:
    return TorrentPage(
        torrents_count=wire.torrents_count or 0,
        limit=wire.limit or 0,
        page=wire.page or 0,
        imdb_id=normalize_imdb_id(wire.imdb_id),
        torrents=[torrent_from_wire(t) for t in wire.torrents or []],
    )
