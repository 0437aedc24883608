"""Season and episode filters over shows and torrent lists."""

from collections.abc import Iterable
from typing import Protocol, TypeVar

from .errors import EpisodeNotFound


class HasEpisode(Protocol):
    season: int
    episode: int


T = TypeVar("T", bound=HasEpisode)


def find_episode(items: Iterable[T], season: int, episode: int) -> T:
    """Return the first item matching season and episode."""
    for item in items:
        if item.season == season and item.episode == episode:
            return item
    raise EpisodeNotFound(f"no S{season:02d}E{episode:02d}")


def filter_season(items: Iterable[T], season: int) -> list[T]:
    return [item for item in items if item.season == season]


def filter_episode(items: Iterable[T], season: int, episode: int) -> list[T]:
    return [
        item for item in items if item.season == season and item.episode == episode
    ]
