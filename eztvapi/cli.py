"""Command line access to the eztv APIs.

Usage:
    eztvapi ping
    eztvapi show tt0944947
    eztvapi episode tt0944947 1 1
    eztvapi torrents tt0383795
    eztvapi latest --limit 10
"""

import argparse
import json
import logging
import sys

from pydantic import BaseModel

from .config import Settings
from .errors import EztvError
from .shows import ShowClient
from .torrents import TorrentClient

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Query the eztv show and torrent APIs")
    parser.add_argument("--log-level", help="Override EZTV_LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("ping", help="Show the status of the show API")

    show = sub.add_parser("show", help="Show details for an IMDb id")
    show.add_argument("imdb_id")

    episode = sub.add_parser("episode", help="One episode of a show")
    episode.add_argument("imdb_id")
    episode.add_argument("season", type=int)
    episode.add_argument("episode", type=int)

    season = sub.add_parser("season", help="All episodes of a season")
    season.add_argument("imdb_id")
    season.add_argument("season", type=int)

    shows = sub.add_parser("list", help="List a page of shows")
    shows.add_argument("page", type=int, nargs="?", default=1)

    search = sub.add_parser("search", help="Search shows by keyword")
    search.add_argument("keyword")

    torrents = sub.add_parser("torrents", help="All torrents of a show")
    torrents.add_argument("imdb_id")
    torrents.add_argument("--season", type=int)
    torrents.add_argument("--episode", type=int)

    latest = sub.add_parser("latest", help="Latest torrents across all shows")
    latest.add_argument("--limit", type=int, default=30)
    latest.add_argument("--page", type=int, default=1)

    return parser


def run(args: argparse.Namespace, settings: Settings):
    """Run the selected command and return its result."""
    if args.command in ("torrents", "latest"):
        with TorrentClient(settings=settings) as client:
            if args.command == "latest":
                return client.get_torrents(args.limit, args.page)
            if args.season is not None and args.episode is not None:
                return client.get_episode_torrents(
                    args.imdb_id, args.season, args.episode
                )
            if args.season is not None:
                return client.get_season_torrents(args.imdb_id, args.season)
            return client.get_show_torrents(args.imdb_id)

    with ShowClient(settings=settings) as client:
        if args.command == "ping":
            return client.ping()
        if args.command == "show":
            return client.get_show_details(args.imdb_id)
        if args.command == "episode":
            return client.get_episode(args.imdb_id, args.season, args.episode)
        if args.command == "season":
            return client.get_season(args.imdb_id, args.season)
        if args.command == "list":
            return client.list_shows(args.page)
        return client.search_show(args.keyword)


def to_json(result: BaseModel | list[BaseModel]) -> str:
    if isinstance(result, list):
        data = [item.model_dump(mode="json") for item in result]
    else:
        data = result.model_dump(mode="json")
    return json.dumps(data, indent=2, ensure_ascii=False)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.command == "torrents" and args.episode is not None and args.season is None:
        parser.error("--episode requires --season")
    settings = Settings()

    logging.basicConfig(
        level=getattr(logging, (args.log_level or settings.log_level).upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        result = run(args, settings)
    except EztvError as e:
        logger.error(f"{args.command} failed: {e}")
        return 1

    print(to_json(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
