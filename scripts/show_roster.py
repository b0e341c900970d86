"""
CLI script for printing current banner rosters.

Fetches each requested game's banner page in parallel and prints the
rate-up characters found on it. With --file, runs the extraction pipeline
against a saved HTML page instead of the live wiki.
"""

import argparse
import json
import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from banner_roster import roster, sources, terminal
from banner_roster.config import get_settings
from banner_roster.exceptions import BannerRosterError


def fetch_rosters(games: list[str]) -> dict[str, list[str]]:
    with ThreadPoolExecutor(max_workers=max(len(games), 1)) as executor:
        results = executor.map(roster.get_current_roster, games)
        return dict(zip(games, results))


def roster_from_file(path: Path, game: str) -> list[str]:
    source = sources.get_source(game)
    if source is None:
        raise ValueError(f"Unknown game '{game}'")
    html = path.read_text(encoding="utf-8")
    return roster.extract_roster(html, source)


def _print_rosters(rosters: dict[str, list[str]], as_json: bool) -> None:
    if as_json:
        print(json.dumps(rosters, ensure_ascii=False, indent=2))
        return
    for game, names in rosters.items():
        source = sources.get_source(game)
        url = source.url if source is not None else None
        terminal.roster(sources.GAMES.get(game, game), names, url)


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the current rate-up characters per game")
    parser.add_argument(
        "games",
        nargs="*",
        metavar="GAME",
        help=f"Games to look up (default: all of {', '.join(sources.GAMES)}; 'hsr' also works)",
    )
    parser.add_argument("--json", action="store_true", help="Print rosters as JSON")
    parser.add_argument(
        "--file",
        type=Path,
        default=None,
        help="Extract from a saved HTML page instead of fetching (requires exactly one GAME)",
    )

    args = parser.parse_args()

    settings = get_settings()
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(levelname)s: %(message)s",
    )

    requested = args.games or list(sources.GAMES)
    games = []
    for identifier in requested:
        game = sources.resolve_game(identifier)
        if game is None:
            terminal.error(f"Unknown game '{identifier}'")
            sys.exit(1)
        if game not in games:
            games.append(game)

    if args.file is not None:
        if len(games) != 1:
            terminal.error("--file requires exactly one GAME")
            sys.exit(1)
        try:
            rosters = {games[0]: roster_from_file(args.file, games[0])}
        except (BannerRosterError, OSError, ValueError) as e:
            terminal.error(str(e))
            sys.exit(1)
    else:
        rosters = fetch_rosters(games)

    _print_rosters(rosters, args.json)

    if any(not names for names in rosters.values()):
        sys.exit(1)


if __name__ == "__main__":
    main()
