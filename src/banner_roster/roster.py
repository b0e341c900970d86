"""
Current banner rosters.

get_current_roster() is the one entry point other code should use: it maps
a game identifier to that game's source, fetches the page and runs the
extraction pipeline. It never raises. An unknown game, a failed fetch, a
page whose layout no longer matches and a page with no usable names all
come back as an empty list.
"""

import logging

from banner_roster.exceptions import (
    BannerRosterError,
    EmptyExtraction,
    LocatorMiss,
    RosterUnavailableError,
)
from banner_roster.fetcher import fetch_html
from banner_roster.locators import parse_document
from banner_roster.normalize import RosterAccumulator, is_valid_name, normalize_candidate
from banner_roster.sources import RosterSource, get_source

log = logging.getLogger(__name__)


def extract_roster(html: str, source: RosterSource) -> list[str]:
    """
    Run the locate/extract/filter/dedup pipeline over one fetched page.

    Raises LocatorMiss when the page has no region the game's locator
    recognizes, and EmptyExtraction when regions were found but every
    candidate in them was rejected.
    """
    soup = parse_document(html)
    locator = source.locator
    roster = RosterAccumulator()
    regions = 0

    for region in locator.locate(soup):
        regions += 1
        for raw in locator.candidates(region):
            name = normalize_candidate(raw, source.strip_prefix)
            if is_valid_name(name, source.vocabulary, source.banned_tokens):
                roster.add(name)
        if locator.stop_after_first_hit and roster:
            break

    if regions == 0:
        raise LocatorMiss(f"No banner region found on {source.game} page ({locator!r})")
    if not roster:
        raise EmptyExtraction(
            f"{regions} banner region(s) found on {source.game} page but no names survived filtering"
        )

    log.info("%s roster: %s", source.game, ", ".join(roster))
    return roster.names()


def get_current_roster(game: str | None) -> list[str]:
    source = get_source(game)
    if source is None:
        log.warning("Unknown game identifier %r; returning empty roster", game)
        return []

    try:
        html = fetch_html(source.url, source.headers)
        return extract_roster(html, source)
    except BannerRosterError as e:
        log.warning("%s roster unavailable (%s): %s", source.game, type(e).__name__, e)
        return []


def require_current_roster(game: str | None) -> list[str]:
    roster = get_current_roster(game)
    if not roster:
        raise RosterUnavailableError(game)
    return roster
