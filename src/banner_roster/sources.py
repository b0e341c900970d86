"""
Per-game roster sources.

A RosterSource bundles everything one game's pipeline needs: the page to
fetch, the headers to send, the locator that understands that page, and
the vocabulary used to reject non-character tokens. Sources are built once
and never mutated.
"""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType

from banner_roster.fetcher import default_headers
from banner_roster.locators import (
    BannerLocator,
    CurrentWarpLocator,
    FiveStarRateUpLocator,
    RateUpAgentsLocator,
)
from banner_roster.models import GameVocabulary
from banner_roster.normalize import GENSHIN_PREFIX
from banner_roster.vocabulary import get_game_vocabulary, get_vocabulary

GAMES: dict[str, str] = {
    "genshin": "Genshin Impact",
    "starrail": "Honkai: Star Rail",
    "zzz": "Zenless Zone Zero",
}

GAME_ALIASES: dict[str, str] = {
    "hsr": "starrail",
}

SOURCE_URLS: dict[str, str] = {
    "genshin": "https://genshin-impact.fandom.com/wiki/Wish",
    "starrail": "https://honkai-star-rail.fandom.com/wiki/Warp",
    "zzz": "https://zenless-zone-zero.fandom.com/wiki/Signal_Search",
}


@dataclass(frozen=True)
class RosterSource:
    game: str
    url: str
    headers: Mapping[str, str]
    locator: BannerLocator
    vocabulary: GameVocabulary
    banned_tokens: tuple[str, ...]
    strip_prefix: re.Pattern[str] | None = None


def resolve_game(identifier: str | None) -> str | None:
    if not identifier:
        return None
    key = identifier.strip().lower()
    key = GAME_ALIASES.get(key, key)
    return key if key in GAMES else None


def _build_source(
    game: str, locator: BannerLocator, strip_prefix: re.Pattern[str] | None = None
) -> RosterSource:
    return RosterSource(
        game=game,
        url=SOURCE_URLS[game],
        headers=MappingProxyType(default_headers()),
        locator=locator,
        vocabulary=get_game_vocabulary(game),
        banned_tokens=get_vocabulary().generic_banned_tokens,
        strip_prefix=strip_prefix,
    )


@lru_cache(maxsize=1)
def get_sources() -> dict[str, RosterSource]:
    return {
        "genshin": _build_source("genshin", FiveStarRateUpLocator(), GENSHIN_PREFIX),
        "starrail": _build_source("starrail", CurrentWarpLocator()),
        "zzz": _build_source("zzz", RateUpAgentsLocator()),
    }


def get_source(identifier: str | None) -> RosterSource | None:
    game = resolve_game(identifier)
    if game is None:
        return None
    return get_sources()[game]
