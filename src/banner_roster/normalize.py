"""
Name normalization, filtering and order-preserving dedup.

Shared by every game. Raw candidates pulled from a page often carry a rank
annotation ("Ellen (S-Rank)") or a source prefix ("Genshin - Furina"), and
the same cells mix in element, path and weapon labels that are not
characters at all.
"""

import logging
import re
from collections.abc import Iterable, Iterator

from banner_roster.models import GameVocabulary

log = logging.getLogger(__name__)

GENSHIN_PREFIX = re.compile(r"^Genshin[\s-]*", re.IGNORECASE)


def normalize_candidate(raw: str, strip_prefix: re.Pattern[str] | None = None) -> str:
    name = raw.split("(", 1)[0].strip()
    if strip_prefix is not None:
        name = strip_prefix.sub("", name, count=1).strip()
    return name


def find_banned_token(name: str, banned_tokens: Iterable[str]) -> str | None:
    # Substring match: a real name containing a banned fragment is rejected too.
    lowered = name.lower()
    for token in banned_tokens:
        if token.lower() in lowered:
            return token
    return None


def is_valid_name(name: str, vocabulary: GameVocabulary, banned_tokens: Iterable[str]) -> bool:
    if not name:
        return False
    if name in vocabulary:
        log.debug("Rejected %r: vocabulary token", name)
        return False
    token = find_banned_token(name, banned_tokens)
    if token is not None:
        log.debug("Rejected %r: contains banned token %r", name, token)
        return False
    return True


class RosterAccumulator:
    """Unique names in first-seen order."""

    def __init__(self) -> None:
        self._names: dict[str, None] = {}

    def add(self, name: str) -> bool:
        if name in self._names:
            return False
        self._names[name] = None
        return True

    def names(self) -> list[str]:
        return list(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __len__(self) -> int:
        return len(self._names)
