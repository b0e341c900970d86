"""
Vocabulary tables for name filtering.

The tables live in data/vocabulary.yaml next to this module. They are read
once per process and shared read-only by every roster computation.
"""

import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import ValidationError

from banner_roster.exceptions import VocabularyError
from banner_roster.models import GameVocabulary, VocabularyFile

log = logging.getLogger(__name__)

VOCABULARY_PATH = Path(__file__).parent / "data" / "vocabulary.yaml"


def load_vocabulary(path: Path = VOCABULARY_PATH) -> VocabularyFile:
    if not path.exists():
        raise VocabularyError(f"Vocabulary file not found at {path}")

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise VocabularyError(f"Invalid YAML in vocabulary file {path}: {e}") from e

    if data is None:
        raise VocabularyError(f"Vocabulary file {path} is empty")

    try:
        vocabulary = VocabularyFile.model_validate(data)
    except ValidationError as e:
        raise VocabularyError(f"Invalid vocabulary file {path}: {e}") from e

    log.debug(
        "Loaded vocabulary: %d banned tokens, games=%s",
        len(vocabulary.generic_banned_tokens),
        sorted(vocabulary.games),
    )
    return vocabulary


@lru_cache(maxsize=1)
def get_vocabulary() -> VocabularyFile:
    return load_vocabulary()


def get_game_vocabulary(game: str) -> GameVocabulary:
    games = get_vocabulary().games
    if game not in games:
        raise VocabularyError(f"No vocabulary defined for game '{game}'")
    return games[game]
