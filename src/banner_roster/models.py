"""Pydantic models for the bundled vocabulary tables."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

GameId = Literal["genshin", "starrail", "zzz"]


class GameVocabulary(BaseModel):
    """Closed sets of non-character tokens that show up next to names on a banner page."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    elements: frozenset[str] = Field(default_factory=frozenset)
    paths: frozenset[str] = Field(default_factory=frozenset)
    weapon_types: frozenset[str] = Field(default_factory=frozenset)
    rank_labels: frozenset[str] = Field(default_factory=frozenset)
    specialties: frozenset[str] = Field(default_factory=frozenset)

    @field_validator("elements", "paths", "weapon_types", "rank_labels", "specialties")
    @classmethod
    def _strip_entries(cls, v: frozenset[str]) -> frozenset[str]:
        stripped = frozenset(token.strip() for token in v)
        if "" in stripped:
            raise ValueError("vocabulary entries must be non-empty")
        return stripped

    def __contains__(self, name: object) -> bool:
        return (
            name in self.elements
            or name in self.paths
            or name in self.weapon_types
            or name in self.rank_labels
            or name in self.specialties
        )


class VocabularyFile(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    generic_banned_tokens: tuple[str, ...]
    games: dict[GameId, GameVocabulary]

    @field_validator("generic_banned_tokens")
    @classmethod
    def _non_empty_tokens(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        tokens = tuple(token.strip() for token in v)
        if any(not token for token in tokens):
            raise ValueError("banned tokens must be non-empty")
        return tokens
