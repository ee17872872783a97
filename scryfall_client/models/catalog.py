from enum import Enum

from pydantic import BaseModel, Field


class CatalogName(str, Enum):
    """Catalogs served under /catalog/{name}."""

    CARD_NAMES = "card-names"
    ARTIST_NAMES = "artist-names"
    WORD_BANK = "word-bank"
    CREATURE_TYPES = "creature-types"
    PLANESWALKER_TYPES = "planeswalker-types"
    LAND_TYPES = "land-types"
    ARTIFACT_TYPES = "artifact-types"
    ENCHANTMENT_TYPES = "enchantment-types"
    SPELL_TYPES = "spell-types"
    POWERS = "powers"
    TOUGHNESSES = "toughnesses"
    LOYALTIES = "loyalties"
    WATERMARKS = "watermarks"


class Catalog(BaseModel):
    """An array of Magic datapoints (words, card values, etc)."""

    uri: str | None = None
    total_values: int = 0
    data: list[str] = Field(default_factory=list)
