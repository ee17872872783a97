from enum import Enum

from pydantic import BaseModel

from scryfall_client.timestamps import Date


class RulingSource(str, Enum):
    WOTC = "wotc"
    SCRYFALL = "scryfall"


class Ruling(BaseModel):
    """
    An Oracle ruling, release note, or Scryfall note for a card.

    Cards with the same name share the same rulings.
    """

    oracle_id: str | None = None
    source: str
    published_at: Date
    comment: str
