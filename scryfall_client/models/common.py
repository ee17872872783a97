"""Wire envelopes and shared enumerations."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Color(str, Enum):
    """A Magic: The Gathering color, as the API abbreviates it."""

    WHITE = "W"
    BLUE = "U"
    BLACK = "B"
    RED = "R"
    GREEN = "G"


class ErrorBody(BaseModel):
    """Error object returned with any non-200 response."""

    status: int
    code: str
    details: str
    type: str | None = None
    warnings: list[str] | None = None


class ListEnvelope(BaseModel):
    """
    A requested sequence of other objects (cards, sets, rulings, etc).

    `data` is kept undecoded so the caller's destination type can be
    applied in a second pass.
    """

    data: list[Any] = Field(default_factory=list)
    has_more: bool = False
    next_page: str | None = None

    # Only meaningful for lists of cards
    total_cards: int | None = None

    # Non-fatal issues with the request. The list may be incomplete when set.
    warnings: list[str] | None = None
