from pydantic import BaseModel, Field


class CardSymbol(BaseModel):
    """
    A symbol that may appear in a card's mana cost or Oracle text.

    See https://scryfall.com/docs/api/colors for how costs are represented.
    """

    symbol: str
    loose_variant: str | None = None
    english: str
    transposable: bool = False
    represents_mana: bool = False
    # Symbols from funny sets can have fractional mana values
    cmc: float | None = None
    appears_in_mana_costs: bool = False
    funny: bool = False
    colors: list[str] = Field(default_factory=list)
    gatherer_alternates: list[str] | None = None
    svg_uri: str | None = None


class ManaCost(BaseModel):
    """A mana cost string normalized by the API."""

    cost: str
    cmc: float
    colors: list[str] = Field(default_factory=list)
    colorless: bool
    monocolored: bool
    multicolored: bool
