from pydantic import BaseModel

from scryfall_client.timestamps import Date


class Set(BaseModel):
    """
    A group of related Magic cards. Every card belongs to exactly one set.

    Attributes:
        code: Unique three to five-letter set code
        mtgo_code: Code on Magic Online, if it differs or exists
        released_at: Release date (GMT-8), when known
        block_code: Block code, if any
        parent_set_code: Parent set, common for promo and token sets
        icon_svg_uri: SVG icon on Scryfall's CDN
        search_uri: API URI to begin paginating over this set's cards
    """

    id: str | None = None
    code: str
    mtgo_code: str | None = None
    arena_code: str | None = None
    tcgplayer_id: int | None = None
    name: str
    uri: str | None = None
    scryfall_uri: str | None = None
    search_uri: str
    released_at: Date | None = None
    set_type: str
    card_count: int
    printed_size: int | None = None
    digital: bool = False
    nonfoil_only: bool = False
    foil_only: bool = False
    block_code: str | None = None
    block: str | None = None
    parent_set_code: str | None = None
    icon_svg_uri: str
