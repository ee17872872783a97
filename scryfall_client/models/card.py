"""Card objects and the values they carry."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from scryfall_client.timestamps import Date


class Layout(str, Enum):
    """How a card is printed and read (see https://scryfall.com/docs/api/layouts)."""

    NORMAL = "normal"
    SPLIT = "split"
    FLIP = "flip"
    TRANSFORM = "transform"
    MODAL_DFC = "modal_dfc"
    MELD = "meld"
    LEVELER = "leveler"
    CLASS = "class"
    SAGA = "saga"
    ADVENTURE = "adventure"
    PLANAR = "planar"
    SCHEME = "scheme"
    VANGUARD = "vanguard"
    TOKEN = "token"
    DOUBLE_FACED_TOKEN = "double_faced_token"
    EMBLEM = "emblem"
    AUGMENT = "augment"
    HOST = "host"
    ART_SERIES = "art_series"
    REVERSIBLE_CARD = "reversible_card"


class Frame(str, Enum):
    """Card frame edition."""

    FRAME_1993 = "1993"
    FRAME_1997 = "1997"
    FRAME_2003 = "2003"
    FRAME_2015 = "2015"
    FUTURE = "future"


class Rarity(str, Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    SPECIAL = "special"
    MYTHIC = "mythic"
    BONUS = "bonus"


class ImageURIs(BaseModel):
    """Links to imagery for a card or card face, by size."""

    small: str | None = None
    normal: str | None = None
    large: str | None = None
    png: str | None = None
    art_crop: str | None = None
    border_crop: str | None = None


class Legalities(BaseModel):
    """Legality of a card per play format ("legal", "not_legal", "restricted", "banned")."""

    model_config = ConfigDict(populate_by_name=True)

    standard: str | None = None
    future: str | None = None
    historic: str | None = None
    gladiator: str | None = None
    pioneer: str | None = None
    explorer: str | None = None
    modern: str | None = None
    legacy: str | None = None
    pauper: str | None = None
    vintage: str | None = None
    penny: str | None = None
    commander: str | None = None
    oathbreaker: str | None = None
    brawl: str | None = None
    alchemy: str | None = None
    paupercommander: str | None = None
    duel: str | None = None
    oldschool: str | None = None
    premodern: str | None = None
    frontier: str | None = None
    one_versus_one: str | None = Field(default=None, alias="1v1")


class Prices(BaseModel):
    """Daily price estimates, as decimal strings. Absent prices are None."""

    usd: str | None = None
    usd_foil: str | None = None
    usd_etched: str | None = None
    eur: str | None = None
    eur_foil: str | None = None
    tix: str | None = None


class RelatedURIs(BaseModel):
    gatherer: str | None = None
    tcgplayer_infinite_articles: str | None = None
    tcgplayer_infinite_decks: str | None = None
    edhrec: str | None = None


class PurchaseURIs(BaseModel):
    tcgplayer: str | None = None
    cardmarket: str | None = None
    cardhoarder: str | None = None


class RelatedCard(BaseModel):
    """A card closely related to another (meld parts, tokens, combo pieces)."""

    id: str
    component: str
    name: str
    type_line: str
    uri: str


class CardFace(BaseModel):
    """One face of a multiface card (split, flip, transform, etc)."""

    name: str
    mana_cost: str = ""
    type_line: str | None = None
    oracle_text: str | None = None
    colors: list[str] | None = None
    color_indicator: list[str] | None = None
    power: str | None = None
    toughness: str | None = None
    loyalty: str | None = None
    defense: str | None = None
    flavor_text: str | None = None
    illustration_id: str | None = None
    image_uris: ImageURIs | None = None
    artist: str | None = None
    watermark: str | None = None
    printed_name: str | None = None
    printed_text: str | None = None
    printed_type_line: str | None = None


class Preview(BaseModel):
    """Where and when a card was first previewed."""

    previewed_at: Date | None = None
    source_uri: str | None = None
    source: str | None = None


class Card(BaseModel):
    """
    A single Magic card printing in Scryfall's database.

    Enumerated string fields (layout, frame, rarity, colors) are kept as
    plain strings so new values from the API never fail decoding. The
    Layout, Frame, Rarity and Color enums compare equal to those strings.
    """

    # Core fields
    id: str
    oracle_id: str | None = None
    multiverse_ids: list[int] = Field(default_factory=list)
    mtgo_id: int | None = None
    mtgo_foil_id: int | None = None
    arena_id: int | None = None
    tcgplayer_id: int | None = None
    cardmarket_id: int | None = None
    name: str
    lang: str = "en"
    released_at: Date | None = None
    uri: str
    scryfall_uri: str
    layout: str
    highres_image: bool = False
    image_status: str | None = None
    image_uris: ImageURIs | None = None
    prints_search_uri: str | None = None
    rulings_uri: str | None = None

    # Gameplay fields
    all_parts: list[RelatedCard] | None = None
    card_faces: list[CardFace] | None = None
    cmc: float = 0
    color_identity: list[str] = Field(default_factory=list)
    color_indicator: list[str] | None = None
    colors: list[str] | None = None
    edhrec_rank: int | None = None
    hand_modifier: str | None = None
    keywords: list[str] = Field(default_factory=list)
    legalities: Legalities = Field(default_factory=Legalities)
    life_modifier: str | None = None
    loyalty: str | None = None
    mana_cost: str | None = None
    oracle_text: str | None = None
    penny_rank: int | None = None
    power: str | None = None
    produced_mana: list[str] | None = None
    reserved: bool = False
    toughness: str | None = None
    type_line: str | None = None

    # Print fields
    artist: str | None = None
    booster: bool = False
    border_color: str | None = None
    card_back_id: str | None = None
    collector_number: str
    content_warning: bool | None = None
    digital: bool = False
    finishes: list[str] = Field(default_factory=list)
    flavor_name: str | None = None
    flavor_text: str | None = None
    frame_effects: list[str] | None = None
    frame: str | None = None
    full_art: bool = False
    games: list[str] = Field(default_factory=list)
    illustration_id: str | None = None
    oversized: bool = False
    prices: Prices = Field(default_factory=Prices)
    printed_name: str | None = None
    printed_text: str | None = None
    printed_type_line: str | None = None
    promo: bool = False
    promo_types: list[str] | None = None
    purchase_uris: PurchaseURIs | None = None
    rarity: str
    related_uris: RelatedURIs = Field(default_factory=RelatedURIs)
    reprint: bool = False
    scryfall_set_uri: str | None = None
    set_name: str
    set_search_uri: str | None = None
    set_type: str | None = None
    set_uri: str | None = None
    set: str
    set_id: str | None = None
    story_spotlight: bool = False
    textless: bool = False
    variation: bool = False
    variation_of: str | None = None
    watermark: str | None = None
    preview: Preview | None = None


class CardList(BaseModel):
    """
    One page of card search results with its pagination metadata.

    Follow `next_page` to fetch the following page.
    """

    cards: list[Card] = Field(default_factory=list, alias="data")
    has_more: bool = False
    next_page: str | None = None

    # Total matches across all pages, when the API reports it
    total_cards: int | None = None
    warnings: list[str] | None = None

    model_config = ConfigDict(populate_by_name=True)
