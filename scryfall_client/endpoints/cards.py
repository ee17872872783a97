"""
Card lookups and search.

Card IDs from other services (Multiverse, MTGO, Arena, TCGplayer) resolve to
the matching Scryfall printing.
"""

from dataclasses import dataclass
from enum import Enum

from scryfall_client.client import ScryfallClient
from scryfall_client.endpoints._paths import segment, with_query
from scryfall_client.models.card import Card, CardList
from scryfall_client.models.catalog import Catalog


class UniqueMode(str, Enum):
    """How duplicate results are collapsed in a search."""

    CARDS = "cards"
    ART = "art"
    PRINTS = "prints"


class Order(str, Enum):
    """Sort key for search results."""

    NAME = "name"
    SET = "set"
    RELEASED = "released"
    RARITY = "rarity"
    COLOR = "color"
    USD = "usd"
    TIX = "tix"
    EUR = "eur"
    CMC = "cmc"
    POWER = "power"
    TOUGHNESS = "toughness"
    EDHREC = "edhrec"
    PENNY = "penny"
    ARTIST = "artist"
    REVIEW = "review"


class Direction(str, Enum):
    AUTO = "auto"
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True, slots=True)
class SearchCardsOptions:
    """
    Optional parameters for a card search.

    Attributes:
        unique: Strategy for omitting similar cards
        order: Sort key
        dir: Sort direction
        include_extras: Include tokens, planes, and other extras
        include_multilingual: Include cards in every language
        include_variations: Include rare printing variations
        page: Page number to return (1-based)
    """

    unique: UniqueMode | None = None
    order: Order | None = None
    dir: Direction | None = None
    include_extras: bool = False
    include_multilingual: bool = False
    include_variations: bool = False
    page: int | None = None

    def to_params(self) -> dict[str, str | int | bool | None]:
        return {
            "unique": self.unique.value if self.unique else None,
            "order": self.order.value if self.order else None,
            "dir": self.dir.value if self.dir else None,
            "include_extras": self.include_extras or None,
            "include_multilingual": self.include_multilingual or None,
            "include_variations": self.include_variations or None,
            "page": self.page,
        }


async def list_cards(client: ScryfallClient) -> list[Card]:
    """List the first page of every card in Scryfall's database."""
    return await client.list_get("cards", list[Card])


async def get_card(client: ScryfallClient, card_id: str) -> Card:
    """Get a single card by its Scryfall ID."""
    return await client.get(f"cards/{segment(card_id)}", Card)


async def get_card_by_multiverse_id(client: ScryfallClient, multiverse_id: int) -> Card:
    return await client.get(f"cards/multiverse/{multiverse_id}", Card)


async def get_card_by_mtgo_id(client: ScryfallClient, mtgo_id: int) -> Card:
    return await client.get(f"cards/mtgo/{mtgo_id}", Card)


async def get_card_by_arena_id(client: ScryfallClient, arena_id: int) -> Card:
    return await client.get(f"cards/arena/{arena_id}", Card)


async def get_card_by_tcgplayer_id(client: ScryfallClient, tcgplayer_id: int) -> Card:
    return await client.get(f"cards/tcgplayer/{tcgplayer_id}", Card)


async def get_card_by_set_code_and_collector_number(
    client: ScryfallClient,
    set_code: str,
    collector_number: str,
    lang: str | None = None,
) -> Card:
    """
    Get a card by set code and collector number.

    Args:
        client: Scryfall client
        set_code: Set code (e.g., "akh")
        collector_number: Collector number within the set (e.g., "210")
        lang: Optional language code (e.g., "ja")
    """
    path = f"cards/{segment(set_code.lower())}/{segment(collector_number)}"
    if lang:
        path = f"{path}/{segment(lang)}"
    return await client.get(path, Card)


async def get_card_by_name(
    client: ScryfallClient,
    name: str,
    exact: bool = True,
    set_code: str | None = None,
) -> Card:
    """
    Get a card by name.

    Args:
        client: Scryfall client
        name: Card name
        exact: Require an exact (case-insensitive) match. When False the API
               performs a fuzzy match and may answer with an "ambiguous" error.
        set_code: Restrict the lookup to one set

    Raises:
        ScryfallAPIError: code "not_found" when nothing matches
    """
    params: dict[str, str | int | bool | None] = {"exact" if exact else "fuzzy": name}
    params["set"] = set_code
    return await client.get(with_query("cards/named", params), Card)


async def get_random_card(client: ScryfallClient, query: str | None = None) -> Card:
    """Get a random card, optionally limited to cards matching a search query."""
    return await client.get(with_query("cards/random", {"q": query}), Card)


async def autocomplete_card(
    client: ScryfallClient,
    text: str,
    include_extras: bool = False,
) -> Catalog:
    """Get a catalog of up to 20 full English card names that could complete `text`."""
    path = with_query(
        "cards/autocomplete",
        {"q": text, "include_extras": include_extras or None},
    )
    return await client.get(path, Catalog)


async def search_cards(
    client: ScryfallClient,
    query: str,
    options: SearchCardsOptions | None = None,
) -> CardList:
    """
    Search cards with a fulltext query.

    Returns one page of results. Follow it with next_card_page().

    Args:
        client: Scryfall client
        query: Search query (see https://scryfall.com/docs/syntax)
        options: Sorting, uniqueness, and page options

    Raises:
        ScryfallAPIError: code "not_found" when the query matches nothing
    """
    params: dict[str, str | int | bool | None] = {"q": query}
    params.update((options or SearchCardsOptions()).to_params())
    return await client.get(with_query("cards/search", params), CardList)


async def next_card_page(client: ScryfallClient, card_list: CardList) -> CardList | None:
    """Fetch the page after `card_list`, or None if it was the last page."""
    if not card_list.has_more or not card_list.next_page:
        return None
    return await client.get(card_list.next_page, CardList)
