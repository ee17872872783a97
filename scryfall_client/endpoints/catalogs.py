"""
Catalogs of Magic datapoints.

Values are updated as soon as new cards are entered during spoiler seasons.
"""

from scryfall_client.client import ScryfallClient
from scryfall_client.endpoints._paths import segment
from scryfall_client.models.catalog import Catalog, CatalogName


async def get_catalog(client: ScryfallClient, name: CatalogName | str) -> Catalog:
    """Get a catalog by name (e.g., CatalogName.CARD_NAMES or "card-names")."""
    if isinstance(name, CatalogName):
        name = name.value
    return await client.get(f"catalog/{segment(name)}", Catalog)


async def get_card_names_catalog(client: ScryfallClient) -> Catalog:
    """All nontoken English card names."""
    return await get_catalog(client, CatalogName.CARD_NAMES)


async def get_artist_names_catalog(client: ScryfallClient) -> Catalog:
    """Canonical artist names, without duplicates or misspellings."""
    return await get_catalog(client, CatalogName.ARTIST_NAMES)


async def get_word_bank_catalog(client: ScryfallClient) -> Catalog:
    """English words of length 2 or more that could appear in a card name."""
    return await get_catalog(client, CatalogName.WORD_BANK)


async def get_creature_types_catalog(client: ScryfallClient) -> Catalog:
    return await get_catalog(client, CatalogName.CREATURE_TYPES)


async def get_planeswalker_types_catalog(client: ScryfallClient) -> Catalog:
    return await get_catalog(client, CatalogName.PLANESWALKER_TYPES)


async def get_land_types_catalog(client: ScryfallClient) -> Catalog:
    return await get_catalog(client, CatalogName.LAND_TYPES)


async def get_artifact_types_catalog(client: ScryfallClient) -> Catalog:
    return await get_catalog(client, CatalogName.ARTIFACT_TYPES)


async def get_enchantment_types_catalog(client: ScryfallClient) -> Catalog:
    return await get_catalog(client, CatalogName.ENCHANTMENT_TYPES)


async def get_spell_types_catalog(client: ScryfallClient) -> Catalog:
    return await get_catalog(client, CatalogName.SPELL_TYPES)


async def get_powers_catalog(client: ScryfallClient) -> Catalog:
    """Every value a creature or vehicle's power can take."""
    return await get_catalog(client, CatalogName.POWERS)


async def get_toughnesses_catalog(client: ScryfallClient) -> Catalog:
    """Every value a creature or vehicle's toughness can take."""
    return await get_catalog(client, CatalogName.TOUGHNESSES)


async def get_loyalties_catalog(client: ScryfallClient) -> Catalog:
    """Every value a planeswalker's loyalty can take."""
    return await get_catalog(client, CatalogName.LOYALTIES)


async def get_watermarks_catalog(client: ScryfallClient) -> Catalog:
    return await get_catalog(client, CatalogName.WATERMARKS)
