from scryfall_client.client import ScryfallClient
from scryfall_client.endpoints._paths import with_query
from scryfall_client.models.symbol import CardSymbol, ManaCost


async def list_card_symbols(client: ScryfallClient) -> list[CardSymbol]:
    """List every card symbol."""
    return await client.list_get("symbology", list[CardSymbol])


async def parse_mana_cost(client: ScryfallClient, cost: str) -> ManaCost:
    """
    Normalize a mana cost string.

    Args:
        client: Scryfall client
        cost: Mana cost, loosely formatted (e.g., "RUx")

    Returns:
        The normalized cost (e.g., "{X}{U}{R}") with its colors and mana value
    """
    return await client.get(with_query("symbology/parse-mana", {"cost": cost}), ManaCost)
