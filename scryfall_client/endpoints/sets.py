from scryfall_client.client import ScryfallClient
from scryfall_client.endpoints._paths import segment
from scryfall_client.models.set import Set


async def list_sets(client: ScryfallClient) -> list[Set]:
    """List every set on Scryfall."""
    return await client.list_get("sets", list[Set])


async def get_set(client: ScryfallClient, code: str) -> Set:
    """Get a set by its three to five-letter code (or Scryfall ID)."""
    return await client.get(f"sets/{segment(code)}", Set)


async def get_set_by_tcgplayer_id(client: ScryfallClient, tcgplayer_id: int) -> Set:
    return await client.get(f"sets/tcgplayer/{tcgplayer_id}", Set)
