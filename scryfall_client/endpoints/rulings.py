"""Rulings for a card, looked up by any of its identifiers."""

from scryfall_client.client import ScryfallClient
from scryfall_client.endpoints._paths import segment
from scryfall_client.models.ruling import Ruling


async def get_rulings(client: ScryfallClient, card_id: str) -> list[Ruling]:
    """Get rulings for a card by its Scryfall ID."""
    return await client.list_get(f"cards/{segment(card_id)}/rulings", list[Ruling])


async def get_rulings_by_multiverse_id(client: ScryfallClient, multiverse_id: int) -> list[Ruling]:
    return await client.list_get(f"cards/multiverse/{multiverse_id}/rulings", list[Ruling])


async def get_rulings_by_mtgo_id(client: ScryfallClient, mtgo_id: int) -> list[Ruling]:
    return await client.list_get(f"cards/mtgo/{mtgo_id}/rulings", list[Ruling])


async def get_rulings_by_arena_id(client: ScryfallClient, arena_id: int) -> list[Ruling]:
    return await client.list_get(f"cards/arena/{arena_id}/rulings", list[Ruling])


async def get_rulings_by_set_code_and_collector_number(
    client: ScryfallClient,
    set_code: str,
    collector_number: str,
) -> list[Ruling]:
    path = f"cards/{segment(set_code.lower())}/{segment(collector_number)}/rulings"
    return await client.list_get(path, list[Ruling])
