"""
Scryfall bulk data descriptors.

Bulk data: https://scryfall.com/docs/api/bulk-data
"""

from scryfall_client.client import ScryfallClient
from scryfall_client.endpoints._paths import segment
from scryfall_client.models.bulk_data import BulkData


async def list_bulk_data(client: ScryfallClient) -> list[BulkData]:
    """List every bulk data file Scryfall publishes."""
    return await client.list_get("bulk-data", list[BulkData])


async def get_bulk_data(client: ScryfallClient, id_or_type: str) -> BulkData:
    """
    Get one bulk data descriptor.

    Args:
        client: Scryfall client
        id_or_type: Bulk item ID, or its type (e.g., "default_cards")
    """
    return await client.get(f"bulk-data/{segment(id_or_type)}", BulkData)
