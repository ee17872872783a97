import pytest

from scryfall_client.client import ScryfallClient
from scryfall_client.config import ClientConfig


@pytest.fixture
async def client():
    """Client against the production base URL with rate limiting disabled."""
    async with ScryfallClient(ClientConfig(rate_limiter=None)) as scryfall:
        yield scryfall
