"""Tests for card symbol endpoints."""

import httpx
import pytest
import respx

from scryfall_client.client import ScryfallClient
from scryfall_client.endpoints.symbols import list_card_symbols, parse_mana_cost
from scryfall_client.errors import ScryfallAPIError

SCRYFALL_API = "https://api.scryfall.com"


class TestListCardSymbols:
    @respx.mock
    async def test_decodes_symbols(self, client: ScryfallClient) -> None:
        respx.get(f"{SCRYFALL_API}/symbology").mock(
            return_value=httpx.Response(
                200,
                json={
                    "object": "list",
                    "has_more": False,
                    "data": [
                        {
                            "object": "card_symbol",
                            "symbol": "{T}",
                            "loose_variant": None,
                            "english": "tap this permanent",
                            "transposable": False,
                            "represents_mana": False,
                            "appears_in_mana_costs": False,
                            "cmc": 0.0,
                            "funny": False,
                            "colors": [],
                            "gatherer_alternates": ["ocT", "oT"],
                            "svg_uri": "https://svgs.scryfall.io/card-symbols/T.svg",
                        },
                        {
                            "object": "card_symbol",
                            "symbol": "{½}",
                            "english": "one-half generic mana",
                            "represents_mana": True,
                            "appears_in_mana_costs": True,
                            "cmc": 0.5,
                            "funny": True,
                            "colors": [],
                        },
                        {
                            "object": "card_symbol",
                            "symbol": "{W/U}",
                            "loose_variant": None,
                            "english": "one white or blue mana",
                            "transposable": True,
                            "represents_mana": True,
                            "appears_in_mana_costs": True,
                            "cmc": 1.0,
                            "colors": ["W", "U"],
                        },
                    ],
                },
            )
        )

        tap, half, hybrid = await list_card_symbols(client)

        assert tap.symbol == "{T}"
        assert tap.represents_mana is False
        assert tap.gatherer_alternates == ["ocT", "oT"]
        assert half.cmc == 0.5
        assert half.funny is True
        assert half.svg_uri is None
        assert hybrid.colors == ["W", "U"]
        assert hybrid.transposable is True


class TestParseManaCost:
    """Tests for mana cost normalization."""

    @respx.mock
    async def test_normalizes_cost(self, client: ScryfallClient) -> None:
        route = respx.get(f"{SCRYFALL_API}/symbology/parse-mana").mock(
            return_value=httpx.Response(
                200,
                json={
                    "object": "mana_cost",
                    "cost": "{X}{U}{R}",
                    "cmc": 2.0,
                    "colors": ["U", "R"],
                    "colorless": False,
                    "monocolored": False,
                    "multicolored": True,
                },
            )
        )

        mana_cost = await parse_mana_cost(client, "RUx")

        assert route.calls.last.request.url.params["cost"] == "RUx"
        assert mana_cost.cost == "{X}{U}{R}"
        assert mana_cost.cmc == 2.0
        assert mana_cost.colors == ["U", "R"]
        assert mana_cost.multicolored is True
        assert mana_cost.monocolored is False

    @respx.mock
    async def test_unparseable_cost(self, client: ScryfallClient) -> None:
        respx.get(f"{SCRYFALL_API}/symbology/parse-mana").mock(
            return_value=httpx.Response(
                422,
                json={
                    "object": "error",
                    "code": "bad_request",
                    "status": 422,
                    "details": "The string fragment(s) “Q” were not understood.",
                },
            )
        )

        with pytest.raises(ScryfallAPIError) as exc_info:
            await parse_mana_cost(client, "Q")

        assert exc_info.value.status == 422
        assert exc_info.value.code == "bad_request"
