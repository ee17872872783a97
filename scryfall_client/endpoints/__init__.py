from scryfall_client.endpoints.auth import (
    get_account,
    get_application,
    oauth_convert,
    oauth_downgrade,
    oauth_revoke,
)
from scryfall_client.endpoints.bulk_data import get_bulk_data, list_bulk_data
from scryfall_client.endpoints.cards import (
    Direction,
    Order,
    SearchCardsOptions,
    UniqueMode,
    autocomplete_card,
    get_card,
    get_card_by_arena_id,
    get_card_by_multiverse_id,
    get_card_by_mtgo_id,
    get_card_by_name,
    get_card_by_set_code_and_collector_number,
    get_card_by_tcgplayer_id,
    get_random_card,
    list_cards,
    next_card_page,
    search_cards,
)
from scryfall_client.endpoints.catalogs import (
    get_artifact_types_catalog,
    get_artist_names_catalog,
    get_card_names_catalog,
    get_catalog,
    get_creature_types_catalog,
    get_enchantment_types_catalog,
    get_land_types_catalog,
    get_loyalties_catalog,
    get_planeswalker_types_catalog,
    get_powers_catalog,
    get_spell_types_catalog,
    get_toughnesses_catalog,
    get_watermarks_catalog,
    get_word_bank_catalog,
)
from scryfall_client.endpoints.rulings import (
    get_rulings,
    get_rulings_by_arena_id,
    get_rulings_by_mtgo_id,
    get_rulings_by_multiverse_id,
    get_rulings_by_set_code_and_collector_number,
)
from scryfall_client.endpoints.sets import get_set, get_set_by_tcgplayer_id, list_sets
from scryfall_client.endpoints.symbols import list_card_symbols, parse_mana_cost

__all__ = [
    "Direction",
    "Order",
    "SearchCardsOptions",
    "UniqueMode",
    "autocomplete_card",
    "get_account",
    "get_application",
    "get_artifact_types_catalog",
    "get_artist_names_catalog",
    "get_bulk_data",
    "get_card",
    "get_card_by_arena_id",
    "get_card_by_mtgo_id",
    "get_card_by_multiverse_id",
    "get_card_by_name",
    "get_card_by_set_code_and_collector_number",
    "get_card_by_tcgplayer_id",
    "get_card_names_catalog",
    "get_catalog",
    "get_creature_types_catalog",
    "get_enchantment_types_catalog",
    "get_land_types_catalog",
    "get_loyalties_catalog",
    "get_planeswalker_types_catalog",
    "get_powers_catalog",
    "get_random_card",
    "get_rulings",
    "get_rulings_by_arena_id",
    "get_rulings_by_mtgo_id",
    "get_rulings_by_multiverse_id",
    "get_rulings_by_set_code_and_collector_number",
    "get_set",
    "get_set_by_tcgplayer_id",
    "get_spell_types_catalog",
    "get_toughnesses_catalog",
    "get_watermarks_catalog",
    "get_word_bank_catalog",
    "list_bulk_data",
    "list_card_symbols",
    "list_cards",
    "list_sets",
    "next_card_page",
    "oauth_convert",
    "oauth_downgrade",
    "oauth_revoke",
    "parse_mana_cost",
    "search_cards",
]
