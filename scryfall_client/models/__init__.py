from scryfall_client.models.auth import (
    Account,
    Application,
    OAuthConvertRequest,
    OAuthGrant,
    OAuthGrantRequest,
    OAuthRevokeResponse,
    OAuthScope,
)
from scryfall_client.models.bulk_data import BulkData
from scryfall_client.models.card import (
    Card,
    CardFace,
    CardList,
    Frame,
    ImageURIs,
    Layout,
    Legalities,
    Preview,
    Prices,
    PurchaseURIs,
    Rarity,
    RelatedCard,
    RelatedURIs,
)
from scryfall_client.models.catalog import Catalog, CatalogName
from scryfall_client.models.common import Color, ErrorBody, ListEnvelope
from scryfall_client.models.ruling import Ruling, RulingSource
from scryfall_client.models.set import Set
from scryfall_client.models.symbol import CardSymbol, ManaCost

__all__ = [
    "Account",
    "Application",
    "BulkData",
    "Card",
    "CardFace",
    "CardList",
    "CardSymbol",
    "Catalog",
    "CatalogName",
    "Color",
    "ErrorBody",
    "Frame",
    "ImageURIs",
    "Layout",
    "Legalities",
    "ListEnvelope",
    "ManaCost",
    "OAuthConvertRequest",
    "OAuthGrant",
    "OAuthGrantRequest",
    "OAuthRevokeResponse",
    "OAuthScope",
    "Preview",
    "Prices",
    "PurchaseURIs",
    "Rarity",
    "RelatedCard",
    "RelatedURIs",
    "Ruling",
    "RulingSource",
    "Set",
]
