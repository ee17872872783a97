from pydantic import BaseModel

from scryfall_client.timestamps import Timestamp


class BulkData(BaseModel):
    """
    A downloadable bulk data file descriptor.

    Cards in bulk files carry no prices or purchase URIs.
    """

    id: str
    type: str
    updated_at: Timestamp
    uri: str
    name: str
    description: str
    size: int | None = None
    compressed_size: int | None = None
    download_uri: str
    content_type: str
    content_encoding: str
