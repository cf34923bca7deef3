"""Common types for wallet stores."""
from typing import Any, Optional, TypedDict, Union

# A stored secret is either text or raw bytes; nothing else round-trips.
WalletValue = Union[str, bytes]


class WalletConfig(TypedDict, total=False):
    """Construction options for a MongoDB-backed wallet."""
    uri: str
    collectionName: str
    namePrefix: str
    options: dict[str, Any]


class StoredCredential(TypedDict, total=False):
    """Persisted document, one per (name, path)."""
    name: str
    path: str
    valueBase64: Optional[str]
    valueString: Optional[str]
