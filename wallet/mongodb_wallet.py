"""MongoDBWallet: wallet store backed by one MongoDB collection.

Each credential is one document ``{name, path, valueBase64 | valueString}``.
``path`` is the instance's namePrefix, so several wallets can share a
collection without seeing each other's keys.
"""

from __future__ import annotations

import asyncio
import base64
from collections.abc import Mapping
from typing import Any, Optional

from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection

from common.logger import get_logger
from wallet.base import WalletBase
from wallet.errors import (
    ConfigurationError,
    NotFoundError,
    UnknownValueTypeError,
    ValidationError,
)
from wallet.types import StoredCredential, WalletValue

DEFAULT_DATABASE = "wallet"

_MISSING = object()


class MongoDBWallet(WalletBase):
    """Wallet store persisting text and binary secrets in MongoDB."""

    def __init__(
        self,
        options: Optional[Mapping[str, Any]],
        collection: Optional[AsyncCollection] = None,
    ):
        if options is None:
            raise ConfigurationError("Need configuration")
        if not options.get("uri"):
            raise ConfigurationError("Need an URI to connect to MongoDB")
        if not options.get("collectionName"):
            raise ConfigurationError("Need a collection name for the wallet")
        if not options.get("namePrefix"):
            raise ConfigurationError("Need a namePrefix in options")

        self.mongodb_config = dict(options)
        self.name_prefix: str = options["namePrefix"]
        self.collection_name: str = options["collectionName"]
        self._client: Optional[AsyncMongoClient] = None

        if collection is not None:
            # Allow injecting a ready collection handle (shared client, tests).
            self._collection = collection
            return

        # The driver connects lazily; nothing here touches the network.
        driver_options = options.get("options") or {}
        self._client = AsyncMongoClient(options["uri"], **driver_options)
        database = self._client.get_default_database(default=DEFAULT_DATABASE)
        self._collection = database[self.collection_name]

    def _key(self, name: str) -> dict[str, str]:
        return {"name": name, "path": self.name_prefix}

    @staticmethod
    def _require_name(name: Optional[str]) -> str:
        if not name:
            raise ValidationError("Name must be specified")
        return name

    def _encode(self, name: str, value: Any) -> StoredCredential:
        card: StoredCredential = {"name": name, "path": self.name_prefix}
        if isinstance(value, (bytes, bytearray, memoryview)):
            card["valueBase64"] = base64.b64encode(bytes(value)).decode("ascii")
        elif isinstance(value, str):
            card["valueString"] = value
        else:
            raise UnknownValueTypeError("Unknown type being stored")
        return card

    @staticmethod
    def _decode(card: Mapping[str, Any]) -> WalletValue:
        if card.get("valueBase64") is not None:
            return base64.b64decode(card["valueBase64"])
        if card.get("valueString") is not None:
            return card["valueString"]
        raise UnknownValueTypeError("Unknown type being stored")

    async def put(self, name: Optional[str] = None, value: Any = None) -> None:
        """Store value under name.

        The whole document is replaced (upsert), so switching a key from
        bytes to text or back never leaves the old field behind.
        """
        name = self._require_name(name)
        card = self._encode(name, value)
        log = get_logger(__name__)
        await self._collection.replace_one(self._key(name), card, upsert=True)
        log.debug(
            "mongodb wallet: put ok name=%s path=%s binary=%s",
            name,
            self.name_prefix,
            "valueBase64" in card,
        )

    async def get(self, name: Optional[str] = None) -> WalletValue:
        """Return the stored str, or bytes for binary values."""
        name = self._require_name(name)
        card = await self._collection.find_one(self._key(name))
        if card is None:
            raise NotFoundError("The specified key does not exist")
        return self._decode(card)

    async def remove(self, name: Optional[str] = None) -> None:
        """Remove name. Removing a missing key is not an error."""
        name = self._require_name(name)
        result = await self._collection.delete_many(self._key(name))
        get_logger(__name__).debug(
            "mongodb wallet: remove name=%s path=%s deleted=%s",
            name,
            self.name_prefix,
            getattr(result, "deleted_count", None),
        )

    async def contains(self, name: Optional[str] = None) -> bool:
        name = self._require_name(name)
        card = await self._collection.find_one(self._key(name), {"_id": True})
        return card is not None

    async def list_names(self) -> list[str]:
        cursor = self._collection.find(
            {"path": self.name_prefix},
            {"_id": False, "name": True},
        )
        return [card["name"] async for card in cursor]

    async def _get_or_missing(self, name: str) -> Any:
        try:
            return await self.get(name)
        except NotFoundError:
            get_logger(__name__).debug(
                "mongodb wallet: get_all skipping name=%s removed after listing",
                name,
            )
            return _MISSING

    async def get_all(self) -> dict[str, WalletValue]:
        """Get every name and value under this prefix.

        Not atomic: keys removed between listing and fetching are skipped.
        """
        names = await self.list_names()
        values = await asyncio.gather(*(self._get_or_missing(n) for n in names))
        return {n: v for n, v in zip(names, values) if v is not _MISSING}

    async def ensure_indexes(self) -> str:
        """Create the (name, path) lookup index. Returns the index name."""
        index = await self._collection.create_index(
            [("name", ASCENDING), ("path", ASCENDING)]
        )
        get_logger(__name__).info(
            "mongodb wallet: index ready collection=%s index=%s",
            self.collection_name,
            index,
        )
        return index

    async def close(self) -> None:
        """Close the client this wallet opened (no-op for injected collections)."""
        if self._client is not None:
            await self._client.close()
            self._client = None
