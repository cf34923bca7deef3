from collections.abc import Mapping
from typing import Any, Optional

from wallet.base import WalletBase
from wallet.config import load_config
from wallet.errors import (
    ConfigurationError,
    NotFoundError,
    StoreUnavailableError,
    UnknownValueTypeError,
    ValidationError,
    WalletError,
)
from wallet.mongodb_wallet import MongoDBWallet
from wallet.types import StoredCredential, WalletConfig, WalletValue


def get_store(config: Optional[Mapping[str, Any]]) -> MongoDBWallet:
    """Entry point for hosts: build a wallet store from a config mapping."""
    return MongoDBWallet(config)


__all__ = [
    "WalletBase",
    "MongoDBWallet",
    "get_store",
    "load_config",
    "WalletConfig",
    "WalletValue",
    "StoredCredential",
    "WalletError",
    "ConfigurationError",
    "ValidationError",
    "NotFoundError",
    "UnknownValueTypeError",
    "StoreUnavailableError",
]
