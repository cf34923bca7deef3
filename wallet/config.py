"""Wallet configuration from the environment.

Env (a local .env file is honoured):
- MONGODB_WALLET_URI: connection string, e.g. mongodb://localhost:27017/wallets
- MONGODB_WALLET_COLLECTION: collection name (default: wallet)
- MONGODB_WALLET_PREFIX: namePrefix scoping this wallet's keys
- MONGODB_WALLET_TIMEOUT_MS: driver serverSelectionTimeoutMS (optional)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Optional

from dotenv import load_dotenv

from wallet.types import WalletConfig

DEFAULT_COLLECTION_NAME = "wallet"

load_dotenv()


def load_config(
    env: Optional[Mapping[str, str]] = None,
    uri: Optional[str] = None,
    collection_name: Optional[str] = None,
    name_prefix: Optional[str] = None,
) -> WalletConfig:
    """Build a WalletConfig; explicit arguments win over the environment.

    Unset values are left out, so MongoDBWallet reports which one is missing.
    """
    env = os.environ if env is None else env
    config: WalletConfig = {}

    uri = uri or env.get("MONGODB_WALLET_URI")
    if uri:
        config["uri"] = uri
    config["collectionName"] = (
        collection_name or env.get("MONGODB_WALLET_COLLECTION") or DEFAULT_COLLECTION_NAME
    )
    name_prefix = name_prefix or env.get("MONGODB_WALLET_PREFIX")
    if name_prefix:
        config["namePrefix"] = name_prefix

    options = {}
    timeout = env.get("MONGODB_WALLET_TIMEOUT_MS")
    if timeout:
        try:
            options["serverSelectionTimeoutMS"] = int(timeout)
        except ValueError:
            raise ValueError(f"MONGODB_WALLET_TIMEOUT_MS must be an integer, got {timeout!r}")
    config["options"] = options
    return config
