"""Central level-based logger (standard library `logging`).

Env:
- LOG_LEVEL: DEBUG|INFO|WARNING|ERROR|CRITICAL (default: INFO)
"""

from __future__ import annotations

import logging
import os
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def _level_from_env() -> int:
    raw = (os.getenv("LOG_LEVEL") or "INFO").upper().strip()
    return getattr(logging, raw, logging.INFO)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Get a logger, configuring the root logger on first use.

    Later calls only re-apply LOG_LEVEL, so a changed env takes effect.
    """
    level = _level_from_env()
    root = logging.getLogger()
    if not getattr(root, "_mongodb_wallet_configured", False):
        logging.basicConfig(level=level, format=LOG_FORMAT)
        setattr(root, "_mongodb_wallet_configured", True)
    root.setLevel(level)
    return logging.getLogger(name or "mongodb_wallet")
