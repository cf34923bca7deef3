"""Wallet base class (abstract).

Hosts should depend on this type, so alternative wallet stores
(filesystem/memory/db) can be swapped in without changing calling code.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from wallet.types import WalletValue


class WalletBase(ABC):
    @abstractmethod
    async def put(self, name: Optional[str], value: WalletValue) -> None:
        """Store a value under name, replacing any existing one."""
        ...

    @abstractmethod
    async def get(self, name: Optional[str]) -> WalletValue:
        """Get the value stored under name."""
        ...

    @abstractmethod
    async def remove(self, name: Optional[str]) -> None:
        """Remove name if present."""
        ...

    @abstractmethod
    async def list_names(self) -> list[str]:
        """List stored names."""
        ...

    @abstractmethod
    async def contains(self, name: Optional[str]) -> bool:
        """Check whether name is stored."""
        ...

    @abstractmethod
    async def get_all(self) -> dict[str, WalletValue]:
        """Get a name -> value snapshot of the whole wallet."""
        ...
