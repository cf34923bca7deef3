"""Error kinds raised by wallet stores.

Driver failures (connection refused, server selection timeout, ...) are not
wrapped: they surface as ``pymongo.errors.PyMongoError`` subclasses, exported
here as ``StoreUnavailableError`` so callers can catch them by kind.
"""

from pymongo.errors import PyMongoError

StoreUnavailableError = PyMongoError


class WalletError(Exception):
    """Base class for errors raised by the wallet itself."""


class ConfigurationError(WalletError, ValueError):
    """Missing or invalid construction options."""


class ValidationError(WalletError, ValueError):
    """Missing required call argument."""


class NotFoundError(WalletError, LookupError):
    """The requested key is not in the wallet."""


class UnknownValueTypeError(WalletError, TypeError):
    """Value is neither text nor bytes (or a stored document holds neither)."""
