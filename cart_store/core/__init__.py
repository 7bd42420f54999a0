# Core modules

from .config import Settings, get_settings
from .errors import CartError, CartContextError, CorruptStorageError, StorageError
from .store import CartStore
from .context import CartProvider, use_cart

__all__ = [
    "Settings",
    "get_settings",
    "CartError",
    "CartContextError",
    "StorageError",
    "CorruptStorageError",
    "CartStore",
    "CartProvider",
    "use_cart",
]
