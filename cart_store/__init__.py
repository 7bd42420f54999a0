"""Persistent shopping cart state"""

from .core import CartContextError, CartProvider, CartStore, StorageError, use_cart
from .models import CartItem, ProductCandidate

__all__ = [
    "CartContextError",
    "CartItem",
    "CartProvider",
    "CartStore",
    "ProductCandidate",
    "StorageError",
    "use_cart",
]
