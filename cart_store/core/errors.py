"""Cart store exceptions"""

from typing import Optional


class CartError(Exception):
    """Base class for cart store errors"""


class CartContextError(CartError):
    """Raised when the cart is reached for outside of a CartProvider"""

    def __init__(self, accessor: str = "use_cart"):
        super().__init__(f"{accessor} must be used within a CartProvider")
        self.accessor = accessor


class StorageError(CartError):
    """Raised by a key-value backend when a read or write fails"""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class CorruptStorageError(StorageError):
    """Raised when stored data exists but cannot be decoded"""
