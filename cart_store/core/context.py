"""Cart provider scope and accessor"""

from contextvars import ContextVar
from typing import Optional

from ..storage.base import PersistentKeyValueStore
from .errors import CartContextError
from .store import CartStore

_current_cart: ContextVar[Optional[CartStore]] = ContextVar("current_cart", default=None)


class CartProvider:
    """
    Hydrate a cart store and make it reachable through use_cart().

    Every mutation persists on its own, so leaving the scope only
    unbinds the store.

    Usage:
        async with CartProvider(storage, settings) as store:
            await use_cart().add_to_cart(product)
    """

    def __init__(self, storage: PersistentKeyValueStore, settings=None):
        if settings is None:
            self.store = CartStore(storage)
        else:
            self.store = CartStore.from_settings(storage, settings)
        self._token = None

    async def __aenter__(self) -> CartStore:
        await self.store.hydrate()
        self._token = _current_cart.set(self.store)
        return self.store

    async def __aexit__(self, exc_type, exc, tb) -> None:
        _current_cart.reset(self._token)
        self._token = None


def use_cart() -> CartStore:
    """Return the cart bound by the enclosing CartProvider"""
    store = _current_cart.get()
    if store is None:
        raise CartContextError("use_cart")
    return store
