"""Cart state and its write-through persistence"""

import asyncio
import logging
from typing import Optional, Union

from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential_jitter,
)

from ..models.cart import CartItem, ProductCandidate, dump_snapshot, load_snapshot
from ..storage.base import PersistentKeyValueStore
from .errors import StorageError

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "@Cart"


class CartStore:
    """
    In-memory cart with write-through persistence.

    The store owns the line items for the lifetime of the process and
    mirrors them to a key-value store after every mutation. Each mutation
    builds a new tuple of items and swaps it in before the first await,
    so a call issued while an earlier write is still pending always sees
    the earlier result. Snapshots are written one at a time in call order.

    Usage:
        store = CartStore(FileKeyValueStore("cart.json"))
        await store.hydrate()
        await store.add_to_cart({"id": "A", "title": "T", "image_url": "u", "price": 10})
        await store.decrement("A")
    """

    def __init__(
        self,
        storage: PersistentKeyValueStore,
        storage_key: str = DEFAULT_STORAGE_KEY,
        persist_max_attempts: int = 3,
        persist_backoff_initial: float = 0.1,
        persist_backoff_max: float = 2.0,
    ):
        self.storage = storage
        self.storage_key = storage_key
        self.persist_max_attempts = persist_max_attempts
        self.persist_backoff_initial = persist_backoff_initial
        self.persist_backoff_max = persist_backoff_max
        self._products: tuple[CartItem, ...] = ()
        self._write_lock = asyncio.Lock()

    @classmethod
    def from_settings(cls, storage: PersistentKeyValueStore, settings) -> "CartStore":
        """Create a store configured from application settings"""
        return cls(
            storage,
            storage_key=settings.storage_key,
            persist_max_attempts=settings.persist_max_attempts,
            persist_backoff_initial=settings.persist_backoff_initial,
            persist_backoff_max=settings.persist_backoff_max,
        )

    @property
    def products(self) -> tuple[CartItem, ...]:
        """Current line items (read-only)"""
        return self._products

    @property
    def total_items(self) -> int:
        """Number of units across all line items"""
        return sum(item.quantity for item in self._products)

    async def hydrate(self) -> None:
        """
        Load the saved snapshot, replacing the in-memory items.

        Stored records are taken as written. A missing or unreadable snapshot
        leaves the cart empty; a snapshot that cannot be decoded is also
        removed from storage. Never raises.
        """
        try:
            raw = await self.storage.get(self.storage_key)
        except StorageError as e:
            logger.error(f"Failed to read cart snapshot {self.storage_key!r}: {e}")
            self._products = ()
            return

        if not raw:
            logger.info(f"No saved cart under {self.storage_key!r}")
            self._products = ()
            return

        try:
            products = load_snapshot(raw)
        except ValueError as e:
            logger.warning(f"Corrupted cart snapshot under {self.storage_key!r}: {e}")
            self._products = ()
            await self._discard_snapshot()
            return

        self._products = products
        logger.info(f"Hydrated cart with {len(products)} line items")

    async def add_to_cart(self, candidate: Union[ProductCandidate, dict]) -> None:
        """Add one unit of a product, merging with an existing line by id"""
        if not isinstance(candidate, ProductCandidate):
            candidate = ProductCandidate.model_validate(candidate)

        index = self._index_of(candidate.id)
        if index is None:
            products = self._products + (CartItem.from_candidate(candidate),)
        else:
            # Repeat adds keep the stored title, image and price
            existing = self._products[index]
            products = self._replace(index, existing.with_quantity(existing.quantity + 1))

        await self._commit(products)

    async def increment(self, item_id: str) -> None:
        """Add one unit to an existing line; unknown ids are ignored"""
        index = self._index_of(item_id)
        products = self._products
        if index is not None:
            existing = products[index]
            products = self._replace(index, existing.with_quantity(existing.quantity + 1))

        await self._commit(products)

    async def decrement(self, item_id: str) -> None:
        """Remove one unit from a line, dropping the line at zero; unknown ids are ignored"""
        index = self._index_of(item_id)
        products = self._products
        if index is not None:
            existing = products[index]
            if existing.quantity - 1 > 0:
                products = self._replace(index, existing.with_quantity(existing.quantity - 1))
            else:
                products = products[:index] + products[index + 1:]

        await self._commit(products)

    def _index_of(self, item_id: str) -> Optional[int]:
        return next(
            (i for i, item in enumerate(self._products) if item.id == item_id),
            None,
        )

    def _replace(self, index: int, item: CartItem) -> tuple[CartItem, ...]:
        return self._products[:index] + (item,) + self._products[index + 1:]

    async def _commit(self, products: tuple[CartItem, ...]) -> None:
        # Memory is updated before suspending; only the write is deferred
        self._products = products
        await self._persist(dump_snapshot(products))

    async def _persist(self, snapshot: str) -> None:
        async with self._write_lock:
            try:
                async for attempt in self._retrying():
                    with attempt:
                        await self.storage.set(self.storage_key, snapshot)
            except StorageError as e:
                logger.error(
                    f"Failed to persist cart after {self.persist_max_attempts} attempts, "
                    f"keeping in-memory state: {e}"
                )

    async def _discard_snapshot(self) -> None:
        try:
            await self.storage.remove(self.storage_key)
        except StorageError as e:
            logger.error(f"Failed to remove corrupted cart snapshot: {e}")

    def _retrying(self) -> AsyncRetrying:
        return AsyncRetrying(
            retry=retry_if_exception_type(StorageError),
            stop=stop_after_attempt(self.persist_max_attempts),
            wait=wait_exponential_jitter(
                initial=self.persist_backoff_initial,
                max=self.persist_backoff_max,
                jitter=self.persist_backoff_initial,
            ),
            reraise=True,
        )
