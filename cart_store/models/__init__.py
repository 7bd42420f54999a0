# Cart Store Models

from .cart import (
    CartItem,
    CartResponse,
    ProductCandidate,
    dump_snapshot,
    load_snapshot,
)

__all__ = [
    "CartItem",
    "CartResponse",
    "ProductCandidate",
    "dump_snapshot",
    "load_snapshot",
]
