"""Cart API routes"""

from typing import Optional

from fastapi import APIRouter, Depends, Request

from ..core.errors import CartContextError
from ..core.store import CartStore
from ..models.cart import CartResponse, ProductCandidate

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def get_cart_store(request: Request) -> CartStore:
    """Cart store bound to the application by its lifespan"""
    store = getattr(request.app.state, "cart_store", None)
    if store is None:
        raise CartContextError("get_cart_store")
    return store


def _response(store: CartStore, message: Optional[str] = None) -> CartResponse:
    return CartResponse(
        products=list(store.products),
        total_items=store.total_items,
        message=message,
    )


@router.get("", response_model=CartResponse)
async def get_cart(store: CartStore = Depends(get_cart_store)):
    """Get the current cart"""
    return _response(store)


@router.post("/items", response_model=CartResponse)
async def add_to_cart(
    request: ProductCandidate,
    store: CartStore = Depends(get_cart_store),
):
    """Add one unit of a product to the cart"""
    await store.add_to_cart(request)
    return _response(store, message=f"Added {request.title} to cart")


@router.post("/items/{item_id}/increment", response_model=CartResponse)
async def increment_item(
    item_id: str,
    store: CartStore = Depends(get_cart_store),
):
    """Increase an item's quantity by one"""
    await store.increment(item_id)
    return _response(store)


@router.post("/items/{item_id}/decrement", response_model=CartResponse)
async def decrement_item(
    item_id: str,
    store: CartStore = Depends(get_cart_store),
):
    """Decrease an item's quantity by one, removing it at zero"""
    await store.decrement(item_id)
    return _response(store)
