"""Cart models for the cart store"""

import json
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, TypeAdapter


class ProductCandidate(BaseModel):
    """Product descriptor offered to the cart, without a quantity"""
    id: str
    title: str
    image_url: str = Field(validation_alias=AliasChoices("image_url", "imageUrl"))
    price: float = Field(ge=0)


class CartItem(BaseModel):
    """Line item in the cart"""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    image_url: str = Field(validation_alias=AliasChoices("image_url", "imageUrl"))
    price: float = Field(ge=0)
    quantity: int = Field(ge=1)

    @classmethod
    def from_candidate(cls, candidate: ProductCandidate) -> "CartItem":
        """Create a line item with a quantity of one"""
        return cls(
            id=candidate.id,
            title=candidate.title,
            image_url=candidate.image_url,
            price=candidate.price,
            quantity=1,
        )

    def with_quantity(self, quantity: int) -> "CartItem":
        """Copy of this item carrying a different quantity"""
        return self.model_copy(update={"quantity": quantity})


# Snapshot codec: a JSON array of line items
snapshot_adapter = TypeAdapter(list[CartItem])


def dump_snapshot(items) -> str:
    """Serialize line items to the snapshot format"""
    return snapshot_adapter.dump_json(list(items)).decode()


def load_snapshot(raw: str) -> tuple[CartItem, ...]:
    """
    Decode a snapshot without re-checking item constraints.

    Stored records are trusted as written. Raises ValueError only when the
    text is not JSON or not a list of objects.
    """
    records = json.loads(raw)
    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise ValueError("snapshot is not a list of objects")
    return tuple(_construct_item(record) for record in records)


def _construct_item(record: dict) -> CartItem:
    if "image_url" not in record and "imageUrl" in record:
        record = {**record, "image_url": record["imageUrl"]}
    return CartItem.model_construct(
        **{name: record.get(name) for name in CartItem.model_fields}
    )


class CartResponse(BaseModel):
    """Cart API response"""
    products: list[CartItem]
    total_items: int = 0
    message: Optional[str] = None
