"""Cart storage for the storefront"""

import logging
from typing import Optional

from pydantic import ValidationError

from ..core.config import settings
from ..models.cart import CartLineItem, MAX_QUANTITY, MIN_QUANTITY
from ..models.product import Product
from .products import ProductDatabase
from .storage import LocalStore

logger = logging.getLogger(__name__)

CART_KEY = "cart"


def clamp_quantity(quantity: int, maximum: int = MAX_QUANTITY) -> int:
    return min(max(quantity, MIN_QUANTITY), maximum, MAX_QUANTITY)


class CartStore:
    """Owns the cart line items and writes them through to the local store.

    Line indices handed out by ``snapshot()`` are only valid until the next
    mutation.
    """

    def __init__(
        self,
        product_db: ProductDatabase,
        storage: LocalStore,
        max_quantity: Optional[int] = None,
    ):
        self.product_db = product_db
        self.storage = storage
        self.max_quantity = settings.max_quantity if max_quantity is None else max_quantity
        self._items: list[CartLineItem] = self._load()

    def add(
        self,
        product_id: int,
        color: Optional[str] = None,
        size: Optional[str] = None,
        quantity: int = 1,
    ) -> bool:
        """Add an item, merging into an existing line with the same variant"""
        product = self.product_db.get_product(product_id)
        if not product:
            logger.warning(f"Cannot add unknown product {product_id} to cart")
            return False

        color, size = self._resolve_options(product, color, size)
        quantity = clamp_quantity(quantity, self.max_quantity)

        existing_item = next(
            (item for item in self._items if item.key == (product_id, color, size)),
            None,
        )

        if existing_item:
            # Overflow past the per-line maximum is dropped silently
            existing_item.quantity = clamp_quantity(existing_item.quantity + quantity, self.max_quantity)
        else:
            self._items.append(
                CartLineItem(
                    product_id=product.id,
                    name=product.name,
                    price=product.price,
                    color=color,
                    size=size,
                    quantity=quantity,
                    image=product.image,
                )
            )

        self._save()
        return True

    def update_quantity(self, index: int, quantity: int) -> bool:
        """Set the quantity of the line at ``index``; zero or less removes it"""
        if not self._in_range(index):
            return False

        if quantity <= 0:
            return self.remove(index)

        self._items[index].quantity = clamp_quantity(quantity, self.max_quantity)
        self._save()
        return True

    def remove(self, index: int) -> bool:
        """Remove the line at ``index``; later lines shift down by one"""
        if not self._in_range(index):
            return False

        del self._items[index]
        self._save()
        return True

    def clear(self) -> None:
        """Clear all items from cart"""
        self._items = []
        self._save()

    def snapshot(self) -> list[CartLineItem]:
        """Copy of the current line items, in insertion order"""
        return [item.model_copy(deep=True) for item in self._items]

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    @staticmethod
    def _resolve_options(
        product: Product, color: Optional[str], size: Optional[str]
    ) -> tuple[str, str]:
        """Fill in unspecified variants with the product's first listed option"""
        return (color or product.colors[0], size or product.sizes[0])

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    def _load(self) -> list[CartLineItem]:
        raw = self.storage.get(CART_KEY, [])
        if not isinstance(raw, list):
            logger.warning("Stored cart is not a list, starting with an empty cart")
            return []

        try:
            loaded = [CartLineItem.model_validate(record) for record in raw]
        except ValidationError as e:
            logger.warning(f"Stored cart is invalid, starting with an empty cart: {e}")
            return []

        # Collapse duplicate variants a hand-edited store may contain
        items: list[CartLineItem] = []
        for item in loaded:
            existing_item = next((i for i in items if i.key == item.key), None)
            if existing_item:
                existing_item.quantity = clamp_quantity(existing_item.quantity + item.quantity, self.max_quantity)
            else:
                items.append(item)

        logger.info(f"Restored cart with {len(items)} line item(s)")
        return items

    @staticmethod
    def _to_record(item: CartLineItem) -> dict:
        """Storage record with the price written as a JSON number"""
        record = item.model_dump(mode="json", by_alias=True)
        record["price"] = float(item.price)
        return record

    def _save(self) -> None:
        records = [self._to_record(item) for item in self._items]
        if not self.storage.set(CART_KEY, records):
            logger.warning("Cart could not be persisted; changes are kept for this session only")
