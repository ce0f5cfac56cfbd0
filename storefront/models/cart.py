"""Cart models for the storefront"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

CENTS = Decimal("0.01")

MIN_QUANTITY = 1
MAX_QUANTITY = 99


class CartLineItem(BaseModel):
    """Item in the shopping cart.

    Name and price are snapshots taken when the item was added; they do not
    follow later catalog changes. Serialized under the storage field names
    (``id`` for the product id).
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    product_id: int = Field(alias="id", gt=0)
    name: str
    price: Decimal = Field(ge=0)
    color: Optional[str] = None
    size: Optional[str] = None
    quantity: int = Field(ge=MIN_QUANTITY, le=MAX_QUANTITY)
    image: Optional[str] = None

    @property
    def key(self) -> tuple[int, Optional[str], Optional[str]]:
        """Identity used to merge repeated adds"""
        return (self.product_id, self.color, self.size)

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


class CartTotals(BaseModel):
    """Totals derived from a cart snapshot; never stored"""

    subtotal: Decimal
    tax: Decimal
    shipping: Decimal
    total: Decimal
    item_count: int

    @property
    def free_shipping(self) -> bool:
        return self.shipping == 0

    def rounded(self) -> "CartTotals":
        """Copy with every monetary figure quantized to cents for display"""
        return CartTotals(
            subtotal=self.subtotal.quantize(CENTS, rounding=ROUND_HALF_UP),
            tax=self.tax.quantize(CENTS, rounding=ROUND_HALF_UP),
            shipping=self.shipping.quantize(CENTS, rounding=ROUND_HALF_UP),
            total=self.total.quantize(CENTS, rounding=ROUND_HALF_UP),
            item_count=self.item_count,
        )


class AddToCartRequest(BaseModel):
    """Request to add item to cart"""
    product_id: int
    color: Optional[str] = None
    size: Optional[str] = None
    quantity: int = 1


class UpdateCartItemRequest(BaseModel):
    """Request to update cart item quantity; zero or less removes the item"""
    quantity: int


class CartResponse(BaseModel):
    """Cart API response"""
    items: list[CartLineItem]
    totals: CartTotals
    message: Optional[str] = None
