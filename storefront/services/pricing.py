"""
Cart pricing

Computes subtotal, tax, shipping and total from a cart snapshot. All
arithmetic is Decimal and unrounded; rounding to cents happens only when a
figure is displayed (CartTotals.rounded / format_currency).
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from ..core.config import settings
from ..models.cart import CENTS, CartLineItem, CartTotals


@dataclass(frozen=True)
class PricingConfig:
    """Tax and shipping policy"""
    tax_rate: Decimal = Decimal("0.08")
    free_shipping_threshold: Decimal = Decimal("100")
    flat_shipping_cost: Decimal = Decimal("10")

    @classmethod
    def from_settings(cls) -> "PricingConfig":
        return cls(
            tax_rate=settings.tax_rate,
            free_shipping_threshold=settings.free_shipping_threshold,
            flat_shipping_cost=settings.flat_shipping_cost,
        )


def compute_totals(
    line_items: Iterable[CartLineItem],
    config: Optional[PricingConfig] = None,
) -> CartTotals:
    """Derive order totals from line items."""
    config = config or PricingConfig.from_settings()
    items = list(line_items)

    subtotal = sum((item.line_total for item in items), Decimal("0"))
    tax = subtotal * config.tax_rate
    shipping = Decimal("0") if subtotal >= config.free_shipping_threshold else config.flat_shipping_cost

    return CartTotals(
        subtotal=subtotal,
        tax=tax,
        shipping=shipping,
        total=subtotal + tax + shipping,
        item_count=sum(item.quantity for item in items),
    )


def format_currency(amount: Decimal) -> str:
    """Render an amount as US dollars, e.g. ``$1,234.50``"""
    rounded = Decimal(amount).quantize(CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.2f}"


def format_shipping(shipping: Decimal) -> str:
    return "FREE" if shipping == 0 else format_currency(shipping)
