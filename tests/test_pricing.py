"""Tests for order totals and currency display."""

from decimal import Decimal

import pytest

from storefront.models.cart import CartLineItem
from storefront.services.pricing import (
    PricingConfig,
    compute_totals,
    format_currency,
    format_shipping,
)


def line(price, quantity, product_id=1, color=None):
    return CartLineItem(
        product_id=product_id,
        name=f"Product {product_id}",
        price=Decimal(price),
        color=color,
        quantity=quantity,
    )


class TestComputeTotals:
    def test_free_shipping_at_threshold(self):
        totals = compute_totals([line("50.00", 2)])

        assert totals.subtotal == Decimal("100.00")
        assert totals.tax == Decimal("8.00")
        assert totals.shipping == Decimal("0")
        assert totals.total == Decimal("108.00")
        assert totals.item_count == 2
        assert totals.free_shipping

    def test_flat_shipping_below_threshold(self):
        totals = compute_totals([line("30.00", 1)])

        assert totals.subtotal == Decimal("30.00")
        assert totals.tax == Decimal("2.40")
        assert totals.shipping == Decimal("10")
        assert totals.total == Decimal("42.40")

    def test_sums_multiple_lines(self):
        totals = compute_totals([
            line("189.00", 1, product_id=1),
            line("45.00", 3, product_id=6),
            line("58.00", 2, product_id=5),
        ])

        assert totals.subtotal == Decimal("440.00")
        assert totals.item_count == 6

    def test_empty_cart_still_charges_flat_shipping(self):
        totals = compute_totals([])

        assert totals.subtotal == 0
        assert totals.shipping == Decimal("10")
        assert totals.total == Decimal("10")
        assert totals.item_count == 0

    def test_no_intermediate_rounding(self):
        # 3 x 0.35 = 1.05 subtotal, tax 0.084 stays unrounded
        totals = compute_totals([line("0.35", 3)])

        assert totals.tax == Decimal("0.0840")
        assert totals.total == Decimal("11.1340")
        assert totals.rounded().total == Decimal("11.13")

    def test_custom_config(self):
        config = PricingConfig(
            tax_rate=Decimal("0.10"),
            free_shipping_threshold=Decimal("50"),
            flat_shipping_cost=Decimal("5"),
        )
        totals = compute_totals([line("40.00", 1)], config)

        assert totals.tax == Decimal("4.00")
        assert totals.shipping == Decimal("5")
        assert totals.total == Decimal("49.00")

        assert compute_totals([line("50.00", 1)], config).shipping == 0


class TestRounding:
    def test_rounded_quantizes_to_cents(self):
        rounded = compute_totals([line("19.99", 3)]).rounded()

        assert rounded.subtotal == Decimal("59.97")
        assert str(rounded.tax) == "4.80"
        assert str(rounded.shipping) == "10.00"
        assert rounded.total == Decimal("74.77")

    @pytest.mark.parametrize(
        "amount, expected",
        [
            (Decimal("0"), "$0.00"),
            (Decimal("42.4"), "$42.40"),
            (Decimal("1234.5"), "$1,234.50"),
            (Decimal("0.005"), "$0.01"),
            (Decimal("-3.2"), "-$3.20"),
        ],
    )
    def test_format_currency(self, amount, expected):
        assert format_currency(amount) == expected

    def test_format_shipping(self):
        assert format_shipping(Decimal("0")) == "FREE"
        assert format_shipping(Decimal("10")) == "$10.00"
