"""
Mocked checkout

Validates the checkout form, simulates payment processing with a fixed
delay, records the order and empties the cart. No payment provider is
contacted.
"""

import asyncio
import logging
from typing import Iterable, Optional

from ..core.config import settings
from ..database.carts import CartStore
from ..database.orders import OrderDatabase
from ..models.cart import CartLineItem
from ..models.checkout import CheckoutField, CheckoutResponse, Order
from .pricing import PricingConfig, compute_totals, format_currency
from .validation import validate_form

logger = logging.getLogger(__name__)

IN_PROGRESS_MESSAGE = "Checkout is already being processed"
EMPTY_CART_MESSAGE = "Cart is empty"
INVALID_FORM_MESSAGE = "Please correct the highlighted fields"


class CheckoutProcessor:
    """Runs one checkout at a time for a cart."""

    def __init__(
        self,
        cart: CartStore,
        orders: OrderDatabase,
        delay_seconds: Optional[float] = None,
        pricing: Optional[PricingConfig] = None,
    ):
        self.cart = cart
        self.orders = orders
        self.delay_seconds = settings.checkout_delay_seconds if delay_seconds is None else delay_seconds
        self.pricing = pricing
        self._in_progress = False

    @property
    def in_progress(self) -> bool:
        """True while a submission is processing; the submit control stays disabled"""
        return self._in_progress

    async def process(self, fields: Iterable[CheckoutField]) -> CheckoutResponse:
        if self._in_progress:
            logger.warning("Duplicate checkout submission ignored")
            return CheckoutResponse(success=False, error_message=IN_PROGRESS_MESSAGE)

        fields = list(fields)
        items = self.cart.snapshot()
        if not items:
            return CheckoutResponse(success=False, error_message=EMPTY_CART_MESSAGE)

        validation = validate_form(fields)
        if not validation.valid:
            return CheckoutResponse(
                success=False,
                errors=validation.errors,
                error_message=INVALID_FORM_MESSAGE,
            )

        self._in_progress = True
        completion = asyncio.ensure_future(self._complete(items, fields))
        completion.add_done_callback(self._finish)

        # Cancelling the caller leaves the completion task running to the end
        order = await asyncio.shield(completion)
        return CheckoutResponse(success=True, order=order)

    async def _complete(self, items: list[CartLineItem], fields: list[CheckoutField]) -> Order:
        """Simulated payment delay, then record the order and empty the cart"""
        await asyncio.sleep(self.delay_seconds)

        totals = compute_totals(items, self.pricing)
        email = next(
            (f.value.strip() for f in fields if f.field_type == "email" and f.value.strip()),
            None,
        )
        order = self.orders.create_order(items=items, totals=totals, email=email)
        self.cart.clear()

        logger.info(
            f"Order {order.order_id} created: {format_currency(totals.total)} "
            f"for {totals.item_count} item(s)"
        )
        return order

    def _finish(self, completion: "asyncio.Future[Order]") -> None:
        self._in_progress = False
        if not completion.cancelled() and completion.exception() is not None:
            logger.error(f"Checkout failed: {completion.exception()}")
