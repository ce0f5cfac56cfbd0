"""Order storage for the storefront"""

import uuid
from datetime import datetime, timezone
from typing import Optional

from ..models.cart import CartLineItem, CartTotals
from ..models.checkout import Order, OrderStatus


class OrderDatabase:
    """In-memory record of mocked orders; lives only as long as the session"""

    def __init__(self):
        self.orders: dict[str, Order] = {}

    def create_order(
        self,
        items: list[CartLineItem],
        totals: CartTotals,
        email: Optional[str] = None,
    ) -> Order:
        """Create an order from a cart snapshot"""
        order = Order(
            order_id=f"ORD-{uuid.uuid4().hex[:8].upper()}",
            status=OrderStatus.COMPLETED,
            items=items,
            totals=totals,
            email=email,
            created_at=datetime.now(timezone.utc),
        )

        self.orders[order.order_id] = order
        return order

    def get_order(self, order_id: str) -> Optional[Order]:
        """Get an order by ID"""
        return self.orders.get(order_id)

    def list_orders(self, limit: int = 50) -> list[Order]:
        """List recent orders"""
        orders = list(self.orders.values())
        orders.sort(key=lambda o: o.created_at, reverse=True)
        return orders[:limit]
