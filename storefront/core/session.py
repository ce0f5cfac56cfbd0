"""Shopping session: the single owner of the cart and its collaborators"""

import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request

from ..database.carts import CartStore
from ..database.orders import OrderDatabase
from ..database.preferences import PreferencesStore
from ..database.products import ProductDatabase, product_db
from ..database.storage import LocalStore
from ..services.checkout import CheckoutProcessor
from ..services.pricing import PricingConfig

logger = logging.getLogger(__name__)


@dataclass
class ShoppingSession:
    """Everything one storefront user mutates, wired to one local store"""
    products: ProductDatabase
    storage: LocalStore
    cart: CartStore
    orders: OrderDatabase
    preferences: PreferencesStore
    checkout: CheckoutProcessor
    pricing: PricingConfig


def create_session(
    storage_path: Optional[str] = None,
    products: Optional[ProductDatabase] = None,
    checkout_delay_seconds: Optional[float] = None,
) -> ShoppingSession:
    """Build a session, restoring the cart and preferences from the store"""
    products = products or product_db
    storage = LocalStore(storage_path)
    cart = CartStore(products, storage)
    orders = OrderDatabase()
    pricing = PricingConfig.from_settings()

    logger.info(f"Session created with local store at {storage_path or '<memory>'}")
    return ShoppingSession(
        products=products,
        storage=storage,
        cart=cart,
        orders=orders,
        preferences=PreferencesStore(products, storage),
        checkout=CheckoutProcessor(cart, orders, delay_seconds=checkout_delay_seconds, pricing=pricing),
        pricing=pricing,
    )


def get_session(request: Request) -> ShoppingSession:
    """FastAPI dependency returning the app's session"""
    return request.app.state.session
