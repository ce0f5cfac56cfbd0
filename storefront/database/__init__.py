# Database modules

from .products import product_db, ProductDatabase, PRODUCTS, CATEGORIES, PRICE_RANGES, FEATURED_PRODUCT_IDS
from .storage import LocalStore
from .carts import CartStore
from .orders import OrderDatabase
from .preferences import PreferencesStore

__all__ = [
    "product_db",
    "ProductDatabase",
    "PRODUCTS",
    "CATEGORIES",
    "PRICE_RANGES",
    "FEATURED_PRODUCT_IDS",
    "LocalStore",
    "CartStore",
    "OrderDatabase",
    "PreferencesStore",
]
