# Storefront Models

from .product import Product, Category, PriceRange, SortKey, FilterCriteria, ProductPage
from .cart import CartLineItem, CartTotals, AddToCartRequest, UpdateCartItemRequest, CartResponse
from .checkout import (
    Order,
    OrderStatus,
    CheckoutField,
    CheckoutRequest,
    CheckoutResponse,
    FieldValidation,
    FormValidation,
)

__all__ = [
    "Product",
    "Category",
    "PriceRange",
    "SortKey",
    "FilterCriteria",
    "ProductPage",
    "CartLineItem",
    "CartTotals",
    "AddToCartRequest",
    "UpdateCartItemRequest",
    "CartResponse",
    "Order",
    "OrderStatus",
    "CheckoutField",
    "CheckoutRequest",
    "CheckoutResponse",
    "FieldValidation",
    "FormValidation",
]
