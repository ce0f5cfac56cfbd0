"""Checkout models for the storefront"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from .cart import CartLineItem, CartTotals


class OrderStatus(str, Enum):
    COMPLETED = "completed"


class CheckoutField(BaseModel):
    """A single checkout form input"""
    field_id: str
    value: str = ""
    required: bool = False
    field_type: str = "text"


class FieldValidation(BaseModel):
    """Outcome of validating one field"""
    field_id: str
    valid: bool
    error: Optional[str] = None


class FormValidation(BaseModel):
    """Outcome of validating a whole form; lists every invalid field"""
    valid: bool
    errors: dict[str, str] = {}


class CheckoutRequest(BaseModel):
    """Request to checkout"""
    fields: list[CheckoutField]


class Order(BaseModel):
    """Completed (mocked) order"""
    order_id: str
    status: OrderStatus
    items: list[CartLineItem]
    totals: CartTotals
    email: Optional[str] = None
    created_at: datetime


class CheckoutResponse(BaseModel):
    """Response from checkout"""
    success: bool
    order: Optional[Order] = None
    errors: dict[str, str] = {}
    error_message: Optional[str] = None
