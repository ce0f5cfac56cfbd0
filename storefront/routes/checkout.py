"""Checkout API routes for the storefront"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..core.session import ShoppingSession, get_session
from ..models.checkout import (
    CheckoutField,
    CheckoutRequest,
    CheckoutResponse,
    FieldValidation,
    Order,
)
from ..services.validation import validate_field

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/checkout", tags=["Checkout"])


@router.post("/validate-field", response_model=FieldValidation)
async def check_field(field: CheckoutField):
    """Validate a single input as the user leaves it"""
    return validate_field(field.field_id, field.value, field.required, field.field_type)


@router.post("", response_model=CheckoutResponse)
async def checkout(
    request: CheckoutRequest,
    session: ShoppingSession = Depends(get_session),
):
    """
    Process checkout.

    Form errors come back as values on a ``success=false`` response. A
    submission made while another one is still processing is rejected with
    409 and changes nothing.
    """
    if session.checkout.in_progress:
        raise HTTPException(status_code=409, detail="Checkout already in progress")

    response = await session.checkout.process(request.fields)
    if not response.success:
        logger.info(f"Checkout rejected: {response.error_message}")
    return response


@router.get("/orders/{order_id}", response_model=Order)
async def get_order(order_id: str, session: ShoppingSession = Depends(get_session)):
    """Get order details"""
    order = session.orders.get_order(order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.get("/orders", response_model=list[Order])
async def list_orders(limit: int = 50, session: ShoppingSession = Depends(get_session)):
    """List this session's orders"""
    return session.orders.list_orders(limit=limit)
