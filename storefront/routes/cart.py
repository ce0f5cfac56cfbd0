"""Cart API routes for the storefront"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException

from ..core.session import ShoppingSession, get_session
from ..models.cart import AddToCartRequest, CartResponse, UpdateCartItemRequest
from ..services.pricing import compute_totals

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def cart_response(session: ShoppingSession, message: Optional[str] = None) -> CartResponse:
    items = session.cart.snapshot()
    totals = compute_totals(items, session.pricing).rounded()
    return CartResponse(items=items, totals=totals, message=message)


@router.get("", response_model=CartResponse)
async def get_cart(session: ShoppingSession = Depends(get_session)):
    """Get the cart with its totals"""
    return cart_response(session)


@router.post("/items", response_model=CartResponse)
async def add_to_cart(
    request: AddToCartRequest,
    session: ShoppingSession = Depends(get_session),
):
    """Add an item to the cart"""
    added = session.cart.add(
        request.product_id,
        color=request.color,
        size=request.size,
        quantity=request.quantity,
    )
    if not added:
        raise HTTPException(status_code=404, detail="Product not found")

    return cart_response(session, message="Item added to cart!")


@router.put("/items/{index}", response_model=CartResponse)
async def update_cart_item(
    index: int,
    request: UpdateCartItemRequest,
    session: ShoppingSession = Depends(get_session),
):
    """Update item quantity in cart"""
    if not session.cart.update_quantity(index, request.quantity):
        raise HTTPException(status_code=404, detail="Item not in cart")

    return cart_response(session, message="Cart updated")


@router.delete("/items/{index}", response_model=CartResponse)
async def remove_from_cart(index: int, session: ShoppingSession = Depends(get_session)):
    """Remove an item from the cart"""
    if not session.cart.remove(index):
        raise HTTPException(status_code=404, detail="Item not in cart")

    return cart_response(session, message="Item removed")


@router.delete("", response_model=CartResponse)
async def clear_cart(session: ShoppingSession = Depends(get_session)):
    """Clear all items from cart"""
    session.cart.clear()
    return cart_response(session, message="Cart cleared")
