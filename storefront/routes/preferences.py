"""Preference API routes: dark mode and wishlist"""

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from ..core.session import ShoppingSession, get_session

router = APIRouter(prefix="/api/preferences", tags=["Preferences"])


class DarkModeResponse(BaseModel):
    dark_mode: bool


class WishlistResponse(BaseModel):
    product_ids: list[int]


@router.get("/dark-mode", response_model=DarkModeResponse)
async def get_dark_mode(session: ShoppingSession = Depends(get_session)):
    return DarkModeResponse(dark_mode=session.preferences.dark_mode)


@router.post("/dark-mode", response_model=DarkModeResponse)
async def toggle_dark_mode(session: ShoppingSession = Depends(get_session)):
    return DarkModeResponse(dark_mode=session.preferences.toggle_dark_mode())


@router.get("/wishlist", response_model=WishlistResponse)
async def get_wishlist(session: ShoppingSession = Depends(get_session)):
    return WishlistResponse(product_ids=session.preferences.wishlist)


@router.post("/wishlist/{product_id}", response_model=WishlistResponse)
async def toggle_wishlist(product_id: int, session: ShoppingSession = Depends(get_session)):
    """Add the product to the wishlist, or remove it if already there"""
    if not session.preferences.toggle_wishlist(product_id):
        raise HTTPException(status_code=404, detail="Product not found")
    return WishlistResponse(product_ids=session.preferences.wishlist)
