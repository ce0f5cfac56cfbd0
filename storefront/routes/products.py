"""Product API routes for the storefront"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..core.config import settings
from ..core.session import ShoppingSession, get_session
from ..models.product import Category, FilterCriteria, PriceRange, Product, ProductPage, SortKey
from ..services.catalog import featured_products, filter_and_sort, paginate, related_products

router = APIRouter(prefix="/api/products", tags=["Products"])


@router.get("", response_model=ProductPage)
async def search_products(
    category: str = Query("all", description="Category tag or 'all'"),
    price_range: str = Query("all", description="Price range id or 'all'"),
    min_rating: float = Query(0, ge=0, le=5, description="Minimum rating"),
    search: Optional[str] = Query(None, description="Search text"),
    sort: SortKey = Query(SortKey.FEATURED, description="Sort order"),
    limit: int = Query(settings.page_size, ge=1, description="Window size"),
    session: ShoppingSession = Depends(get_session),
):
    """
    Filter and sort the catalog.

    ``limit`` is the load-more window: the UI grows it a page at a time and
    shows the load-more control while ``has_more`` is true.
    """
    criteria = FilterCriteria(
        category=category,
        price_range=price_range,
        min_rating=min_rating,
        search=search or "",
    )
    results = filter_and_sort(
        session.products.get_all_products(),
        criteria,
        sort,
        session.products.get_price_ranges(),
    )
    return paginate(results, limit)


@router.get("/categories", response_model=list[Category])
async def list_categories(session: ShoppingSession = Depends(get_session)):
    """List all product categories"""
    return session.products.get_categories()


@router.get("/price-ranges", response_model=list[PriceRange])
async def list_price_ranges(session: ShoppingSession = Depends(get_session)):
    return session.products.get_price_ranges()


@router.get("/featured", response_model=list[Product])
async def list_featured(session: ShoppingSession = Depends(get_session)):
    return featured_products(session.products.get_all_products())


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: int, session: ShoppingSession = Depends(get_session)):
    """Get a product by ID"""
    product = session.products.get_product(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.get("/{product_id}/related", response_model=list[Product])
async def get_related_products(product_id: int, session: ShoppingSession = Depends(get_session)):
    """Other products from the same category"""
    if not session.products.get_product(product_id):
        raise HTTPException(status_code=404, detail="Product not found")
    return related_products(session.products.get_all_products(), product_id)
