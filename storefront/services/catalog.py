"""
Catalog queries

Filtering, sorting and load-more windowing over the static product list.
Everything here is pure: the catalog is never modified.
"""

import locale
import logging
from typing import Iterable, Mapping, Optional

from ..core.config import settings
from ..database.products import CATEGORIES, FEATURED_PRODUCT_IDS, PRICE_RANGES
from ..models.product import FilterCriteria, PriceRange, Product, ProductPage, SortKey

logger = logging.getLogger(__name__)

ALL = "all"


def _matches(product: Product, criteria: FilterCriteria, band: Optional[PriceRange], search: str) -> bool:
    if criteria.category != ALL and product.category != criteria.category:
        return False

    if band is not None and not band.contains(product.price):
        return False

    if product.rating < criteria.min_rating:
        return False

    if search and search not in product.name.lower() and search not in product.description.lower():
        return False

    return True


def configure_collation() -> None:
    """Adopt the environment's collation order for name sorting"""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        logger.warning(f"Could not apply environment collation, names sort in codepoint order: {e}")


def _name_key(product: Product):
    return (locale.strxfrm(product.name.casefold()), product.name)


def sort_products(products: Iterable[Product], sort_key: SortKey) -> list[Product]:
    """Stable sort; ``featured`` keeps catalog order"""
    results = list(products)

    if sort_key == SortKey.PRICE_ASC:
        results.sort(key=lambda p: p.price)
    elif sort_key == SortKey.PRICE_DESC:
        results.sort(key=lambda p: p.price, reverse=True)
    elif sort_key == SortKey.RATING_DESC:
        results.sort(key=lambda p: p.rating, reverse=True)
    elif sort_key == SortKey.NAME:
        results.sort(key=_name_key)

    return results


def filter_and_sort(
    catalog: Iterable[Product],
    criteria: FilterCriteria,
    sort_key: SortKey = SortKey.FEATURED,
    price_ranges: Iterable[PriceRange] = PRICE_RANGES,
) -> list[Product]:
    """
    Filter the catalog by criteria, then sort.

    A price range id that names no known band does not filter anything.
    """
    band = None
    if criteria.price_range != ALL:
        band = next((r for r in price_ranges if r.id == criteria.price_range), None)
        if band is None:
            logger.debug(f"Unknown price range '{criteria.price_range}', not filtering by price")

    search = criteria.search.lower()
    results = [p for p in catalog if _matches(p, criteria, band, search)]
    return sort_products(results, sort_key)


def paginate(products: list[Product], limit: int) -> ProductPage:
    """Truncate a query result to the first ``limit`` entries"""
    limit = max(limit, 0)
    return ProductPage(
        products=products[:limit],
        total=len(products),
        limit=limit,
        has_more=len(products) > limit,
    )


class CatalogWindow:
    """Load-more window: starts at one page and grows a page at a time"""

    def __init__(self, page_size: Optional[int] = None):
        self.page_size = page_size or settings.page_size
        self.limit = self.page_size

    def load_more(self) -> int:
        self.limit += self.page_size
        return self.limit

    def reset(self) -> None:
        """Back to a single page; call whenever the criteria change"""
        self.limit = self.page_size

    def apply(self, products: list[Product]) -> ProductPage:
        return paginate(products, self.limit)


def criteria_from_query(params: Mapping[str, str]) -> FilterCriteria:
    """Initial criteria from page query parameters (``?category=Tech``)"""
    category = params.get("category") or ALL
    if category not in {c.id for c in CATEGORIES}:
        logger.debug(f"Ignoring unknown category '{category}' in query")
        category = ALL
    return FilterCriteria(category=category, search=params.get("search") or "")


def featured_products(catalog: Iterable[Product]) -> list[Product]:
    return [p for p in catalog if p.id in FEATURED_PRODUCT_IDS]


def related_products(catalog: Iterable[Product], product_id: int, limit: int = 4) -> list[Product]:
    """Other products in the same category, in catalog order"""
    products = list(catalog)
    current = next((p for p in products if p.id == product_id), None)
    if current is None:
        return []
    related = [p for p in products if p.id != product_id and p.category == current.category]
    return related[:limit]
