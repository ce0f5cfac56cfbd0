"""Product and catalog query models"""

from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """Product in the catalog"""

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    name: str
    category: str
    price: Decimal = Field(ge=0)
    rating: float = Field(ge=0, le=5)
    review_count: int = Field(ge=0, default=0)
    colors: list[str] = Field(min_length=1)
    sizes: list[str] = Field(min_length=1)
    description: str
    features: list[str] = []
    badges: list[str] = []
    image: Optional[str] = None


class Category(BaseModel):
    """Category entry shown in the catalog navigation"""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    icon: str


class PriceRange(BaseModel):
    """Named price band; both ends inclusive, max=None is unbounded"""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    min: Decimal = Decimal("0")
    max: Optional[Decimal] = None

    def contains(self, price: Decimal) -> bool:
        if price < self.min:
            return False
        return self.max is None or price <= self.max


class SortKey(str, Enum):
    FEATURED = "featured"
    PRICE_ASC = "price-low"
    PRICE_DESC = "price-high"
    RATING_DESC = "rating"
    NAME = "name"


class FilterCriteria(BaseModel):
    """Catalog filter criteria"""

    category: str = "all"
    price_range: str = "all"
    min_rating: float = Field(default=0, ge=0, le=5)
    search: str = ""


class ProductPage(BaseModel):
    """Windowed catalog query result"""

    products: list[Product]
    total: int
    limit: int
    has_more: bool
