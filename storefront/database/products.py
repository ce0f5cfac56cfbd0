"""Static product catalog"""

from decimal import Decimal
from typing import Optional

from ..models.product import Category, PriceRange, Product

# Product catalog, in featured (display) order
PRODUCTS: dict[int, Product] = {
    1: Product(
        id=1,
        name="Minimalist Leather Tote",
        category="Accessories",
        price=Decimal("189.00"),
        rating=4.8,
        review_count=124,
        badges=["Bestseller"],
        colors=["Black", "Cognac", "Slate"],
        sizes=["One Size"],
        description="Premium full-grain leather tote with minimalist design. Spacious interior with magnetic closure and interior pockets. Perfect for daily use or travel.",
        features=["Full-grain leather", "Magnetic closure", "Interior pockets", '15" laptop compatible'],
    ),
    2: Product(
        id=2,
        name="Cashmere Blend Sweater",
        category="Clothing",
        price=Decimal("145.00"),
        rating=4.9,
        review_count=89,
        badges=["New"],
        colors=["Cream", "Navy", "Charcoal"],
        sizes=["XS", "S", "M", "L", "XL"],
        description="Luxuriously soft cashmere blend sweater with a timeless crew neck design. Perfect weight for layering or wearing solo.",
        features=["70% cashmere, 30% wool", "Dry clean only", "Ribbed cuffs", "Classic fit"],
    ),
    3: Product(
        id=3,
        name="Wireless Minimalist Earbuds",
        category="Tech",
        price=Decimal("129.00"),
        rating=4.6,
        review_count=267,
        badges=["Bestseller"],
        colors=["White", "Black"],
        sizes=["One Size"],
        description="Premium wireless earbuds with active noise cancellation and 24-hour battery life. Sleek minimalist design meets superior sound quality.",
        features=["Active noise cancellation", "24hr battery", "IPX4 water resistant", "USB-C charging"],
    ),
    4: Product(
        id=4,
        name="Organic Cotton Duvet Cover",
        category="Home",
        price=Decimal("168.00"),
        rating=4.7,
        review_count=156,
        badges=["New"],
        colors=["White", "Sage", "Slate"],
        sizes=["Queen", "King"],
        description="Ultra-soft organic cotton duvet cover with clean, minimal design. Breathable and gets softer with every wash.",
        features=["100% organic cotton", "OEKO-TEX certified", "Hidden button closure", "Machine washable"],
    ),
    5: Product(
        id=5,
        name="Ceramic Coffee Mug Set",
        category="Home",
        price=Decimal("58.00"),
        rating=4.9,
        review_count=201,
        badges=["Bestseller"],
        colors=["Natural", "Midnight Blue"],
        sizes=["Set of 4"],
        description="Handcrafted ceramic mugs with smooth matte finish. Perfect weight and balance for your morning ritual.",
        features=["Handcrafted ceramic", "Microwave safe", "Dishwasher safe", "12oz capacity"],
    ),
    6: Product(
        id=6,
        name="Merino Wool Beanie",
        category="Accessories",
        price=Decimal("45.00"),
        rating=4.8,
        review_count=143,
        colors=["Charcoal", "Oatmeal", "Forest"],
        sizes=["One Size"],
        description="Soft merino wool beanie with classic ribbed knit. Temperature-regulating and naturally odor-resistant.",
        features=["100% merino wool", "Ribbed knit", "Temperature regulating", "One size fits most"],
    ),
    7: Product(
        id=7,
        name="Slim-Fit Oxford Shirt",
        category="Clothing",
        price=Decimal("98.00"),
        rating=4.7,
        review_count=178,
        colors=["White", "Light Blue", "Pink"],
        sizes=["S", "M", "L", "XL"],
        description="Premium cotton oxford with a modern slim fit. Versatile enough for office or weekend wear.",
        features=["100% cotton oxford", "Mother of pearl buttons", "Machine washable", "Wrinkle resistant"],
    ),
    8: Product(
        id=8,
        name="Smart Desk Lamp",
        category="Tech",
        price=Decimal("179.00"),
        rating=4.8,
        review_count=94,
        badges=["New"],
        colors=["Silver", "Black"],
        sizes=["One Size"],
        description="Sleek LED desk lamp with adjustable brightness and color temperature. USB-C charging port and minimalist touch controls.",
        features=["Adjustable brightness", "Color temperature control", "USB-C charging port", "Touch controls"],
    ),
    9: Product(
        id=9,
        name="Linen Throw Pillow",
        category="Home",
        price=Decimal("52.00"),
        rating=4.6,
        review_count=112,
        colors=["Natural", "Charcoal", "Rust"],
        sizes=["18x18", "20x20"],
        description="Pure linen throw pillow with hidden zipper. Soft, breathable, and naturally textured for effortless style.",
        features=["100% linen", "Hidden zipper", "Removable cover", "Feather insert included"],
    ),
    10: Product(
        id=10,
        name="Leather Card Wallet",
        category="Accessories",
        price=Decimal("68.00"),
        rating=4.9,
        review_count=289,
        badges=["Bestseller"],
        colors=["Black", "Tan", "Navy"],
        sizes=["One Size"],
        description="Slim leather card wallet with RFID protection. Holds 4-6 cards plus cash. Ages beautifully with use.",
        features=["Full-grain leather", "RFID protection", "Holds 4-6 cards", "Slim profile"],
    ),
    11: Product(
        id=11,
        name="Wide-Leg Trousers",
        category="Clothing",
        price=Decimal("135.00"),
        rating=4.7,
        review_count=167,
        badges=["New"],
        colors=["Black", "Navy", "Cream"],
        sizes=["XS", "S", "M", "L", "XL"],
        description="High-waisted wide-leg trousers in premium twill. Effortlessly elegant with a relaxed, flowing silhouette.",
        features=["Premium twill fabric", "High waisted", "Side zip closure", "Dry clean recommended"],
    ),
    12: Product(
        id=12,
        name="Portable Bluetooth Speaker",
        category="Tech",
        price=Decimal("149.00"),
        rating=4.8,
        review_count=203,
        colors=["Charcoal", "Sand"],
        sizes=["One Size"],
        description="Premium portable speaker with 360° sound and 12-hour battery. Waterproof design perfect for any adventure.",
        features=["360° sound", "12hr battery", "IPX7 waterproof", "Bluetooth 5.0"],
    ),
}

CATEGORIES: list[Category] = [
    Category(id="all", name="All Products", icon="grid"),
    Category(id="Accessories", name="Accessories", icon="bag"),
    Category(id="Clothing", name="Clothing", icon="shirt"),
    Category(id="Tech", name="Tech", icon="device"),
    Category(id="Home", name="Home", icon="home"),
]

PRICE_RANGES: list[PriceRange] = [
    PriceRange(id="all", label="All Prices"),
    PriceRange(id="under-50", label="Under $50", min=Decimal("0"), max=Decimal("50")),
    PriceRange(id="50-100", label="$50 - $100", min=Decimal("50"), max=Decimal("100")),
    PriceRange(id="100-150", label="$100 - $150", min=Decimal("100"), max=Decimal("150")),
    PriceRange(id="over-150", label="Over $150", min=Decimal("150")),
]

FEATURED_PRODUCT_IDS: list[int] = [1, 3, 5, 10]


class ProductDatabase:
    """Read-only product catalog"""

    def __init__(self, products: Optional[list[Product]] = None):
        if products is None:
            self.products = PRODUCTS.copy()
        else:
            self.products = {p.id: p for p in products}

    def get_product(self, product_id: int) -> Optional[Product]:
        """Get a product by ID"""
        return self.products.get(product_id)

    def get_all_products(self) -> list[Product]:
        """Get all products in catalog order"""
        return list(self.products.values())

    def get_categories(self) -> list[Category]:
        return list(CATEGORIES)

    def get_price_ranges(self) -> list[PriceRange]:
        return list(PRICE_RANGES)


# Singleton instance
product_db = ProductDatabase()
