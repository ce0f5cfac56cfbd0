from .pricing import PricingConfig, compute_totals, format_currency, format_shipping
from .catalog import (
    CatalogWindow,
    criteria_from_query,
    featured_products,
    filter_and_sort,
    paginate,
    related_products,
    sort_products,
)
from .validation import (
    format_card_number,
    is_valid_card_number,
    is_valid_email,
    validate_field,
    validate_form,
)
from .checkout import CheckoutProcessor

__all__ = [
    "PricingConfig",
    "compute_totals",
    "format_currency",
    "format_shipping",
    "CatalogWindow",
    "criteria_from_query",
    "featured_products",
    "filter_and_sort",
    "paginate",
    "related_products",
    "sort_products",
    "format_card_number",
    "is_valid_card_number",
    "is_valid_email",
    "validate_field",
    "validate_form",
    "CheckoutProcessor",
]
