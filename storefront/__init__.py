"""Storefront catalog, cart and checkout"""

__version__ = "1.0.0"
