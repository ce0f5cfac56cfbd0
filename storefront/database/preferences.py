"""Display preferences and wishlist, kept beside the cart in the local store"""

import logging

from .products import ProductDatabase
from .storage import LocalStore

logger = logging.getLogger(__name__)

DARK_MODE_KEY = "darkMode"
WISHLIST_KEY = "wishlist"


class PreferencesStore:
    def __init__(self, product_db: ProductDatabase, storage: LocalStore):
        self.product_db = product_db
        self.storage = storage
        self._dark_mode = bool(storage.get(DARK_MODE_KEY, False))
        self._wishlist = self._load_wishlist()

    @property
    def dark_mode(self) -> bool:
        return self._dark_mode

    def toggle_dark_mode(self) -> bool:
        """Flip dark mode and return the new value"""
        self._dark_mode = not self._dark_mode
        self.storage.set(DARK_MODE_KEY, self._dark_mode)
        return self._dark_mode

    @property
    def wishlist(self) -> list[int]:
        return list(self._wishlist)

    def toggle_wishlist(self, product_id: int) -> bool:
        """Add or remove a product; returns False for unknown products"""
        if not self.product_db.get_product(product_id):
            return False

        if product_id in self._wishlist:
            self._wishlist.remove(product_id)
        else:
            self._wishlist.append(product_id)
        self.storage.set(WISHLIST_KEY, self._wishlist)
        return True

    def _load_wishlist(self) -> list[int]:
        raw = self.storage.get(WISHLIST_KEY, [])
        if not isinstance(raw, list) or not all(isinstance(i, int) for i in raw):
            logger.warning("Stored wishlist is invalid, starting with an empty wishlist")
            return []
        return list(dict.fromkeys(raw))
