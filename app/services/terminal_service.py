"""
Terminal service - one catalog and one cart behind a scanner interface.

The cart is shared between request threads and guarded by a lock; the
catalog does its own locking.
"""

import logging
import threading
from typing import Optional

from flask import Flask, current_app

from app.models import Cart
from app.services import cart_service
from app.services.catalog_service import Catalog, seed_default_catalog

logger = logging.getLogger(__name__)


class Terminal:
    """Store terminal: scanning, pricing updates and optimized carts."""

    def __init__(self, catalog: Optional[Catalog] = None, max_rounds: Optional[int] = None):
        self.catalog = catalog if catalog is not None else Catalog()
        self.max_rounds = max_rounds
        self._cart = Cart(self.catalog)
        self._cart_lock = threading.Lock()

    def init(self) -> None:
        """Reset catalog and cart and load the default catalog."""
        self.catalog.reset()
        self.reset_cart()
        seed_default_catalog(self.catalog)
        logger.info("[TERMINAL] initialized")

    def scan(self, codes: str) -> Cart:
        """
        Scan a string of single-character product codes, one unit each.

        Codes are taken from the end of the string. Every code is looked up
        before anything is pushed, so an unknown code raises
        ProductNotFoundError and leaves the cart as it was.
        """
        products = self.catalog.fetch_products(reversed(codes.strip()))
        with self._cart_lock:
            for product in products:
                self._cart.push_product_amount(product.generate_amount(1))
                logger.debug(f"[TERMINAL] scanned {product.code}")
            return self._cart.snapshot()

    def set_pricing(self, entity, price):
        """Store a copy of ``entity`` (Product or Promotion) with a new price."""
        entity = entity.with_new_pricing(price)
        self.catalog.append(entity)
        logger.info(f"[TERMINAL] {type(entity).__name__.lower()} {entity.code} repriced to {entity.price}")
        return entity

    def apply_promotion(self, code: str) -> Cart:
        with self._cart_lock:
            cart_service.apply_promotion(self._cart, code)
            return self._cart.snapshot()

    def get_cart(self) -> Cart:
        """Optimize the cart in place and return a snapshot of it."""
        with self._cart_lock:
            cart_service.optimize_promotions(self._cart, self.max_rounds)
            return self._cart.snapshot()

    def peek_cart(self) -> Cart:
        """Snapshot of the cart without optimizing."""
        with self._cart_lock:
            return self._cart.snapshot()

    def reset_cart(self) -> None:
        with self._cart_lock:
            self._cart.reset()


def init_terminal(app: Flask) -> Terminal:
    """Create the application's terminal and seed its catalog if configured."""
    terminal = Terminal(max_rounds=app.config.get('OPTIMIZER_MAX_ROUNDS'))
    if app.config.get('SEED_CATALOG', True):
        terminal.init()
    if not hasattr(app, 'extensions'):
        app.extensions = {}
    app.extensions['terminal'] = terminal
    return terminal


def get_terminal() -> Terminal:
    """Get the current application's terminal."""
    terminal = current_app.extensions.get('terminal')
    if terminal is None:
        raise RuntimeError("Terminal not initialized.")
    return terminal
