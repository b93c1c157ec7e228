"""
In-memory catalog of products and promotions.

Both maps are keyed by code and guarded by their own lock; every lookup
or insert takes the lock for that single operation only. Callers get
point-in-time snapshots, so a long computation (such as an optimizer run)
can observe entries added or replaced between two of its queries.
"""

import logging
import threading
from decimal import Decimal
from typing import Dict, Iterable, List

from app.exceptions import BusinessLogicError, ProductNotFoundError, PromotionNotFoundError
from app.models import Product, ProductAmount, Promotion

logger = logging.getLogger(__name__)


class Catalog:
    """Thread-safe code -> entity store."""

    def __init__(self):
        self._products: Dict[str, Product] = {}
        self._promotions: Dict[str, Promotion] = {}
        self._products_lock = threading.Lock()
        self._promotions_lock = threading.Lock()

    def append(self, entity) -> None:
        """Insert or replace a Product or Promotion by its code."""
        if isinstance(entity, Product):
            with self._products_lock:
                self._products[entity.code] = entity
            logger.debug(f"[CATALOG] product {entity.code} = {entity.price}")
        elif isinstance(entity, Promotion):
            with self._promotions_lock:
                self._promotions[entity.code] = entity
            logger.debug(f"[CATALOG] promotion {entity.code} = {entity.price}")
        else:
            raise BusinessLogicError(f"Cannot store {type(entity).__name__} in the catalog")

    def fetch_product(self, code: str) -> Product:
        with self._products_lock:
            product = self._products.get(code)
        if product is None:
            raise ProductNotFoundError(code)
        return product

    def fetch_promotion(self, code: str) -> Promotion:
        with self._promotions_lock:
            promotion = self._promotions.get(code)
        if promotion is None:
            raise PromotionNotFoundError(code)
        return promotion

    def fetch_products(self, codes: Iterable[str]) -> List[Product]:
        return [self.fetch_product(code) for code in codes]

    def code_to_product_amount(self, code: str, amount) -> ProductAmount:
        return ProductAmount(self.fetch_product(code), amount)

    def fetch_possible_promotions(self, products: Iterable[ProductAmount], maximum_price=None) -> List[Promotion]:
        """
        Promotions cheaper than ``maximum_price`` whose requirements are
        covered by ``products``.

        Without a maximum price every satisfied promotion is returned.
        Order follows insertion order of the promotion map.
        """
        products = list(products)
        with self._promotions_lock:
            promotions = list(self._promotions.values())

        return [
            promotion for promotion in promotions
            if (maximum_price is None or promotion.price < maximum_price)
            and promotion.is_satisfied_by(products)
        ]

    def products(self) -> List[Product]:
        with self._products_lock:
            return sorted(self._products.values())

    def promotions(self) -> List[Promotion]:
        with self._promotions_lock:
            return sorted(self._promotions.values(), key=lambda p: p.code)

    def reset(self) -> None:
        with self._products_lock:
            self._products.clear()
        with self._promotions_lock:
            self._promotions.clear()
        logger.info("[CATALOG] reset")

    def to_dict(self, quantum='0.01') -> dict:
        return {
            'products': [p.to_dict(quantum) for p in self.products()],
            'promotions': [p.to_dict(quantum) for p in self.promotions()],
        }


DEFAULT_PRODUCTS = (
    ('A', Decimal('2.00')),
    ('B', Decimal('12.00')),
    ('C', Decimal('1.25')),
    ('D', Decimal('0.15')),
)

DEFAULT_PROMOTIONS = (
    # code, [(product code, amount)], price
    ('PA', [('A', 4)], Decimal('7.00')),
    ('PC', [('C', 6)], Decimal('6.00')),
)


def seed_default_catalog(catalog: Catalog) -> None:
    """Load the default products and promotions into ``catalog``."""
    for code, price in DEFAULT_PRODUCTS:
        catalog.append(Product(code, price))

    for code, requirements, price in DEFAULT_PROMOTIONS:
        products = [catalog.code_to_product_amount(c, amount) for c, amount in requirements]
        catalog.append(Promotion(code, products, price))

    logger.info(
        f"[CATALOG] seeded {len(DEFAULT_PRODUCTS)} products, {len(DEFAULT_PROMOTIONS)} promotions"
    )
