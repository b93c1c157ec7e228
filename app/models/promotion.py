"""Promotion model - bundle requirement with a flat price."""
from decimal import Decimal
from typing import Iterable, List, Tuple

from app.exceptions import ProductNotFoundError
from app.models.product import ProductAmount, coalesce, index_of_product
from app.utils.number_format import quantize_money, to_decimal


class Promotion:
    """
    A bundle of product quantities sold together for a flat price.

    Requirements are coalesced at construction, so each product code
    appears once. Instances are immutable; ``with_new_pricing`` builds a
    new one. Two promotions are equal when their codes are.
    """

    __slots__ = ('_code', '_products', '_price')

    def __init__(self, code: str, products: Iterable[ProductAmount], price):
        self._code = code
        self._products: Tuple[ProductAmount, ...] = tuple(coalesce(products))
        self._price = to_decimal(price)

    @property
    def code(self) -> str:
        return self._code

    @property
    def products(self) -> List[ProductAmount]:
        return list(self._products)

    @property
    def price(self) -> Decimal:
        return self._price

    @property
    def regular_price(self) -> Decimal:
        """What the required products cost without the promotion."""
        return sum((p.total_price for p in self._products), Decimal('0'))

    def __eq__(self, other):
        if not isinstance(other, Promotion):
            return NotImplemented
        return self._code == other._code

    def __hash__(self):
        return hash(self._code)

    def __repr__(self):
        requirements = ', '.join(f"{p.code}x{p.amount}" for p in self._products)
        return f"<Promotion(code='{self._code}', products=[{requirements}], price={self._price})>"

    def is_satisfied_by(self, products: Iterable[ProductAmount]) -> bool:
        """
        Check whether every requirement is covered by ``products``.

        ``products`` is expected to be coalesced; for each requirement the
        first entry with a matching code decides. A promotion without
        requirements is always satisfied.
        """
        products = list(products)
        for required in self._products:
            position = index_of_product(products, required.identity_key)
            if position is None or products[position].amount < required.amount:
                return False
        return True

    def consume(self, products: Iterable[ProductAmount]) -> List[ProductAmount]:
        """
        Subtract the requirements from a copy of ``products``.

        Entries left at exactly zero are dropped; the rest keep their
        relative order. The input is never modified.

        Raises:
            ProductNotFoundError: a required code is absent from ``products``.
            NotEnoughItemsError: a requirement exceeds the available amount.
        """
        remaining = list(products)
        for required in self._products:
            position = index_of_product(remaining, required.identity_key)
            if position is None:
                raise ProductNotFoundError(required.code)
            remaining[position] = remaining[position].decreased_by(required.amount)

        return [p for p in remaining if p.amount != 0]

    def with_new_pricing(self, price) -> 'Promotion':
        return Promotion(self._code, self._products, price)

    def to_dict(self, quantum='0.01') -> dict:
        return {
            'code': self._code,
            'products': [p.to_dict(quantum) for p in self._products],
            'price': str(quantize_money(self._price, quantum)),
        }
