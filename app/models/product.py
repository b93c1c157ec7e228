"""Product and ProductAmount models, plus quantity coalescing."""
from dataclasses import dataclass
from decimal import Decimal
from functools import total_ordering
from typing import Iterable, List

from app.exceptions import NotEnoughItemsError
from app.utils.number_format import quantize_money, to_decimal


@total_ordering
@dataclass(frozen=True, eq=False)
class Product:
    """
    A sellable product.

    Identity is the code alone: two products with the same code compare
    equal whatever their price. The price is payload captured when the
    instance was read from the catalog.
    """

    code: str
    price: Decimal

    def __post_init__(self):
        object.__setattr__(self, 'price', to_decimal(self.price))

    @property
    def identity_key(self) -> str:
        return self.code

    def __eq__(self, other):
        if not isinstance(other, Product):
            return NotImplemented
        return self.code == other.code

    def __lt__(self, other):
        if not isinstance(other, Product):
            return NotImplemented
        return self.code < other.code

    def __hash__(self):
        return hash(self.code)

    def generate_amount(self, amount) -> 'ProductAmount':
        return ProductAmount(self, amount)

    def with_new_pricing(self, price) -> 'Product':
        return Product(self.code, price)

    def to_dict(self, quantum='0.01') -> dict:
        return {'code': self.code, 'price': str(quantize_money(self.price, quantum))}


@total_ordering
@dataclass(frozen=True, eq=False)
class ProductAmount:
    """
    A quantity of a product.

    Equality, hashing and ordering follow the product code, so two entries
    for the same code are equal regardless of amount or captured price.
    Compare ``amount`` and ``unit_price`` explicitly when those matter.
    """

    product: Product
    amount: Decimal

    def __post_init__(self):
        object.__setattr__(self, 'amount', to_decimal(self.amount))

    @property
    def code(self) -> str:
        return self.product.code

    @property
    def identity_key(self) -> str:
        return self.product.identity_key

    @property
    def unit_price(self) -> Decimal:
        return self.product.price

    @property
    def total_price(self) -> Decimal:
        return self.unit_price * self.amount

    def __eq__(self, other):
        if not isinstance(other, ProductAmount):
            return NotImplemented
        return self.product == other.product

    def __lt__(self, other):
        if not isinstance(other, ProductAmount):
            return NotImplemented
        return self.product < other.product

    def __hash__(self):
        return hash(self.product)

    def increased_by(self, amount) -> 'ProductAmount':
        return ProductAmount(self.product, self.amount + to_decimal(amount))

    def decreased_by(self, amount) -> 'ProductAmount':
        amount = to_decimal(amount)
        if amount > self.amount:
            raise NotEnoughItemsError(self.code, amount, self.amount)
        return ProductAmount(self.product, self.amount - amount)

    def to_dict(self, quantum='0.01') -> dict:
        """Price quantized to ``quantum``; the amount is left as is."""
        return {'product': self.product.to_dict(quantum), 'amount': str(self.amount)}


def index_of_product(products, code: str):
    """Position of the first entry with ``code``, or None."""
    for position, product_amount in enumerate(products):
        if product_amount.identity_key == code:
            return position
    return None


def coalesce(entries: Iterable[ProductAmount]) -> List[ProductAmount]:
    """
    Group ProductAmount entries into one entry per product code.

    The input is walked from its end toward its start. The first entry met
    for a code (the one appearing last in the input) keeps its product
    instance, and with it the captured price; the others only add their
    amounts. Output follows the order in which codes are met on that walk.

    Example:
        [Foo:15, Bar:35, Foo:4, Foo:12] -> [Foo:31, Bar:35]
    """
    grouped = {}
    for entry in reversed(list(entries)):
        current = grouped.get(entry.identity_key)
        if current is None:
            grouped[entry.identity_key] = entry
        else:
            grouped[entry.identity_key] = current.increased_by(entry.amount)
    return list(grouped.values())

