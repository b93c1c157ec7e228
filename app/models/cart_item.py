"""Cart line items - product lines and promotion lines."""
import enum
import uuid
from decimal import Decimal
from typing import List

from app.models.product import Product, ProductAmount
from app.models.promotion import Promotion
from app.utils.number_format import quantize_money, to_decimal


class CartItemKind(str, enum.Enum):
    """Cart line variant."""
    PRODUCT = 'product'
    PROMOTION = 'promotion'


class CartItem:
    """
    Base for cart lines. Not used directly: subclasses set ``kind`` and
    implement ``code``, ``products``, ``amount``, ``price`` and
    ``regular_price``, which raise NotImplementedError here.

    ``amount`` is the repetition (quantity for product lines, number of
    bundles for promotion lines), ``price`` the charged unit price and
    ``regular_price`` what one repetition costs without discount.
    """

    kind: CartItemKind

    def __init__(self):
        self.id = uuid.uuid4()

    @property
    def is_product(self) -> bool:
        return self.kind is CartItemKind.PRODUCT

    @property
    def code(self) -> str:
        raise NotImplementedError

    @property
    def products(self) -> List[ProductAmount]:
        raise NotImplementedError

    @property
    def amount(self) -> Decimal:
        raise NotImplementedError

    @property
    def price(self) -> Decimal:
        raise NotImplementedError

    @property
    def regular_price(self) -> Decimal:
        raise NotImplementedError

    @property
    def total(self) -> Decimal:
        return self.amount * self.price

    @property
    def discount(self) -> Decimal:
        return self.amount * self.regular_price - self.total

    def to_dict(self, quantum='0.01') -> dict:
        """Money fields quantized to ``quantum``; the amount is left as is."""
        return {
            'id': str(self.id),
            'kind': self.kind.value,
            'code': self.code,
            'amount': str(self.amount),
            'price': str(quantize_money(self.price, quantum)),
            'total': str(quantize_money(self.total, quantum)),
            'discount': str(quantize_money(self.discount, quantum)),
            'products': [p.to_dict(quantum) for p in self.products],
        }


class CartItemProduct(CartItem):
    """A quantity of a single product."""

    kind = CartItemKind.PRODUCT

    def __init__(self, product: Product, amount):
        super().__init__()
        self.product_amount = ProductAmount(product, amount)

    def __repr__(self):
        return f"<CartItemProduct(code='{self.code}', amount={self.amount}, price={self.price})>"

    @property
    def code(self) -> str:
        return self.product_amount.code

    @property
    def products(self) -> List[ProductAmount]:
        return [self.product_amount]

    @property
    def amount(self) -> Decimal:
        return self.product_amount.amount

    @property
    def price(self) -> Decimal:
        return self.product_amount.unit_price

    @property
    def regular_price(self) -> Decimal:
        return self.product_amount.unit_price


class CartItemPromotion(CartItem):
    """A promotion bundle applied ``amount`` times."""

    kind = CartItemKind.PROMOTION

    def __init__(self, promotion: Promotion, amount=1):
        super().__init__()
        self.promotion = promotion
        self._amount = to_decimal(amount)

    def __repr__(self):
        return f"<CartItemPromotion(code='{self.code}', amount={self.amount}, price={self.price})>"

    @property
    def code(self) -> str:
        return self.promotion.code

    @property
    def products(self) -> List[ProductAmount]:
        return self.promotion.products

    @property
    def amount(self) -> Decimal:
        return self._amount

    @property
    def price(self) -> Decimal:
        return self.promotion.price

    @property
    def regular_price(self) -> Decimal:
        return self.promotion.regular_price
