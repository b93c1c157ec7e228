"""Cart model - ordered line items priced against a catalog."""
import copy
from decimal import Decimal
from typing import Iterable, List

from app.models.cart_item import CartItem, CartItemProduct, CartItemPromotion
from app.models.product import ProductAmount, coalesce
from app.models.promotion import Promotion
from app.utils.number_format import quantize_money


class Cart:
    """
    Shopping cart.

    Owns its line items. The total is derived from the lines on every
    access and never stored.
    """

    def __init__(self, catalog):
        self.catalog = catalog
        self.items: List[CartItem] = []

    def __repr__(self):
        return f"<Cart(items={len(self.items)}, total={self.total_price})>"

    @property
    def total_price(self) -> Decimal:
        return sum((item.total for item in self.items), Decimal('0'))

    @property
    def promotion_items(self) -> List[CartItemPromotion]:
        return [item for item in self.items if not item.is_product]

    def products(self) -> List[ProductAmount]:
        """Quantity entries of every product line, not coalesced."""
        entries = []
        for item in self.items:
            if item.is_product:
                entries.extend(item.products)
        return entries

    def flatten(self) -> List[ProductAmount]:
        """One entry per product code across all product lines."""
        return coalesce(self.products())

    def push_product(self, code: str, amount=1) -> CartItemProduct:
        product = self.catalog.fetch_product(code)
        item = CartItemProduct(product, amount)
        self.items.append(item)
        return item

    def push_product_amount(self, product_amount: ProductAmount) -> CartItemProduct:
        item = CartItemProduct(product_amount.product, product_amount.amount)
        self.items.append(item)
        return item

    def push_promotion(self, code: str, amount=1) -> CartItemPromotion:
        promotion = self.catalog.fetch_promotion(code)
        return self.push_promotion_entity(promotion, amount)

    def push_promotion_entity(self, promotion: Promotion, amount=1) -> CartItemPromotion:
        item = CartItemPromotion(promotion, amount)
        self.items.append(item)
        return item

    def remove_all_products(self) -> None:
        self.items = [item for item in self.items if not item.is_product]

    def apply_optimizer_result(self, products: Iterable[ProductAmount], promotions: Iterable[Promotion]) -> None:
        """
        Write an optimizer result back into the cart.

        Product lines are replaced by one line per remaining entry and one
        promotion line is appended per chosen promotion. Promotion lines
        already in the cart stay: the products they cover were consumed
        before this result was computed.
        """
        self.remove_all_products()
        for product_amount in products:
            self.push_product_amount(product_amount)
        for promotion in promotions:
            self.push_promotion_entity(promotion, 1)

    def reset(self) -> None:
        self.items = []

    def snapshot(self) -> 'Cart':
        """Copy sharing the catalog but not the item list."""
        clone = Cart(self.catalog)
        clone.items = copy.copy(self.items)
        return clone

    def to_dict(self, quantum: Decimal = Decimal('0.01')) -> dict:
        return {
            'items': [item.to_dict(quantum) for item in self.items],
            'total': str(quantize_money(self.total_price, quantum)),
        }
