"""Models package - exports catalog and cart entities."""
from app.models.product import Product, ProductAmount, coalesce
from app.models.promotion import Promotion
from app.models.cart_item import CartItem, CartItemKind, CartItemProduct, CartItemPromotion
from app.models.cart import Cart

__all__ = [
    # Catalog
    'Product', 'ProductAmount', 'Promotion', 'coalesce',
    # Cart
    'Cart', 'CartItem', 'CartItemKind', 'CartItemProduct', 'CartItemPromotion',
]
