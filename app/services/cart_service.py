"""Cart service - optimization and manual promotion application."""

import logging
from typing import Optional

from app.models import Cart
from app.services.optimizer_service import Optimizer

logger = logging.getLogger(__name__)


def optimize_promotions(cart: Cart, max_rounds: Optional[int] = None) -> Cart:
    """
    Rebuild the cart's product lines around the cheapest promotion mix found.

    Any error from the catalog or the optimizer propagates before the cart
    is touched.
    """
    products = cart.flatten()
    products, promotions = Optimizer.run(products, cart.catalog, max_rounds)
    cart.apply_optimizer_result(products, promotions)
    return cart


def apply_promotion(cart: Cart, promotion_code: str) -> Cart:
    """
    Apply one promotion by hand, consuming its products from the cart.

    Raises:
        PromotionNotFoundError: unknown promotion code.
        ProductNotFoundError, NotEnoughItemsError: the cart cannot cover it.
    """
    promotion = cart.catalog.fetch_promotion(promotion_code)
    products = promotion.consume(cart.flatten())

    cart.remove_all_products()
    for product_amount in products:
        cart.push_product_amount(product_amount)
    cart.push_promotion_entity(promotion, 1)

    logger.info(f"[CART] promotion {promotion.code} applied manually")
    return cart
