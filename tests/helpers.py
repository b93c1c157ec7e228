"""Shared builders for quantity entries and promotions."""
from decimal import Decimal

from app.models import Product, ProductAmount, Promotion


def amounts(products):
    """Map code -> amount for quantity entries."""
    return {p.code: p.amount for p in products}


def pool(catalog, **quantities):
    """Quantity entries for ``code=amount`` pairs, priced from ``catalog``."""
    return [catalog.code_to_product_amount(code, amount) for code, amount in quantities.items()]


def entry(code, price, amount):
    return ProductAmount(Product(code, Decimal(str(price))), amount)


def promotion(code, requirements, price):
    """Promotion from [(product code, unit price, amount)] tuples."""
    return Promotion(code, [entry(c, p, a) for c, p, a in requirements], price)
