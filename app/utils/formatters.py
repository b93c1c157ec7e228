"""
Text formatting for the terminal shell.
Money, quantities, carts and catalog listings.
"""
from decimal import Decimal, InvalidOperation
from typing import Union, Optional


def num(value: Union[int, float, Decimal, str, None]) -> str:
    """
    Format a quantity without insignificant decimals.

    Examples:
        num(4) -> "4"
        num(Decimal('4.00')) -> "4"
        num(Decimal('1.50')) -> "1.5"
        num(None) -> "-"
    """
    if value is None or value == "":
        return "-"

    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return "-"

    if number == number.to_integral_value():
        return str(number.quantize(Decimal('1')))
    return format(number.normalize(), 'f')


def money(value: Union[int, float, Decimal, str, None], quantum: Optional[str] = '0.01') -> str:
    """
    Format a money amount with a fixed number of decimals.

    Examples:
        money(32.4) -> "32.40"
        money(Decimal('0.15')) -> "0.15"
    """
    if value is None or value == "":
        return "-"

    try:
        number = Decimal(str(value)).quantize(Decimal(quantum))
    except (InvalidOperation, ValueError, TypeError):
        return "-"

    return f"{number}"


def format_cart_item(item, quantum: str = '0.01') -> str:
    line = f"{item.kind.value:<9} {item.code:<6} x{num(item.amount):<5} @ {money(item.price, quantum):>8}  = {money(item.total, quantum):>8}"
    if item.discount:
        line += f"  (-{money(item.discount, quantum)})"
    return line


def format_cart(cart, quantum: str = '0.01') -> str:
    """Items one per line, then the total."""
    lines = ["Items:"]
    lines.extend(f"  {format_cart_item(item, quantum)}" for item in cart.items)
    lines.append(f"Total: {money(cart.total_price, quantum)}")
    return "\n".join(lines)


def format_catalog(catalog, quantum: str = '0.01') -> str:
    lines = ["Promotions:"]
    for promotion in catalog.promotions():
        requirements = ", ".join(f"{p.code} x{num(p.amount)}" for p in promotion.products)
        lines.append(f"  {promotion.code:<6} [{requirements}] for {money(promotion.price, quantum)}")
    lines.append("Products:")
    for product in catalog.products():
        lines.append(f"  {product.code:<6} {money(product.price, quantum)}")
    return "\n".join(lines)
