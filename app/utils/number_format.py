"""Number parsing utilities for prices and quantities."""
from decimal import Decimal, InvalidOperation


def to_decimal(value) -> Decimal:
    """
    Convert an int, float, str or Decimal to Decimal.

    Floats go through their string form so that 1.25 becomes Decimal('1.25')
    rather than its binary expansion.

    Raises:
        ValueError: if the value is not a finite number.
    """
    if isinstance(value, Decimal):
        decimal_value = value
    elif isinstance(value, bool) or value is None:
        raise ValueError(f'Not a number: {value!r}')
    else:
        try:
            decimal_value = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            raise ValueError(f'Not a number: {value!r}')

    if not decimal_value.is_finite():
        raise ValueError(f'Not a finite number: {value!r}')

    return decimal_value


def parse_non_negative(value) -> Decimal:
    """
    Parse a price or quantity from user input.

    Raises:
        ValueError: if the value is invalid or negative.
    """
    decimal_value = to_decimal(value)
    if decimal_value < 0:
        raise ValueError('Value cannot be negative')
    return decimal_value


def quantize_money(value, quantum='0.01') -> Decimal:
    """Round a money amount to ``quantum`` (e.g. '0.01')."""
    return to_decimal(value).quantize(to_decimal(quantum))
