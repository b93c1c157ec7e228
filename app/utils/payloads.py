"""Parse JSON payloads into catalog entities."""
from decimal import Decimal

from app.exceptions import InvalidPayloadError
from app.models import Product, ProductAmount, Promotion
from app.utils.number_format import parse_non_negative

PRODUCT_SYNTAX_EXAMPLE = '{"code": "A", "price": 15.3}'
PROMOTION_SYNTAX_EXAMPLE = (
    '{"code":"PA","products":[{"product":{"code":"A","price":2.0},"amount":4.0}],"price":7.0}'
)


def _require_dict(data, example: str) -> dict:
    if not isinstance(data, dict):
        raise InvalidPayloadError(f"Expected a JSON object, e.g. {example}")
    return data


def _require_code(data: dict, example: str) -> str:
    code = data.get('code')
    if not isinstance(code, str) or not code.strip():
        raise InvalidPayloadError(f"Field 'code' is required, e.g. {example}")
    return code.strip()


def parse_number(data: dict, field: str, example: str) -> Decimal:
    if field not in data:
        raise InvalidPayloadError(f"Field '{field}' is required, e.g. {example}")
    try:
        return parse_non_negative(data[field])
    except ValueError as e:
        raise InvalidPayloadError(f"Field '{field}': {e}")


def product_from_dict(data) -> Product:
    data = _require_dict(data, PRODUCT_SYNTAX_EXAMPLE)
    return Product(
        _require_code(data, PRODUCT_SYNTAX_EXAMPLE),
        parse_number(data, 'price', PRODUCT_SYNTAX_EXAMPLE),
    )


def product_amount_from_dict(data, catalog=None) -> ProductAmount:
    """
    Accept either ``{"product": {...}, "amount": n}`` or, when a catalog is
    given, ``{"code": "A", "amount": n}`` resolved to the catalog's price.
    """
    data = _require_dict(data, PROMOTION_SYNTAX_EXAMPLE)
    amount = parse_number(data, 'amount', PROMOTION_SYNTAX_EXAMPLE)

    if 'product' in data:
        return ProductAmount(product_from_dict(data['product']), amount)

    if catalog is not None:
        return catalog.code_to_product_amount(_require_code(data, PROMOTION_SYNTAX_EXAMPLE), amount)

    raise InvalidPayloadError(f"Field 'product' is required, e.g. {PROMOTION_SYNTAX_EXAMPLE}")


def promotion_from_dict(data, catalog=None) -> Promotion:
    data = _require_dict(data, PROMOTION_SYNTAX_EXAMPLE)
    code = _require_code(data, PROMOTION_SYNTAX_EXAMPLE)
    price = parse_number(data, 'price', PROMOTION_SYNTAX_EXAMPLE)

    products = data.get('products')
    if not isinstance(products, list):
        raise InvalidPayloadError(f"Field 'products' must be a list, e.g. {PROMOTION_SYNTAX_EXAMPLE}")

    return Promotion(code, [product_amount_from_dict(p, catalog) for p in products], price)
