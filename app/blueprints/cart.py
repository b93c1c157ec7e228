"""Cart blueprint - scanning, promotions and optimized totals."""
from decimal import Decimal
from flask import Blueprint, request, jsonify, current_app

from app.exceptions import InvalidPayloadError
from app.services.terminal_service import get_terminal

cart_bp = Blueprint('cart', __name__, url_prefix='/cart')


def _cart_response(cart, status=200):
    quantum = Decimal(current_app.config.get('MONEY_QUANTUM', '0.01'))
    return jsonify(cart.to_dict(quantum)), status


def _get_json() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise InvalidPayloadError('Expected a JSON object body')
    return data


@cart_bp.route('', methods=['GET'])
def get_cart():
    """Optimize promotions and return the cart."""
    return _cart_response(get_terminal().get_cart())


@cart_bp.route('/scan', methods=['POST'])
def scan():
    """Scan a string of product codes, e.g. {"codes": "ABCDABAA"}."""
    codes = _get_json().get('codes')
    if not isinstance(codes, str) or not codes.strip():
        raise InvalidPayloadError("Field 'codes' is required, e.g. {\"codes\": \"ABCD\"}")

    cart = get_terminal().scan(codes)
    current_app.logger.info(f"Scanned {len(codes.strip())} codes")
    return _cart_response(cart)


@cart_bp.route('/promotions', methods=['POST'])
def apply_promotion():
    """Apply a promotion by code, consuming its products from the cart."""
    code = _get_json().get('code')
    if not isinstance(code, str) or not code.strip():
        raise InvalidPayloadError("Field 'code' is required, e.g. {\"code\": \"PA\"}")

    return _cart_response(get_terminal().apply_promotion(code.strip()))


@cart_bp.route('/reset', methods=['POST'])
def reset():
    terminal = get_terminal()
    terminal.reset_cart()
    return _cart_response(terminal.peek_cart())
