"""Catalog blueprint - products, promotions and pricing."""
from flask import Blueprint, request, jsonify, current_app
import logging

from app.exceptions import InvalidPayloadError
from app.services.terminal_service import get_terminal
from app.utils.payloads import product_from_dict, promotion_from_dict, parse_number

logger = logging.getLogger(__name__)

catalog_bp = Blueprint('catalog', __name__, url_prefix='/catalog')

PRICE_SYNTAX_EXAMPLE = '{"price": 7.5}'


def _quantum():
    return current_app.config.get('MONEY_QUANTUM', '0.01')


def _get_json():
    data = request.get_json(silent=True)
    if data is None:
        raise InvalidPayloadError('Expected a JSON body')
    return data


def _get_price():
    data = _get_json()
    if not isinstance(data, dict):
        raise InvalidPayloadError(f"Expected a JSON object, e.g. {PRICE_SYNTAX_EXAMPLE}")
    return parse_number(data, 'price', PRICE_SYNTAX_EXAMPLE)


@catalog_bp.route('', methods=['GET'])
def list_catalog():
    return jsonify(get_terminal().catalog.to_dict(_quantum()))


@catalog_bp.route('/products', methods=['POST'])
def create_product():
    product = product_from_dict(_get_json())
    get_terminal().catalog.append(product)
    logger.info(f"Product {product.code} stored")
    return jsonify(product.to_dict(_quantum())), 201


@catalog_bp.route('/promotions', methods=['POST'])
def create_promotion():
    catalog = get_terminal().catalog
    promotion = promotion_from_dict(_get_json(), catalog)
    catalog.append(promotion)
    logger.info(f"Promotion {promotion.code} stored")
    return jsonify(promotion.to_dict(_quantum())), 201


@catalog_bp.route('/products/<code>/price', methods=['PUT'])
def set_product_price(code):
    terminal = get_terminal()
    product = terminal.set_pricing(terminal.catalog.fetch_product(code), _get_price())
    return jsonify(product.to_dict(_quantum()))


@catalog_bp.route('/promotions/<code>/price', methods=['PUT'])
def set_promotion_price(code):
    terminal = get_terminal()
    promotion = terminal.set_pricing(terminal.catalog.fetch_promotion(code), _get_price())
    return jsonify(promotion.to_dict(_quantum()))
