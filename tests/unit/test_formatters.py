"""
Unit tests for terminal text formatting.
"""

from decimal import Decimal

from app.models import Cart
from app.utils.formatters import format_cart, format_catalog, money, num


class TestNumbers:

    def test_num(self):
        assert num(4) == '4'
        assert num(Decimal('4.00')) == '4'
        assert num(Decimal('1.50')) == '1.5'
        assert num(None) == '-'
        assert num('abc') == '-'

    def test_money(self):
        assert money(32.4) == '32.40'
        assert money(Decimal('0.15')) == '0.15'
        assert money('7', '0.1') == '7.0'
        assert money(None) == '-'


class TestFormatCart:

    def test_empty_cart(self, catalog):
        assert format_cart(Cart(catalog)) == 'Items:\nTotal: 0.00'

    def test_lines_and_total(self, catalog):
        """Test one line per item with the discount shown on promotion lines."""
        cart = Cart(catalog)
        cart.push_product('B', 2)
        cart.push_promotion('PA')

        lines = format_cart(cart).splitlines()

        assert lines[0] == 'Items:'
        assert 'product' in lines[1] and 'B' in lines[1] and '24.00' in lines[1]
        assert 'promotion' in lines[2] and '(-1.00)' in lines[2]
        assert lines[-1] == 'Total: 31.00'


class TestFormatCatalog:

    def test_lists_promotions_and_products(self, catalog):
        text = format_catalog(catalog)

        assert text.startswith('Promotions:')
        assert '[A x4] for 7.00' in text
        assert '[C x6] for 6.00' in text
        assert 'Products:' in text
        assert '0.15' in text
