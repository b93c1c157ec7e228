"""
Integration tests for the Flask CLI commands.
"""

from decimal import Decimal

from app.models import Product


class TestTerminalCommand:
    """Test the interactive terminal shell."""

    def test_scan_and_print(self, runner):
        result = runner.invoke(args=['terminal'], input='c s ABCDABAA\nc s CCCCCCC\nc p\nq\n')

        assert result.exit_code == 0
        assert 'Scanned 8 codes.' in result.output
        assert 'Total: 39.65' in result.output
        assert result.output.rstrip().endswith('Bye!')

    def test_ends_on_eof(self, runner):
        result = runner.invoke(args=['terminal'], input='cart scan A\ncart print\n')

        assert result.exit_code == 0
        assert 'Total: 2.00' in result.output
        assert 'Bye!' in result.output

    def test_errors_do_not_stop_the_shell(self, runner):
        """Test a failing command prints the error and the shell continues."""
        result = runner.invoke(args=['terminal'], input='c s A\nc s ZA\ncart promo PA\nc p\nq\n')

        assert result.exit_code == 0
        assert 'Error: Product not found: Z' in result.output
        assert 'Error: Not enough items for A: required 4, available 1' in result.output
        assert 'Total: 2.00' in result.output

    def test_help_and_unknown_commands(self, runner):
        result = runner.invoke(args=['terminal'], input='h\nfoo\nc\nc x\nc s\nq\n')

        assert 'Available commands:' in result.output
        assert 'Command `foo` not recognized!' in result.output
        assert 'Cart command not provided!' in result.output
        assert 'Cart command `x` not recognized!' in result.output
        assert 'Code not provided!' in result.output

    def test_reset_and_db(self, runner):
        result = runner.invoke(args=['terminal'], input='c s BB\nc r\nc p\ndb\nq\n')

        assert 'Cart reset.' in result.output
        assert 'Total: 0.00' in result.output
        assert '[C x6] for 6.00' in result.output

    def test_manual_promotion(self, runner):
        result = runner.invoke(args=['terminal'], input='c s CCCCCC\ncart promo PC\nc p\nq\n')

        assert 'Promotion PC applied.' in result.output
        assert 'Total: 6.00' in result.output


class TestSeedCatalogCommand:

    def test_seed_catalog_restores_defaults(self, app, runner):
        terminal = app.extensions['terminal']
        terminal.catalog.append(Product('A', 99))
        terminal.catalog.append(Product('E', 1))

        result = runner.invoke(args=['seed-catalog'])

        assert result.exit_code == 0
        assert 'Catalog seeded.' in result.output
        assert terminal.catalog.fetch_product('A').price == Decimal('2.00')
        assert [p.code for p in terminal.catalog.products()] == ['A', 'B', 'C', 'D']
