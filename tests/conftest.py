import pytest
from app import create_app
from app.models import Cart
from app.services.catalog_service import Catalog, seed_default_catalog
from app.services.terminal_service import Terminal


class TerminalConfig:
    """Configuration used by the test application."""
    TESTING = True
    SECRET_KEY = 'test'
    LOG_LEVEL = 'WARNING'
    SEED_CATALOG = True
    OPTIMIZER_MAX_ROUNDS = 100
    MONEY_QUANTUM = '0.01'


@pytest.fixture(scope='function')
def app():
    """Create application instance for testing (fresh terminal per test)."""
    app = create_app(TerminalConfig)
    return app


@pytest.fixture(scope='function')
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture(scope='function')
def runner(app):
    """Create CLI runner."""
    return app.test_cli_runner()


@pytest.fixture(scope='function')
def catalog():
    """Catalog with A=2.00, B=12.00, C=1.25, D=0.15, PA=A x4 @7.00, PC=C x6 @6.00."""
    catalog = Catalog()
    seed_default_catalog(catalog)
    return catalog


@pytest.fixture(scope='function')
def cart(catalog):
    """Empty cart over the default catalog."""
    return Cart(catalog)


@pytest.fixture(scope='function')
def terminal():
    """Initialized terminal with the default catalog."""
    terminal = Terminal()
    terminal.init()
    return terminal
