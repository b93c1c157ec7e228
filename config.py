"""Configuration module for Flask application."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Base configuration class."""

    # Flask
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('FLASK_DEBUG', '1') == '1'
    ENV = os.getenv('FLASK_ENV', 'development')

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

    # Catalog: load products A-D and promotions PA/PC on startup
    SEED_CATALOG = os.getenv('SEED_CATALOG', 'true').lower() == 'true'

    # Optimizer: upper bound on search rounds per run
    OPTIMIZER_MAX_ROUNDS = int(os.getenv('OPTIMIZER_MAX_ROUNDS', '100'))

    # Money output precision (API and shell)
    MONEY_QUANTUM = os.getenv('MONEY_QUANTUM', '0.01')
