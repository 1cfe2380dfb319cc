"""
Environment-aware configuration.
Values come from the environment (or a .env file) with development defaults.
"""
import os
from dotenv import load_dotenv

load_dotenv()  # Read .env if present


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")  # Set a strong key in production
    DEBUG = False
    TESTING = False
    # CORS: in dev we usually allow '*', in prod supply a comma-separated list in env
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*")
    APP_ENV = os.getenv("APP_ENV", "dev")
    # Interactive query console on GET /graphql
    GRAPHIQL = _flag("GRAPHIQL", "true")
    # JSON seed file; the built-in sample data is used when unset
    SEED_FILE = os.getenv("SEED_FILE")
    # deleteAuthor on an author with books: "cascade" or "restrict"
    AUTHOR_DELETE_POLICY = os.getenv("AUTHOR_DELETE_POLICY", "cascade").lower()
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    # In dev, propagate exceptions so our error handler has full context
    PROPAGATE_EXCEPTIONS = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG").upper()


class TestingConfig(BaseConfig):
    TESTING = True
    GRAPHIQL = False
    SEED_FILE = None
    AUTHOR_DELETE_POLICY = "cascade"


class ProductionConfig(BaseConfig):
    DEBUG = False
    GRAPHIQL = _flag("GRAPHIQL", "false")


def get_config(name: str | None):
    """
    Select config class.
    - If name is provided, choose by name.
    - Else choose based on APP_ENV (dev/test/prod).
    """
    env = (name or os.getenv("APP_ENV", "dev")).lower()
    if env in ["prod", "production"]:
        return ProductionConfig
    if env in ["test", "testing"]:
        return TestingConfig
    return DevelopmentConfig
