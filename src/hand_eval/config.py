"""Configuration settings for the hand evaluator CLI and web API."""

import os


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get("SECRET_KEY") or "dev-secret-key-change-in-production"
    MAX_CONTENT_LENGTH = int(os.environ.get("MAX_CONTENT_LENGTH", "16384"))  # bytes

    # Logging settings
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING").upper()
    LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Interactive CLI settings
    INTERACTIVE_PROMPT = "> "
    QUIT_COMMANDS = ("quit", "exit")


class DevelopmentConfig(Config):
    """Development configuration."""

    DEBUG = True
    TESTING = False

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "DEBUG").upper()


class TestingConfig(Config):
    """Testing configuration."""

    TESTING = True
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""

    DEBUG = False
    TESTING = False


# Configuration mapping
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": Config,
}


def get_config(config_name: str | None = None) -> type[Config]:
    """Get configuration class based on environment."""
    if config_name is None:
        config_name = os.environ.get("FLASK_ENV", "default")

    return config.get(config_name, config["default"])
