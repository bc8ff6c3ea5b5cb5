"""
Application Configuration

Centralizes all Flask and application configuration settings.
"""

import os

# Base directory of the application
BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Base configuration class."""

    # Flask settings
    SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-only-change-in-production')

    # Recipe sources: bundled folder, or a remote server when RECIPES_BASE_URL is set
    RECIPES_FOLDER = os.environ.get('RECIPES_FOLDER', os.path.join(BASE_DIR, 'recipes'))
    RECIPES_BASE_URL = os.environ.get('RECIPES_BASE_URL', '')
    DEFAULT_RECIPE = os.environ.get('DEFAULT_RECIPE', 'egg_fried_rice')
    DEFAULT_UNIT_SYSTEM = os.environ.get('DEFAULT_UNIT_SYSTEM', 'metric')

    # Remote fetch settings
    FETCH_TIMEOUT = int(os.environ.get('FETCH_TIMEOUT', '10'))
    MAX_RECIPE_SIZE = 1024 * 1024  # 1MB max document

    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
    LOG_FORMAT = '%(asctime)s %(levelname)s [%(name)s] %(message)s'


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'DEBUG').upper()


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    RECIPES_BASE_URL = ''


# Configuration dictionary for easy access
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(env=None):
    """Get configuration based on environment."""
    if env is None:
        env = os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
