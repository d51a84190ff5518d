"""
Configuration for Title Case Assistant.
"""

import os
import logging
import secrets
from dotenv import load_dotenv
from typing import Dict, Any

# Load environment variables (optional - only if .env file exists)
load_dotenv()


def _env_flag(name: str, default: str) -> bool:
    return os.environ.get(name, default).lower() == 'true'


class Config:
    """Application configuration."""

    # Flask Configuration - Auto-generate secure key if not provided
    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        # Auto-generate a secure secret key for this session
        # In production, set SECRET_KEY environment variable
        SECRET_KEY = secrets.token_hex(32)
        if os.environ.get('FLASK_ENV') == 'production':
            logging.warning("Using auto-generated SECRET_KEY. Set SECRET_KEY environment variable in production!")

    # Production/Development Mode
    DEBUG = os.environ.get('FLASK_ENV', 'production') == 'development'
    TESTING = False

    # Logging Configuration
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # SpaCy model settings
    SPACY_MODEL = os.environ.get('SPACY_MODEL', 'en_core_web_sm')

    # Title Case Configuration
    TITLE_CASE_STYLE = os.environ.get('TITLE_CASE_STYLE', 'Chicago')
    TITLE_CASE_USE_TAGGER = _env_flag('TITLE_CASE_USE_TAGGER', 'true')
    MAX_TITLE_TEXT_LENGTH = int(os.environ.get('MAX_TITLE_TEXT_LENGTH', 10000))
    MAX_CONTENT_LENGTH = 1 * 1024 * 1024  # 1MB max request body

    # Rate Limiting (Flask-Limiter reads these keys)
    RATELIMIT_ENABLED = _env_flag('RATELIMIT_ENABLED', 'true')
    RATELIMIT_DEFAULT = os.environ.get('RATELIMIT_DEFAULT', '100 per hour;20 per minute')
    RATELIMIT_STORAGE_URI = os.environ.get('RATELIMIT_STORAGE_URI', 'memory://')

    @staticmethod
    def init_app(app):
        """Initialize application"""
        # Configure logging
        if not app.debug:
            if not app.logger.handlers:
                handler = logging.StreamHandler()
                handler.setLevel(logging.INFO)
                formatter = logging.Formatter(
                    '[%(asctime)s] %(levelname)s in %(module)s: %(message)s'
                )
                handler.setFormatter(formatter)
                app.logger.addHandler(handler)
                app.logger.setLevel(logging.INFO)

    @classmethod
    def get_title_case_config(cls) -> Dict[str, Any]:
        """Get title case engine configuration."""
        return {
            'default_style': cls.TITLE_CASE_STYLE,
            'use_tagger': cls.TITLE_CASE_USE_TAGGER,
            'spacy_model': cls.SPACY_MODEL,
            'max_text_length': cls.MAX_TITLE_TEXT_LENGTH
        }

    @classmethod
    def get_rate_limit_config(cls) -> Dict[str, Any]:
        """Get rate limiting configuration."""
        return {
            'enabled': cls.RATELIMIT_ENABLED,
            'default_limits': [limit.strip() for limit in cls.RATELIMIT_DEFAULT.split(';') if limit.strip()],
            'storage_uri': cls.RATELIMIT_STORAGE_URI
        }


# For testing only
class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    SECRET_KEY = 'testing-secret-key-not-for-production'
    TITLE_CASE_USE_TAGGER = False
    RATELIMIT_ENABLED = False
