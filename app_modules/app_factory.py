"""
App Factory Module
Creates and configures the Flask application with all necessary components.
Implements the application factory pattern for better testing and modularity.
"""

import logging
from flask import Flask
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from config import Config
from title_case import StyleGuide, TitleCaseConverter
from title_case.services import get_word_lists
from title_case.spacy_tagger import load_spacy_tagger
from .api_routes import setup_routes
from .error_handlers import setup_error_handlers

logger = logging.getLogger(__name__)


def create_app(config_class=Config):
    """Create and configure Flask application using the application factory pattern."""
    app = Flask(__name__)
    app.config.from_object(config_class)
    config_class.init_app(app)

    # Initialize extensions
    CORS(app)

    rate_limits = config_class.get_rate_limit_config()
    limiter = Limiter(
        key_func=get_remote_address,
        app=app,
        default_limits=rate_limits['default_limits'],
        storage_uri=rate_limits['storage_uri'],
        strategy="fixed-window"
    )
    app.limiter = limiter
    if rate_limits['enabled']:
        logger.info(f"✅ Rate limiting enabled: {', '.join(rate_limits['default_limits'])} per IP")

    # Initialize services with fallbacks
    services = initialize_services(config_class)

    # Setup application components
    title_case_config = config_class.get_title_case_config()
    setup_routes(app, services['title_case_converter'], title_case_config['max_text_length'])
    setup_error_handlers(app)

    # Store services in app context for access
    setattr(app, 'services', services)

    log_initialization_status(services)

    return app


def initialize_services(config_class=Config):
    """Initialize the title case services, falling back to word lists when tagging is unavailable."""
    title_case_config = config_class.get_title_case_config()
    services = {
        'title_case_converter': None,
        'tagger': None,
        'tagger_available': False,
        'default_style': None
    }

    default_style = StyleGuide.parse(title_case_config['default_style'])
    if default_style is None:
        logger.warning(f"⚠️ Unknown TITLE_CASE_STYLE {title_case_config['default_style']!r}, using Chicago")
        default_style = StyleGuide.CHICAGO
    services['default_style'] = default_style

    # Preload vocabulary and the spaCy model once at startup
    word_lists = get_word_lists()

    if title_case_config['use_tagger']:
        tagger = load_spacy_tagger(title_case_config['spacy_model'])
        services['tagger'] = tagger
        services['tagger_available'] = tagger is not None
    else:
        logger.info("Tagging disabled by configuration, using word lists only")

    services['title_case_converter'] = TitleCaseConverter(
        style=default_style,
        tagger=services['tagger'],
        word_lists=word_lists
    )
    return services


def log_initialization_status(services):
    """Log the initialization status of all services."""
    logger.info("=== Service Initialization Status ===")
    logger.info("Title Case Converter: ✅ Ready")
    tagger_status = "✅ Ready" if services.get('tagger_available') else "⚠️ Fallback (word lists only)"
    logger.info(f"SpaCy Tagger: {tagger_status}")
    logger.info(f"Default Style: {services['default_style'].value}")
    logger.info("=====================================")
