"""
Error Handlers Module
JSON error responses for the Flask application.
"""

import logging
from flask import jsonify
from werkzeug.exceptions import HTTPException

logger = logging.getLogger(__name__)


def setup_error_handlers(app):
    """Register JSON error handlers on the Flask application."""

    @app.errorhandler(400)
    def bad_request(error):
        return jsonify({'error': _describe(error, 'Bad request')}), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Resource not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(413)
    def request_entity_too_large(error):
        return jsonify({'error': 'Request too large'}), 413

    @app.errorhandler(429)
    def rate_limit_exceeded(error):
        logger.warning(f"Rate limit exceeded: {error}")
        return jsonify({'error': f"Rate limit exceeded: {_describe(error, 'too many requests')}"}), 429

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Internal server error: {error}")
        return jsonify({'error': 'Internal server error'}), 500

    @app.errorhandler(Exception)
    def unhandled_exception(error):
        if isinstance(error, HTTPException):
            return jsonify({'error': _describe(error, error.name)}), error.code
        logger.error(f"Unhandled exception: {error}", exc_info=True)
        return jsonify({'error': 'Internal server error'}), 500


def _describe(error, fallback: str) -> str:
    description = getattr(error, 'description', None)
    return description if isinstance(description, str) and description else fallback
