"""
API Routes Module
Flask route handlers for title case conversion and health checks.
"""

import logging
from flask import request, jsonify

from title_case import StyleGuide, TitleCaseConverter

logger = logging.getLogger(__name__)


def setup_routes(app, converter: TitleCaseConverter, max_text_length: int):
    """Setup all API routes for the Flask application."""

    # Converter without tagger for requests that opt out of tagging
    plain_converter = TitleCaseConverter(style=converter.default_style, word_lists=converter.word_lists)
    default_style = StyleGuide.parse(converter.default_style)

    @app.route('/health')
    @app.limiter.exempt
    def health_check():
        """Basic health check."""
        return jsonify({
            'status': 'healthy',
            'tagger_available': converter.tagger is not None,
            'default_style': default_style.value if default_style else None
        })

    @app.route('/api/title-case/styles')
    def list_styles():
        """List supported style guides."""
        return jsonify({
            'styles': [{'id': style.value, 'label': style.label} for style in StyleGuide],
            'default': default_style.value if default_style else None
        })

    @app.route('/api/title-case', methods=['POST'])
    def convert_title_case():
        """Convert text (or a selection within it) to title case."""
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({'error': 'Request body must be a JSON object'}), 400

        text = data.get('text')
        if not isinstance(text, str):
            return jsonify({'error': "Field 'text' is required and must be a string"}), 400

        if len(text) > max_text_length:
            return jsonify({'error': f'Text too long. Maximum length is {max_text_length} characters.'}), 413

        style_value = data.get('style')
        style = StyleGuide.parse(style_value) if style_value is not None else default_style
        if style is None:
            return jsonify({
                'error': f"Unsupported style guide: {style_value!r}",
                'supported_styles': StyleGuide.identifiers()
            }), 400

        use_tagger = data.get('use_tagger', True)
        if not isinstance(use_tagger, bool):
            return jsonify({'error': "Field 'use_tagger' must be a boolean"}), 400

        selection = data.get('selection')
        if selection is not None and not _is_valid_selection(selection):
            return jsonify({'error': "Field 'selection' must be an object with integer 'start' and 'end'"}), 400

        active = converter if use_tagger else plain_converter

        try:
            if selection is not None:
                result = active.convert_selection(text, selection['start'], selection['end'], style)
            else:
                result = active.convert(text, style)
        except Exception as e:
            logger.error(f"Title case conversion failed: {e}", exc_info=True)
            return jsonify({'error': 'Title case conversion failed'}), 500

        logger.info(f"Converted {len(text)} chars with style {style.value}")
        return jsonify({
            'success': True,
            'result': result,
            'style': style.value,
            'tagger_used': active.tagger is not None
        })


def _is_valid_selection(selection) -> bool:
    if not isinstance(selection, dict):
        return False
    for key in ('start', 'end'):
        value = selection.get(key)
        # bool is an int subclass
        if not isinstance(value, int) or isinstance(value, bool):
            return False
    return True
