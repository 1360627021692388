"""Application factory for Flask app"""
import os
import logging
from datetime import datetime as dat
from flask import Flask, jsonify
from flask_cors import CORS

cors = CORS()

# Configure logging level from environment (default: INFO for production)
# Set LOG_LEVEL=DEBUG in .env for verbose logging during development
_log_level = getattr(logging, os.environ.get('LOG_LEVEL', 'INFO').upper(), logging.INFO)
logging.basicConfig(
    level=_log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Suppress noisy third-party loggers (supabase-py logs every HTTP call at INFO)
logging.getLogger('httpx').setLevel(logging.WARNING)
logging.getLogger('httpcore').setLevel(logging.WARNING)
logging.getLogger('hpack').setLevel(logging.WARNING)


def create_app():
    """Application factory function"""
    app = Flask(__name__)

    # CORS origins from environment (default: "*")
    # Set CORS_ORIGINS=https://app.example.com,http://localhost:3000 in production
    _cors_origins = os.environ.get('CORS_ORIGINS', '*')
    _flask_cors_origins = _cors_origins.split(',') if _cors_origins != '*' else '*'
    cors.init_app(app, resources={
        r"/api/*": {
            "origins": _flask_cors_origins,
            "methods": ["GET", "POST", "OPTIONS"],
            "allow_headers": ["Content-Type", "Authorization", "Accept", "Origin", "X-Requested-With"],
            "supports_credentials": _cors_origins != '*',
            "max_age": 3600
        }
    })

    from core.blueprints import register_blueprints
    register_blueprints(app)

    @app.errorhandler(400)
    def bad_request(error):
        logger.error(f"Bad request (400): {error}")
        return jsonify({'error': 'Bad Request', 'details': str(error)}), 400

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({'error': 'Not Found', 'details': str(error)}), 404

    @app.errorhandler(405)
    def method_not_allowed(error):
        return jsonify({'error': 'Method Not Allowed', 'details': str(error)}), 405

    @app.errorhandler(500)
    def internal_error(error):
        logger.error(f"Internal server error (500): {error}")
        return jsonify({'error': 'Internal Server Error', 'details': str(error)}), 500

    @app.route('/health')
    def health():
        return jsonify(status="ok"), 200

    @app.route('/')
    def index():
        return jsonify({
            'status': 'online',
            'message': 'Onboarding session service is running',
            'version': '1.0.0',
            'timestamp': str(dat.now()),
            'port': os.environ.get('PORT', '8080'),
            'env': os.environ.get('FLASK_ENV', 'production')
        })

    return app
