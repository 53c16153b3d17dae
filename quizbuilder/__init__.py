from flask import Flask, jsonify, request
from flask_sqlalchemy import SQLAlchemy
from dotenv import load_dotenv
from flask_migrate import Migrate
from flask_compress import Compress
import logging

# Load environment variables early so config is available for blueprint creation
load_dotenv()

from quizbuilder.config import config

db = SQLAlchemy()
migrate = Migrate()
compress = Compress()


def create_app(overrides: dict = None) -> Flask:
    """
    Application factory for the Flask app.
    Loads environment variables, configures the database,
    and registers blueprints.

    Args:
        overrides: Optional Flask config values applied after the
            environment-derived configuration (used by the test suite).
    """
    # Re-initialize config to ensure latest .env values are loaded
    from quizbuilder.config import Config
    global config
    config = Config()

    # Validate configuration
    config.validate()

    app = Flask(__name__)

    # Load configuration from config module
    app.config["SECRET_KEY"] = config.SECRET_KEY
    app.config["DEBUG"] = config.FLASK_DEBUG
    app.config["SQLALCHEMY_DATABASE_URI"] = config.SQLALCHEMY_DATABASE_URI
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = config.SQLALCHEMY_TRACK_MODIFICATIONS
    app.config["SQLALCHEMY_ECHO"] = config.SQLALCHEMY_ECHO
    app.config["SESSION_COOKIE_SECURE"] = config.SESSION_COOKIE_SECURE
    app.config["API_PREFIX"] = config.API_PREFIX
    app.config["CORS_ORIGINS"] = config.CORS_ORIGINS
    app.config["DEFAULT_PAGE_SIZE"] = config.DEFAULT_PAGE_SIZE
    app.config["MAX_PAGE_SIZE"] = config.MAX_PAGE_SIZE

    # Response compression settings
    app.config["COMPRESS_MIMETYPES"] = ['application/json']
    app.config["COMPRESS_LEVEL"] = 6  # Balance between compression and CPU
    app.config["COMPRESS_MIN_SIZE"] = 500  # Only compress responses > 500 bytes

    if overrides:
        app.config.update(overrides)

    db_uri = app.config["SQLALCHEMY_DATABASE_URI"]
    if db_uri.startswith("mysql"):
        if "?" not in db_uri:
            db_uri += "?charset=utf8mb4"
        app.config["SQLALCHEMY_DATABASE_URI"] = db_uri
        # Connection pooling only applies to server databases
        app.config.setdefault("SQLALCHEMY_ENGINE_OPTIONS", {
            "pool_size": 10,
            "pool_recycle": 3600,
            "pool_pre_ping": True,
            "max_overflow": 20,
            "connect_args": {
                "connect_timeout": 5,
                "read_timeout": 10,
                "write_timeout": 10,
                "charset": "utf8mb4",
            }
        })

    app.logger.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    compress.init_app(app)

    # Security headers and CORS
    from quizbuilder.security import init_security
    init_security(app)

    register_error_handlers(app)

    # Register blueprints
    api_prefix = app.config["API_PREFIX"]

    from quizbuilder.health import health_bp
    app.register_blueprint(health_bp, url_prefix=api_prefix)

    from quizbuilder.quiz import quiz_bp
    app.register_blueprint(quiz_bp, url_prefix=api_prefix)

    from quizbuilder.cli import register_commands
    register_commands(app)

    # Create tables if they do not exist
    with app.app_context():
        from quizbuilder.quiz import models  # noqa: F401
        db.create_all()

    app.logger.info(f"Quiz Builder API ready at {api_prefix}")
    return app


def register_error_handlers(app: Flask) -> None:
    """Register JSON error handlers for the domain errors and common HTTP errors."""
    from quizbuilder.errors import QuizBuilderError

    def is_api_request() -> bool:
        return request.path.startswith(app.config["API_PREFIX"])

    @app.errorhandler(QuizBuilderError)
    def handle_quiz_builder_error(error):
        """Return the public message of a domain error with its status code."""
        if error.status_code < 500:
            app.logger.warning(f"{error.status_code} on {request.method} {request.path}: {error.message}")
        return jsonify({'success': False, 'error': error.message}), error.status_code

    @app.errorhandler(404)
    def handle_404(e):
        """Handle 404 errors - return JSON for API routes."""
        path = request.path
        method = request.method
        app.logger.warning(f"404 error: {method} {path}")
        if is_api_request():
            return jsonify({
                'success': False,
                'error': f'Route not found: {method} {path}',
                'path': path,
                'method': method
            }), 404
        return f"Page not found: {path}", 404

    @app.errorhandler(405)
    def handle_405(e):
        """Handle 405 Method Not Allowed - return JSON for API routes."""
        path = request.path
        method = request.method
        app.logger.warning(f"405 error: {method} {path}")
        if is_api_request():
            return jsonify({
                'success': False,
                'error': f'Method not allowed: {method} {path}',
                'path': path,
                'method': method
            }), 405
        return e

    @app.errorhandler(500)
    def handle_500(e):
        """Log unexpected failures and hide their details from the client."""
        original = getattr(e, "original_exception", None)
        app.logger.error(f"Unhandled error on {request.method} {request.path}: {original or e}")
        return jsonify({'success': False, 'error': 'Internal server error'}), 500
