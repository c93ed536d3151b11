import logging
import sys

# Configure logging to output to STDOUT with a more detailed format
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from extensions import db, login_manager, migrate
from errors import BrainError
from helpers.auth import init_auth
from cli import init_db, create_db, create_user, revoke_share
from config import Config

# Import blueprints from views package
from views.main import bp as main_bp
from views.auth import bp as auth_bp
from views.content import bp as content_bp
from views.brain import bp as brain_bp

logger = logging.getLogger(__name__)


def register_error_handlers(app: Flask) -> None:
    """Render every error as a JSON ``{"message": ...}`` body."""

    @app.errorhandler(BrainError)
    def handle_brain_error(error):
        response = jsonify(error.to_dict())
        response.status_code = error.status_code
        return response

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        response = jsonify({"message": error.description})
        response.status_code = error.code
        return response

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        logger.exception(f"Unhandled error: {error}")
        return jsonify({"message": "Something went wrong!"}), 500


def create_app(config_class=Config):
    """Create and configure the Flask application."""
    app = Flask(__name__)

    # Load configuration from config.py
    app.config.from_object(config_class)

    # Log the database being used based on the loaded configuration.
    db_uri = app.config.get("SQLALCHEMY_DATABASE_URI", "")
    if not db_uri:
        app.logger.warning("SQLALCHEMY_DATABASE_URI is not configured.")
    elif "postgres" in db_uri:  # Covers postgresql and postgres
        # Avoid logging sensitive parts of the URI if present
        uri_to_log = db_uri.split("@")[-1] if "@" in db_uri else db_uri
        app.logger.info(f"Using PostgreSQL database: {uri_to_log}")
    elif "sqlite" in db_uri:
        app.logger.info(f"Using SQLite database: {db_uri}")
    else:
        uri_scheme = db_uri.split(":")[0] if ":" in db_uri else "Unknown"
        app.logger.info(f"Using {uri_scheme} database.")

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    migrate.init_app(app, db)

    # Bearer-token gate for @login_required routes
    init_auth(login_manager)

    # Register blueprints
    api_prefix = app.config.get("API_PREFIX", "/api/v1")
    app.register_blueprint(main_bp, url_prefix=api_prefix)
    app.register_blueprint(auth_bp, url_prefix=api_prefix)
    app.register_blueprint(content_bp, url_prefix=api_prefix)
    app.register_blueprint(brain_bp, url_prefix=api_prefix)

    register_error_handlers(app)

    # Register CLI commands
    app.cli.add_command(init_db)
    app.cli.add_command(create_db)
    app.cli.add_command(create_user)
    app.cli.add_command(revoke_share)

    return app


if __name__ == "__main__":
    app = create_app()
    with app.app_context():
        db.create_all()
    app.run(debug=True, host="0.0.0.0", port=3000)
