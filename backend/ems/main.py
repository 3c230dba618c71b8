import logging
import os

from dotenv import load_dotenv
from flask import Flask, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from ems.controllers.employee_controller import employee_bp
from ems.core import config
from ems.core.api_utils import api_error
from ems.core.exceptions import (
    DuplicateEmailError,
    EmployeeNotFoundError,
    ValidationError,
)
from ems.core.logging_config import setup_logging
from ems.db.session import SessionLocal, create_tables

logger = logging.getLogger(__name__)

# Only load from .env when DATABASE_URL is not already defined by the environment
if not os.getenv("DATABASE_URL"):
    load_dotenv()


def register_error_handlers(app: Flask) -> None:
    """Map domain errors to status codes with a uniform error body."""

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        return api_error(str(error), 400)

    @app.errorhandler(DuplicateEmailError)
    def handle_duplicate_email(error):
        return api_error(str(error), 400)

    @app.errorhandler(EmployeeNotFoundError)
    def handle_employee_not_found(error):
        return api_error(str(error), 404)

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(error):
        logger.error(
            "Database error while handling request",
            extra={"context": {"error_type": type(error).__name__}},
            exc_info=True,
        )
        return api_error("Internal server error", 500)

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        return api_error(error.description or error.name, error.code or 500)


def create_app() -> Flask:
    app = Flask(__name__)

    if config.is_testing():
        app.config["TESTING"] = True

    setup_logging(
        app,
        log_level=config.get_log_level(),
        enable_sql_echo=config.get_sql_echo(),
        log_to_file=config.get_log_to_file(),
        use_json_format=config.get_log_json(),
    )
    config.log_config()

    create_tables()

    app.register_blueprint(employee_bp)
    register_error_handlers(app)

    @app.route("/health", methods=["GET"])
    def health_check():
        """Liveness plus database connectivity."""
        db = SessionLocal()
        try:
            db.execute(text("SELECT 1"))
        finally:
            db.close()
        return jsonify({"status": "ok"}), 200

    logger.info("Application created")
    return app
