# This file defines the main entry point and structure for the LPYS Shell Flask web application.
# It utilizes the Application Factory pattern (`create_app`) to initialize and configure the Flask app.
# Key responsibilities include:
# - Creating the Flask application instance and loading config.py.
# - Ensuring the instance folder exists (used for the log file).
# - Centralizing logging configuration (File and Console handlers).
# - Registering Blueprints (`main_bp`, `admin_bp`, `report_bp`, `api_bp`) from the `views` directory.
#   Views tagged with the `menu` decorator appear in the side navigation.
# - Providing a conditional block (`if __name__ == '__main__':`) to run the development server.

# This file contains the main Flask application factory.
from flask import Flask
import os
import logging
from logging.handlers import RotatingFileHandler

from core.settings_loader import get_app_config


def configure_logging(app: Flask) -> None:
    """Installs rotating file and console handlers on the app and root loggers."""
    # Remove Flask's default handlers
    app.logger.handlers.clear()
    level_name = str(get_app_config().get("log_level", "DEBUG")).upper()
    level = getattr(logging, level_name, logging.DEBUG)
    app.logger.setLevel(level)

    log_formatter = logging.Formatter(
        "%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]"
    )

    # File Handler (Rotating)
    log_file_path = os.path.join(app.instance_path, "app.log")
    max_log_size = 1024 * 1024 * 10  # 10 MB
    backup_count = 5
    try:
        file_handler = RotatingFileHandler(
            log_file_path, maxBytes=max_log_size, backupCount=backup_count
        )
        file_handler.setFormatter(log_formatter)
        file_handler.setLevel(level)
        app.logger.addHandler(file_handler)
        logging.getLogger().addHandler(file_handler)
        logging.getLogger().setLevel(level)
        app.logger.info(f"File logging configured to: {log_file_path} (Level: {level_name})")
    except Exception as e:
        app.logger.error(
            f"Failed to configure file logging to {log_file_path}: {e}", exc_info=True
        )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(level)
    app.logger.addHandler(console_handler)
    logging.getLogger().addHandler(console_handler)

    app.logger.info("Centralized logging configured (File & Console).")


def create_app() -> Flask:
    """Factory function to create and configure the Flask app."""
    app = Flask(__name__, instance_relative_config=True)

    app.config.from_mapping(
        SECRET_KEY=os.environ.get("LPYS_SECRET_KEY", "dev"),  # CHANGE for production!
    )

    # Load configuration from config.py (APP_NAME, MENU_TOGGLE_LABEL, ...)
    app.config.from_object("config")

    # Ensure the instance folder exists (needed for logging)
    try:
        os.makedirs(app.instance_path, exist_ok=True)
    except OSError as e:
        app.logger.error(
            f"Could not create instance folder at {app.instance_path}: {e}",
            exc_info=True,
        )

    configure_logging(app)
    app.logger.info(f"Application root path: {app.root_path}")

    # --- Register Blueprints ---
    try:
        from views.main_views import main_bp
        from views.admin_views import admin_bp
        from views.report_views import report_bp
        from views.api_views import api_bp
    except ImportError as imp_err:
        app.logger.error(f"Blueprint import failed: {imp_err}", exc_info=True)
        raise

    try:
        for bp in (main_bp, admin_bp, report_bp, api_bp):
            app.register_blueprint(bp)
            app.logger.info(f"- {bp.name} (prefix: {bp.url_prefix})")
    except Exception as reg_err:
        app.logger.error(f"Blueprint registration failed: {reg_err}", exc_info=True)
        raise

    # Add a simple test route to confirm app creation
    @app.route("/hello")
    def hello() -> str:
        return "Hello, World! App factory is working."

    return app


# --- Application Execution ---
if __name__ == "__main__":
    app = create_app()
    app.run(debug=True, host="0.0.0.0")
