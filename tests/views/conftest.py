# Purpose: Pytest fixtures shared across view tests.

import pytest
import os
import sys
from flask import Flask

# Add project root to sys.path if necessary, depending on test runner setup
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '../..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from views.main_views import main_bp
from views.admin_views import admin_bp
from views.report_views import report_bp
from views.api_views import api_bp

# --- Fixtures ---

@pytest.fixture(scope="function")
def app(monkeypatch):
    """Creates and configures a new app instance for each test function."""
    app = Flask(
        __name__,
        template_folder=os.path.join(project_root, "templates"),
    )
    app.config.from_object("config")
    app.config.update({
        "TESTING": True,
        "SECRET_KEY": "test_secret_key",
        "PROPAGATE_EXCEPTIONS": True,
    })

    # Keep settings.yaml out of view tests; individual tests patch these back in
    monkeypatch.setattr("core.menu_config.get_menu_settings", lambda: [])
    monkeypatch.setattr("views.main_views.get_app_config", lambda: {})

    # --- Register Blueprints ---
    app.register_blueprint(main_bp)
    app.register_blueprint(admin_bp)
    app.register_blueprint(report_bp)
    app.register_blueprint(api_bp)

    with app.app_context():
        yield app

@pytest.fixture(scope="function")
def client(app):
    """Provides a Flask test client derived from the app fixture."""
    return app.test_client()
