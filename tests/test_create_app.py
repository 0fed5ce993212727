# Purpose: Smoke-tests for Flask app factory and blueprint registration.

from flask import Flask
from app import create_app


def test_create_app_blueprints():
    app = create_app()
    assert isinstance(app, Flask)
    expected_bps = {"main", "admin_bp", "report_bp", "api_bp"}
    missing = expected_bps - set(app.blueprints.keys())
    assert not missing, f"Missing expected blueprints: {missing}"


def test_create_app_hello_route():
    app = create_app()
    client = app.test_client()
    resp = client.get("/hello")
    assert resp.status_code == 200
    assert b"Hello, World!" in resp.data


def test_create_app_loads_config_module():
    app = create_app()
    assert app.config["APP_NAME"] == "LPYS"
    assert app.config["MENU_TOGGLE_LABEL"] == "Menu toggle"
