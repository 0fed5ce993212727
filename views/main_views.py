# This file defines the routes for the top-level pages of the application shell
# and the context processor that feeds the sidebar and navbar in base.html.

"""
Blueprint for main application routes, like the index page.
"""
from flask import Blueprint, render_template, current_app, request
from typing import Any, Dict
import logging

from core.menu_config import menu, get_menu_entries, get_page_header
from core.navigation import build_nav_tree
from core.settings_loader import get_app_config

logger = logging.getLogger(__name__)

# Define the blueprint for main routes
main_bp = Blueprint("main", __name__)


@main_bp.app_context_processor
def inject_shell_context() -> Dict[str, Any]:
    """Adds the navigation tree, app name and current view title to every template."""
    app = current_app._get_current_object()
    nav_tree = build_nav_tree(get_menu_entries(app))
    app_name = get_app_config().get("app_name") or app.config.get("APP_NAME", "")
    return {
        "nav_tree": nav_tree,
        "app_name": app_name,
        "view_title": get_page_header(app, request.endpoint),
        "menu_toggle_label": app.config.get("MENU_TOGGLE_LABEL", "Menu toggle"),
        "default_menu_icon": app.config.get("DEFAULT_MENU_ICON"),
        "sidenav_classes": " ".join(app.config.get("SIDENAV_CLASSES", [])),
    }


@main_bp.route("/")
@menu("Home", icon="vaadin:home", order=0)
def index() -> str:
    """Renders the landing page of the shell."""
    return render_template(
        "page.html",
        heading="Welcome",
        body="Pick a destination from the side navigation.",
    )


@main_bp.route("/about")
@menu("About", icon="vaadin:info-circle", order=100)
def about() -> str:
    return render_template(
        "page.html",
        heading="About",
        body="Application shell with a side navigation grouped by dotted menu titles.",
    )
