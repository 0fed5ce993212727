# This file defines JSON endpoints exposing the side navigation, so front-end
# code can render the same tree the server-side template uses.

"""
Blueprint for navigation API routes.
"""
from flask import Blueprint, jsonify, current_app, Response
from typing import Tuple, Union

from core.menu_config import get_menu_entries, describe_entries
from core.navigation import build_nav_tree

api_bp = Blueprint("api_bp", __name__, url_prefix="/api")


@api_bp.route("/navigation")
def get_navigation() -> Union[Response, Tuple[Response, int]]:
    """Returns the grouped navigation tree as a list of nested nodes."""
    try:
        app = current_app._get_current_object()
        tree = build_nav_tree(get_menu_entries(app))
        return jsonify([node.to_dict() for node in tree])
    except Exception as e:
        err_msg = f"Failed to build navigation tree: {e}"
        current_app.logger.error(err_msg, exc_info=True)
        return jsonify({"status": "error", "message": err_msg}), 500


@api_bp.route("/menu-entries")
def get_menu_entry_list() -> Union[Response, Tuple[Response, int]]:
    """Returns the flat, ordered menu entries before grouping."""
    try:
        app = current_app._get_current_object()
        return jsonify(describe_entries(get_menu_entries(app)))
    except Exception as e:
        err_msg = f"Failed to collect menu entries: {e}"
        current_app.logger.error(err_msg, exc_info=True)
        return jsonify({"status": "error", "message": err_msg}), 500
