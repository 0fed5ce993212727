# This file defines the administration pages. Their dotted menu titles place
# them under a single "Admin" group in the side navigation.

"""
Blueprint for administration routes.
"""
from flask import Blueprint, render_template

from core.menu_config import menu

admin_bp = Blueprint("admin_bp", __name__, url_prefix="/admin")


@admin_bp.route("/users")
@menu("Admin.Users", icon="vaadin:users", order=10, page_title="Users")
def users() -> str:
    return render_template("page.html", heading="Users", body="User administration.")


@admin_bp.route("/roles")
@menu("Admin.Roles", icon="vaadin:key", order=11, page_title="Roles")
def roles() -> str:
    return render_template("page.html", heading="Roles", body="Role administration.")
