# This file defines the reporting pages.

"""
Blueprint for report routes.
"""
from flask import Blueprint, render_template

from core.menu_config import menu

report_bp = Blueprint("report_bp", __name__, url_prefix="/reports")


# Only the first and last title segments are used, so this lands under "Reports" as "Summary".
@report_bp.route("/summary")
@menu("Reports.Monthly.Summary", icon="vaadin:chart", order=20, page_title="Monthly Summary")
def summary() -> str:
    return render_template("page.html", heading="Monthly Summary", body="Monthly report summary.")
