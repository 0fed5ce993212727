# Purpose: Collects the flat list of menu entries shown in the sidebar.
# Entries come from view functions tagged with the `menu` decorator (their path is
# resolved from the Flask URL map) and from the `menu_entries` list in settings.yaml.

"""
Menu configuration for the application shell.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from flask import Flask

from core.navigation import MenuEntry
from core.settings_loader import get_menu_settings

logger = logging.getLogger(__name__)

MENU_ATTR = "_menu_entry"
PAGE_TITLE_ATTR = "_page_title"


class MenuConfigurationError(ValueError):
    """Raised when a view is given invalid or duplicate menu metadata."""


def menu(
    title: str,
    icon: Optional[str] = None,
    order: Optional[float] = None,
    page_title: Optional[str] = None,
) -> Callable:
    """
    Decorator marking a view function as a sidebar destination.

    Apply it below ``@bp.route(...)`` so the route registers the tagged function.
    Use a dotted title ("Admin.Users") to place the entry under a group.
    """
    if not title:
        raise MenuConfigurationError("Menu title must be a non-empty string")

    def decorator(view_func: Callable) -> Callable:
        if hasattr(view_func, MENU_ATTR):
            raise MenuConfigurationError(
                f"View '{view_func.__name__}' already has a menu entry "
                f"('{getattr(view_func, MENU_ATTR).title}')"
            )
        setattr(view_func, MENU_ATTR, MenuEntry(title=title, icon=icon, order=order))
        setattr(view_func, PAGE_TITLE_ATTR, page_title or title)
        return view_func

    return decorator


def _sort_key(indexed_entry):
    index, entry = indexed_entry
    # Entries without an order go last; ties keep their collection order.
    if entry.order is None:
        return (1, 0.0, index)
    return (0, float(entry.order), index)


def sort_menu_entries(entries: List[MenuEntry]) -> List[MenuEntry]:
    return [entry for _, entry in sorted(enumerate(entries), key=_sort_key)]


def get_view_menu_entries(app: Flask) -> List[MenuEntry]:
    """Menu entries for every tagged view, in URL map registration order."""
    entries: List[MenuEntry] = []
    seen_endpoints = set()

    for rule in app.url_map.iter_rules():
        if rule.endpoint in seen_endpoints:
            continue
        view_func = app.view_functions.get(rule.endpoint)
        tagged = getattr(view_func, MENU_ATTR, None)
        if tagged is None:
            continue
        if rule.arguments:
            logger.warning(
                f"Skipping menu entry '{tagged.title}': route {rule.rule} requires arguments"
            )
            continue
        seen_endpoints.add(rule.endpoint)
        entries.append(
            MenuEntry(title=tagged.title, path=rule.rule, icon=tagged.icon, order=tagged.order)
        )

    return entries


def parse_settings_entry(raw: Any) -> Optional[MenuEntry]:
    """Build a MenuEntry from one settings.yaml item, or None if it is unusable."""
    if not isinstance(raw, dict):
        logger.warning(f"Ignoring menu entry from settings (not a mapping): {raw!r}")
        return None

    title = raw.get("title")
    if not title or not isinstance(title, str):
        logger.warning(f"Ignoring menu entry from settings without a title: {raw!r}")
        return None

    order = raw.get("order")
    if order is not None:
        try:
            order = float(order)
        except (TypeError, ValueError):
            logger.warning(f"Invalid order {order!r} for menu entry '{title}', ignoring order")
            order = None

    return MenuEntry(title=title, path=raw.get("path"), icon=raw.get("icon"), order=order)


def get_settings_menu_entries() -> List[MenuEntry]:
    entries = []
    for raw in get_menu_settings():
        entry = parse_settings_entry(raw)
        if entry is not None:
            entries.append(entry)
    return entries


def get_menu_entries(app: Flask) -> List[MenuEntry]:
    """
    All sidebar entries for the app: tagged views first, then settings entries,
    stably sorted by ``order``.
    """
    entries = get_view_menu_entries(app) + get_settings_menu_entries()
    return sort_menu_entries(entries)


def get_page_header(app: Flask, endpoint: Optional[str]) -> str:
    """Header text for the view behind ``endpoint``; empty when it has none."""
    if not endpoint:
        return ""
    view_func = app.view_functions.get(endpoint)
    return getattr(view_func, PAGE_TITLE_ATTR, "") or ""


def describe_entries(entries: List[MenuEntry]) -> List[Dict[str, Any]]:
    return [
        {"title": e.title, "path": e.path, "icon": e.icon, "order": e.order}
        for e in entries
    ]
