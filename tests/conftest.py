# Add project root to sys.path for module imports
import os, sys
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from core.navigation import MenuEntry


@pytest.fixture
def admin_entries():
    """Mixed standalone and grouped entries in presentation order."""
    return [
        MenuEntry(title="Home", path="/", icon="vaadin:home"),
        MenuEntry(title="Admin.Users", path="/admin/users", icon="vaadin:users"),
        MenuEntry(title="About", path="/about", icon="vaadin:info-circle"),
        MenuEntry(title="Admin.Roles", path="/admin/roles", icon="vaadin:key"),
    ]


@pytest.fixture
def no_settings_menu(monkeypatch):
    """Hide settings.yaml menu entries so only tagged views contribute."""
    monkeypatch.setattr("core.menu_config.get_menu_settings", lambda: [])
