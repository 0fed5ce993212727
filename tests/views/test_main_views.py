# Purpose: Tests for the shell pages: sidebar rendering, navbar view title and app name.

from unittest.mock import patch


def test_index_renders_shell(client):
    resp = client.get("/")
    assert resp.status_code == 200
    html = resp.get_data(as_text=True)
    assert '<span class="app-name">LPYS</span>' in html
    assert 'aria-label="Menu toggle"' in html
    assert '<h1 class="view-title">Home</h1>' in html


def test_sidebar_groups_dotted_titles(client):
    html = client.get("/").get_data(as_text=True)
    assert '<a href="/admin/users">Users</a>' in html
    assert '<a href="/admin/roles">Roles</a>' in html
    assert '<span>Admin</span>' in html
    assert '<a href="/reports/summary">Summary</a>' in html
    # Top-level order: Home, Admin, Reports, About
    positions = [html.index(marker) for marker in (
        '<a href="/">Home</a>',
        '<span>Admin</span>',
        '<span>Reports</span>',
        '<a href="/about">About</a>',
    )]
    assert positions == sorted(positions)


def test_view_title_uses_page_title(client):
    html = client.get("/admin/roles").get_data(as_text=True)
    assert '<h1 class="view-title">Roles</h1>' in html
    html = client.get("/reports/summary").get_data(as_text=True)
    assert '<h1 class="view-title">Monthly Summary</h1>' in html


def test_app_name_override_from_settings(client):
    with patch("views.main_views.get_app_config", return_value={"app_name": "Portal"}):
        html = client.get("/about").get_data(as_text=True)
    assert '<span class="app-name">Portal</span>' in html


def test_settings_entries_appear_in_sidebar(client, monkeypatch):
    monkeypatch.setattr(
        "core.menu_config.get_menu_settings",
        lambda: [{"title": "Help.Docs", "path": "https://docs.example", "order": 50}],
    )
    html = client.get("/").get_data(as_text=True)
    assert '<span>Help</span>' in html
    assert '<a href="https://docs.example">Docs</a>' in html
