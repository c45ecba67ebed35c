"""Renders the demo application's templates end to end."""

import os

import pytest

from app.views import render_dashboard, render_header
from templaterender import TemplateRender

APP_TEMPLATES = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "app", "templates")


@pytest.fixture
def templates():
    return TemplateRender(APP_TEMPLATES, "tpl.py")


class TestDashboard:
    def test_dashboard_page(self, templates):
        html = templates.render(
            "dashboard",
            {
                "user": "ada",
                "notifications": ["Build passed", "New comment"],
                "greeting": "Hello, @@name@@!",
                "unread": "You have %d unread notification(s).",
            },
        )
        assert html == (
            "<header><h1>Dashboard</h1></header>\n"
            "<main>\n"
            "Hello, ada!\n"
            "<ul>\n"
            "  <li>Build passed</li>\n"
            "  <li>New comment</li>\n"
            "</ul>\n"
            "You have 2 unread notification(s).\n"
            "</main>\n"
        )
        assert templates.get_vars() == {}

    def test_header_alone(self, templates):
        assert templates.render("header", {"title": "Settings"}) == (
            "<header><h1>Settings</h1></header>\n"
        )


class TestViews:
    def test_render_dashboard_view(self, templates):
        html = render_dashboard(templates, "grace", [])
        assert "Hello, grace!" in html
        assert "You have 0 unread notification(s)." in html
        assert "<li>" not in html

    def test_render_header_view(self, templates):
        assert render_header(templates, "Home") == "<header><h1>Home</h1></header>\n"
