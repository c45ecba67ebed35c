"""
Page views for the demo application.

Each view hands its data to a template and returns the rendered HTML.
"""

from typing import List

from templaterender import TemplateRender


def render_dashboard(templates: TemplateRender, user: str, notifications: List[str]) -> str:
    """Render the dashboard for ``user`` with their pending notifications."""
    return templates.render(
        "dashboard",
        {
            "user": user,
            "notifications": notifications,
            "greeting": "Hello, @@name@@!",
            "unread": "You have %d unread notification(s).",
        },
    )


def render_header(templates: TemplateRender, title: str) -> str:
    return templates.render("header", {"title": title})
