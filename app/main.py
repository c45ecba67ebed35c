"""
Demo application entry point using templaterender.

Run with ``python -m app.main``.
"""

import logging
from pathlib import Path

from templaterender import TemplateRender

from app.views import render_dashboard

TEMPLATES_DIR = Path(__file__).parent / "templates"

# ── Renderer setup ──────────────────────────────────────────────────

templates = TemplateRender.from_config({"templates_dir": str(TEMPLATES_DIR)})

# ── Render a page ───────────────────────────────────────────────────

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    print(render_dashboard(templates, "ada", ["Build passed", "New comment on #42"]))
