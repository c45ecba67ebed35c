"""
Renderer configuration.

Values come from, in increasing priority: built-in defaults, the
``TEMPLATERENDER_DIR`` / ``TEMPLATERENDER_EXTENSION`` environment variables,
and explicit overrides.
"""

import os
from typing import Any, Dict, Optional

DEFAULT_TEMPLATES_DIR = "templates"
DEFAULT_TEMPLATES_EXTENSION = "tpl.py"

ENV_TEMPLATES_DIR = "TEMPLATERENDER_DIR"
ENV_TEMPLATES_EXTENSION = "TEMPLATERENDER_EXTENSION"


def load_config(overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return the effective ``templates_dir`` / ``templates_extension`` settings."""
    config: Dict[str, Any] = {
        "templates_dir": os.environ.get(ENV_TEMPLATES_DIR, DEFAULT_TEMPLATES_DIR),
        "templates_extension": os.environ.get(
            ENV_TEMPLATES_EXTENSION, DEFAULT_TEMPLATES_EXTENSION
        ),
    }
    if overrides:
        config.update(overrides)
    return config
