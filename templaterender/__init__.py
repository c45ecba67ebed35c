"""
templaterender - a minimal server-side template renderer.

Templates are Python files resolved from a configured directory and
extension. They read named variables from the renderer, fill ``@@name@@``
placeholders or printf-style directives, and include each other inline.
"""

from templaterender.templating import TemplateRender
from templaterender.variables import VariableStore
from templaterender.output import OutputBuffer
from templaterender.evaluation import TemplateEvaluator
from templaterender.formatting import format_var
from templaterender.config import load_config
from templaterender.exceptions import (
    TemplateRenderError,
    ConfigurationError,
    RenderError,
    FormatError,
)

__version__ = "1.0.0"
__all__ = [
    "TemplateRender",
    "VariableStore",
    "OutputBuffer",
    "TemplateEvaluator",
    "format_var",
    "load_config",
    "TemplateRenderError",
    "ConfigurationError",
    "RenderError",
    "FormatError",
]
