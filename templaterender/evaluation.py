"""
Execution of template files.

A template is plain Python source. It runs in a fresh namespace holding
whatever the renderer passes in (``view``, ``echo``), and produces output by
writing to the renderer's capture.
"""

import logging
from typing import Any, Dict

logger = logging.getLogger(__name__)


class TemplateEvaluator:
    """Reads, compiles and runs template files."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def evaluate(self, path: str, namespace: Dict[str, Any]):
        """
        Execute the template at ``path``.

        Raises FileNotFoundError when the file is missing; anything the
        template raises while compiling or running propagates as is.
        """
        with open(path, "r", encoding=self.encoding) as f:
            source = f.read()
        self.evaluate_source(source, path, namespace)

    def evaluate_source(self, source: str, filename: str, namespace: Dict[str, Any]):
        """Execute inline template ``source``; ``filename`` shows up in tracebacks."""
        logger.debug("Evaluating template %s", filename)
        code = compile(source, filename, "exec")
        scope = {"__name__": "__template__", "__file__": filename}
        scope.update(namespace)
        exec(code, scope)
