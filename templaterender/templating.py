"""
Template rendering for templaterender.

A template is a Python file living in the templates directory, named
``<template>.<extension>``. While it runs it sees two globals:

* ``view`` - the ``TemplateRender`` rendering it (``view.get_var``,
  ``view.print_var``, ``view.fetch`` ...)
* ``echo`` - writes text to the output being captured

Variables passed to ``render`` or ``fetch`` only live for that call: once it
returns, every name it touched gets back the value it had before (or is
removed if it did not exist).
"""

import logging
import os
import re
from typing import Any, Callable, Dict, Mapping, Optional

from templaterender.config import DEFAULT_TEMPLATES_EXTENSION, load_config
from templaterender.evaluation import TemplateEvaluator
from templaterender.exceptions import ConfigurationError, RenderError
from templaterender.formatting import FormatValues
from templaterender.output import OutputBuffer
from templaterender.variables import VariableStore

logger = logging.getLogger(__name__)

_MISSING = object()
_DOUBLED_SEP = re.compile(re.escape(os.sep) + "{2,}")


class TemplateRender:
    """Renders template files with a set of named variables."""

    def __init__(
        self,
        templates_dir: str,
        templates_extension: str = DEFAULT_TEMPLATES_EXTENSION,
        evaluator: Optional[TemplateEvaluator] = None,
        output: Optional[OutputBuffer] = None,
    ):
        self.set_templates_dir(templates_dir)
        self.set_templates_extension(templates_extension)
        self._variables = VariableStore()
        self._evaluator = evaluator or TemplateEvaluator()
        self._output = output or OutputBuffer()

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]] = None) -> "TemplateRender":
        """Build a renderer from ``load_config(config)``."""
        settings = load_config(config)
        return cls(settings["templates_dir"], settings["templates_extension"])

    # ── Configuration ───────────────────────────────────────────────

    def get_templates_dir(self) -> str:
        return self._templates_dir

    def set_templates_dir(self, templates_dir: str) -> "TemplateRender":
        templates_dir = os.fspath(templates_dir)
        if not templates_dir:
            raise ConfigurationError("Templates directory cannot be empty")
        self._templates_dir = templates_dir
        return self

    def get_templates_extension(self) -> str:
        """Return the extension, always without a leading dot (e.g. ``tpl.py``)."""
        return self._templates_extension

    def set_templates_extension(self, templates_extension: str) -> "TemplateRender":
        extension = templates_extension.lstrip(".")
        if not extension:
            raise ConfigurationError(
                f"Invalid templates extension: {templates_extension!r}"
            )
        self._templates_extension = extension
        return self

    # ── Variables ───────────────────────────────────────────────────

    def get_var(self, name: str, params: Optional[FormatValues] = None) -> Any:
        """Return a variable (formatted with ``params`` if given), or None."""
        return self._variables.get(name, params)

    def set_var(self, name: str, value: Any) -> "TemplateRender":
        self._variables.set(name, value)
        return self

    def set_vars(self, variables: Mapping[str, Any]) -> "TemplateRender":
        self._variables.set_all(variables)
        return self

    def isset_var(self, name: str) -> bool:
        return self._variables.has(name)

    def unset_var(self, name: str) -> "TemplateRender":
        self._variables.unset(name)
        return self

    def get_vars(self) -> Dict[str, Any]:
        return self._variables.all()

    def fill_var(self, name: str, values: FormatValues) -> "TemplateRender":
        """Format the stored value of ``name`` in place."""
        self._variables.fill(name, values)
        return self

    def print_var(self, name: str, fill: Optional[FormatValues] = None):
        """
        Write a variable to the output, filling it first when ``fill`` is given.

        Missing variables and variables holding None write nothing.
        """
        if fill:
            self.fill_var(name, fill)
        value = self.get_var(name)
        self.echo("" if value is None else value)

    def echo(self, *parts: Any):
        for part in parts:
            self._output.write(str(part))

    # ── Rendering ───────────────────────────────────────────────────

    def resolve_path(self, template: str) -> str:
        """Return the file path of ``template`` with separators normalized."""
        filename = (
            self._templates_dir + os.sep + template + "." + self._templates_extension
        )
        filename = filename.replace("\\", os.sep).replace("/", os.sep)
        filename = _DOUBLED_SEP.sub(lambda _: os.sep, filename)
        logger.debug("Resolved template %s to %s", template, filename)
        return filename

    def render(self, template: str, variables: Optional[Mapping[str, Any]] = None) -> str:
        """
        Render ``template`` and return its output.

        ``variables`` are set for the duration of the call only. Raises
        RenderError if the template is missing or fails; nothing of its
        partial output is returned in that case.
        """
        path = self.resolve_path(template)
        return self._capture(
            template, path, lambda ns: self._evaluator.evaluate(path, ns), variables
        )

    def render_string(
        self,
        source: str,
        variables: Optional[Mapping[str, Any]] = None,
        name: str = "<string>",
    ) -> str:
        """Render an inline template body the same way ``render`` renders a file."""
        return self._capture(
            name,
            name,
            lambda ns: self._evaluator.evaluate_source(source, name, ns),
            variables,
        )

    def fetch(self, template: str, variables: Optional[Mapping[str, Any]] = None):
        """
        Include ``template`` in the output currently being rendered.

        Only usable from inside a template: its output goes straight into the
        enclosing render instead of being returned. If it fails, none of its
        output reaches the enclosing render.
        """
        path = self.resolve_path(template)
        if not self._output.capturing:
            raise RenderError(template, path, "fetch can only be used while rendering")
        content = self._capture(
            template, path, lambda ns: self._evaluator.evaluate(path, ns), variables
        )
        self._output.write(content)

    def _capture(
        self,
        template: str,
        path: str,
        run: Callable[[Dict[str, Any]], None],
        variables: Optional[Mapping[str, Any]],
    ) -> str:
        previous = self._inject(variables)
        self._output.begin_capture()
        try:
            self._evaluate(template, path, run)
        finally:
            content = self._output.end_capture()
            self._restore(previous)
        logger.debug("Rendered template %s (%d chars)", template, len(content))
        return content

    def _evaluate(self, template: str, path: str, run: Callable[[Dict[str, Any]], None]):
        try:
            run({"view": self, "echo": self.echo})
        except RenderError:
            raise
        except Exception as exc:
            if isinstance(exc, FileNotFoundError) and exc.filename == path:
                reason = "template not found"
            else:
                reason = f"{type(exc).__name__}: {exc}"
            logger.warning("Failed to render template %s: %s", template, reason)
            raise RenderError(template, path, reason) from exc

    def _inject(self, variables: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Set ``variables`` and return the values they replaced."""
        if not variables:
            return {}
        previous = {
            name: self._variables.get(name) if self._variables.has(name) else _MISSING
            for name in variables
        }
        self._variables.set_all(variables)
        return previous

    def _restore(self, previous: Dict[str, Any]):
        for name, value in previous.items():
            if value is _MISSING:
                self._variables.unset(name)
            else:
                self._variables.set(name, value)
        if previous:
            logger.debug("Restored variables: %s", ", ".join(previous))
