"""
Exceptions raised by the templaterender package.
"""


class TemplateRenderError(Exception):
    """Base exception for all templaterender errors."""

    pass


class ConfigurationError(TemplateRenderError):
    """Raised when the templates directory or extension is unusable."""

    pass


class RenderError(TemplateRenderError):
    """Raised when a resolved template cannot be evaluated."""

    def __init__(self, template: str, path: str, reason: str):
        self.template = template
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot render template '{template}' ({path}): {reason}")


class FormatError(TemplateRenderError):
    """Raised when positional directives do not match the supplied values."""

    pass
