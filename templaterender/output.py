"""
Output sink with nested capture scopes.

Templates never write to stdout directly: every write goes to the innermost
open capture, so rendering returns text instead of printing it.
"""

import io
import sys
from typing import List, Optional, TextIO


class OutputBuffer:
    """A stack of capture scopes over a base stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self._scopes: List[io.StringIO] = []

    @property
    def level(self) -> int:
        """Number of capture scopes currently open."""
        return len(self._scopes)

    @property
    def capturing(self) -> bool:
        return bool(self._scopes)

    def begin_capture(self):
        self._scopes.append(io.StringIO())

    def write(self, text: str):
        """Append ``text`` to the innermost scope, or the base stream if none is open."""
        if self._scopes:
            self._scopes[-1].write(text)
        else:
            (self._stream or sys.stdout).write(text)

    def end_capture(self) -> str:
        """Close the innermost scope and return what was written to it."""
        if not self._scopes:
            raise RuntimeError("No capture scope is open")
        scope = self._scopes.pop()
        content = scope.getvalue()
        scope.close()
        return content
