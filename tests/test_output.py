"""Tests for templaterender.output."""

import io

import pytest

from templaterender.output import OutputBuffer


class TestOutputBuffer:
    def test_capture_returns_written_text(self):
        buf = OutputBuffer()
        buf.begin_capture()
        buf.write("hello ")
        buf.write("world")
        assert buf.end_capture() == "hello world"

    def test_nested_scopes(self):
        buf = OutputBuffer()
        buf.begin_capture()
        buf.write("outer-")
        buf.begin_capture()
        buf.write("inner")
        assert buf.level == 2
        inner = buf.end_capture()
        buf.write(inner.upper())
        assert buf.end_capture() == "outer-INNER"
        assert buf.level == 0

    def test_write_without_scope_goes_to_stream(self):
        stream = io.StringIO()
        buf = OutputBuffer(stream)
        assert not buf.capturing
        buf.write("direct")
        assert stream.getvalue() == "direct"

    def test_end_without_begin(self):
        with pytest.raises(RuntimeError, match="No capture scope"):
            OutputBuffer().end_capture()
