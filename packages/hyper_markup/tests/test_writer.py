"""Test render() and write()."""

import io
import logging

import pytest

from hyper_markup import GroupRenderError, MarkupWriteError, attr, el, group, render, text, write


class BrokenSink:
    def write(self, data):
        raise OSError(28, "No space left on device")


class ChunkedSink(io.RawIOBase):
    """Raw stream that takes at most four bytes per write."""

    def __init__(self):
        self.data = bytearray()

    def writable(self):
        return True

    def write(self, b):
        chunk = bytes(b[:4])
        self.data += chunk
        return len(chunk)


class StalledSink(io.RawIOBase):
    """Non-blocking raw stream that takes a few bytes, then would block."""

    def __init__(self, limit):
        self.data = bytearray()
        self.limit = limit

    def writable(self):
        return True

    def write(self, b):
        room = self.limit - len(self.data)
        if room <= 0:
            return None
        chunk = bytes(b[:room])
        self.data += chunk
        return len(chunk)


class TestRender:
    """Test render()."""

    def test_render_root(self):
        """render() returns the markup string."""
        assert render(el("p", text("hi"))) == "<p>hi</p>"

    def test_render_group_fails(self):
        """A group root is a misuse error."""
        with pytest.raises(GroupRenderError):
            render(group([text("hi")]))


class TestWrite:
    """Test writing to binary sinks."""

    def test_writes_utf8_bytes(self):
        """The rendered markup is written as UTF-8."""
        sink = io.BytesIO()
        write(sink, el("p", attr("lang", "de"), text("Grüße")))
        assert sink.getvalue() == '<p lang="de">Grüße</p>'.encode("utf-8")

    def test_custom_encoding(self):
        """The encoding can be chosen per call."""
        sink = io.BytesIO()
        write(sink, el("p", text("é")), encoding="latin-1")
        assert sink.getvalue() == b"<p>\xe9</p>"

    def test_write_to_file(self, tmp_path):
        """Files opened in binary mode work as sinks."""
        path = tmp_path / "page.html"
        with path.open("wb") as f:
            write(f, el("ul", el("li", text("one")), el("li", text("two"))))
        assert path.read_text() == "<ul><li>one</li><li>two</li></ul>"

    def test_sink_error_wrapped(self):
        """OSError from the sink becomes MarkupWriteError."""
        with pytest.raises(MarkupWriteError, match="No space left on device") as exc_info:
            write(BrokenSink(), el("p", text("x")))
        assert isinstance(exc_info.value.original_error, OSError)
        assert exc_info.value.__cause__ is exc_info.value.original_error

    def test_closed_sink(self):
        """Writing to a closed stream wraps the ValueError."""
        sink = io.BytesIO()
        sink.close()
        with pytest.raises(MarkupWriteError) as exc_info:
            write(sink, el("br"))
        assert isinstance(exc_info.value, OSError)
        assert isinstance(exc_info.value.original_error, ValueError)

    def test_partial_writes_are_continued(self):
        """Sinks that take part of the bytes get the rest on later calls."""
        sink = ChunkedSink()
        write(sink, el("p", text("hello world")))
        assert bytes(sink.data) == b"<p>hello world</p>"

    def test_stalled_sink(self):
        """A sink that stops accepting bytes is a write error."""
        sink = StalledSink(limit=4)
        with pytest.raises(MarkupWriteError, match="4 of 18 bytes written") as exc_info:
            write(sink, el("p", text("hello world")))
        assert isinstance(exc_info.value.original_error, BlockingIOError)
        assert bytes(sink.data) == b"<p>h"

    def test_group_root_not_written(self):
        """A group root fails before touching the sink."""
        sink = io.BytesIO()
        with pytest.raises(GroupRenderError):
            write(sink, group([text("x")]))
        assert sink.getvalue() == b""

    def test_logs_byte_count(self, caplog):
        """Successful writes are logged at DEBUG."""
        with caplog.at_level(logging.DEBUG, logger="hyper_markup.writer"):
            write(io.BytesIO(), el("br"))
        assert "wrote 6 bytes" in caplog.text
