"""Render a node tree and write it out."""

import logging
from typing import BinaryIO

from hyper_markup.errors import MarkupWriteError

__all__ = ['render', 'write']

LOGGER = logging.getLogger(__name__)


def render(node) -> str:
    """Render a node tree to its markup string.

    Raises:
        GroupRenderError: If node is a group rather than a real node.
    """
    return node.render()


def write(sink: BinaryIO, node, encoding: str = "utf-8") -> None:
    """Render node and write the encoded markup to a binary sink.

    The whole tree is rendered before anything is written. Sinks that
    accept only part of the bytes per call (raw or non-blocking streams)
    are written to again until everything is out. If the write fails the
    sink may hold part of the output; nothing is rolled back.

    Args:
        sink: Binary file-like object whose ``write(bytes)`` returns the
            number of bytes written, as io streams do.
        node: Root node to render.
        encoding: Text encoding for the markup.

    Raises:
        MarkupWriteError: If the sink raises OSError or ValueError
            (for example a closed file), or stops accepting bytes
            before all of them are written.
    """
    data = render(node).encode(encoding)
    view = memoryview(data)
    written = 0
    try:
        while written < len(data):
            count = sink.write(view[written:])
            if not count:
                # None from a non-blocking raw stream means it would block
                raise BlockingIOError(f"sink accepted no bytes (write returned {count!r})")
            written += count
    except (OSError, ValueError) as e:
        LOGGER.debug("writing %d bytes to %r failed after %d: %s", len(data), sink, written, e)
        raise MarkupWriteError(
            f"Failed to write rendered markup to {sink!r} ({written} of {len(data)} bytes written)",
            original_error=e,
        ) from e
    LOGGER.debug("wrote %d bytes to %r", len(data), sink)
