"""Hyper Markup - declarative HTML node trees rendered to strings.

Build a tree bottom-up and render it:

    from hyper_markup import attr, el, text

    page = el("ul", el("li", text("one")), el("li", text("two")))
    str(page)  # '<ul><li>one</li><li>two</li></ul>'

Public API exports:
- Node types and constructors (from hyper_markup.nodes, hyper_markup.element)
- Placement (from hyper_markup.placement)
- Rendering and output (from hyper_markup.writer)
- Escaping (from hyper_markup.html)
- Exceptions (from hyper_markup.errors)

Tag and attribute helpers live in hyper_markup.tags.
"""

from hyper_markup.element import Element, el, flatten
from hyper_markup.errors import (
    GroupRenderError,
    InvalidAttributeError,
    MarkupError,
    MarkupWriteError,
)
from hyper_markup.html import escape_html
from hyper_markup.nodes import (
    Attribute,
    Group,
    Node,
    NodeFunc,
    Raw,
    Text,
    attr,
    group,
    if_,
    map_,
    raw,
    text,
    textf,
)
from hyper_markup.placement import Placement, placement_of
from hyper_markup.writer import render, write

# Short alias, as in hyper
escape = escape_html

__all__ = [
    # Nodes
    'Node',
    'Element',
    'Attribute',
    'Text',
    'Raw',
    'Group',
    'NodeFunc',
    # Constructors
    'el',
    'attr',
    'text',
    'textf',
    'raw',
    'group',
    'if_',
    'map_',
    'flatten',
    # Placement
    'Placement',
    'placement_of',
    # Rendering
    'render',
    'write',
    # Escaping
    'escape',
    'escape_html',
    # Exceptions
    'MarkupError',
    'InvalidAttributeError',
    'GroupRenderError',
    'MarkupWriteError',
]
