"""Node types that make up a markup tree.

Every node renders itself to a string on demand. Nodes hold no cached
output, so rendering the same tree twice gives the same markup.

    >>> str(attr("type", "text"))
    ' type="text"'
    >>> str(text("a < b"))
    'a &lt; b'
    >>> str(raw("<br>"))
    '<br>'

Anything with a ``render()`` method can be used as a node. Give it a
``place()`` method returning Placement.INSIDE to have it rendered into the
parent's opening tag; without one it is treated as content.
"""

from typing import Any, Callable, Iterable

from markupsafe import Markup

from hyper_markup.errors import GroupRenderError, InvalidAttributeError
from hyper_markup.html import _escape_str
from hyper_markup.placement import Placement

__all__ = [
    'Node',
    'Attribute',
    'Text',
    'Raw',
    'Group',
    'NodeFunc',
    'attr',
    'text',
    'textf',
    'raw',
    'group',
    'if_',
    'map_',
]


class Node:
    """Base class for markup nodes."""

    __slots__ = ()

    def render(self) -> str:
        raise NotImplementedError

    def place(self) -> Placement:
        return Placement.OUTSIDE

    def __str__(self):
        return self.render()

    # markupsafe / Jinja2 protocol: the rendered tree is already safe markup
    def __html__(self):
        return Markup(self.render())


class Attribute(Node):
    """A name-only or name="value" attribute.

    The value is written verbatim. Escape untrusted values with
    escape_html() before passing them in.
    """

    __slots__ = ('name', 'value')

    def __init__(self, name: str, value: str | None = None):
        if not name:
            raise InvalidAttributeError("attribute name must not be empty", name=name)
        self.name = name
        self.value = value

    def render(self) -> str:
        if self.value is None:
            return f' {self.name}'
        return f' {self.name}="{self.value}"'

    def place(self) -> Placement:
        return Placement.INSIDE

    def __repr__(self):
        if self.value is None:
            return f'Attribute({self.name!r})'
        return f'Attribute({self.name!r}, {self.value!r})'


class Text(Node):
    """Text content, escaped when rendered."""

    __slots__ = ('content',)

    def __init__(self, content: str):
        self.content = content

    def render(self) -> str:
        # Always escaped, even for Markup or node content
        return _escape_str(str(self.content))

    def __repr__(self):
        return f'Text({self.content!r})'


class Raw(Node):
    """Markup emitted exactly as given."""

    __slots__ = ('content',)

    def __init__(self, content: str):
        self.content = content

    def render(self) -> str:
        return str(self.content)

    def __repr__(self):
        return f'Raw({self.content!r})'


class Group(Node):
    """Nodes spliced into a parent element without a wrapper tag.

    A group has no markup of its own. Parent elements flatten it in place,
    so ``el("p", group([a, b]))`` renders like ``el("p", a, b)``. Rendering
    a group directly raises GroupRenderError.
    """

    __slots__ = ('children',)

    def __init__(self, children: Iterable[Any] = ()):
        self.children = tuple(children)

    def render(self) -> str:
        raise GroupRenderError(self)

    def __repr__(self):
        return f'Group({list(self.children)!r})'


class NodeFunc(Node):
    """A custom node backed by a render function.

    Args:
        fn: Zero-argument callable returning the node's markup.
        placement: Where the output goes in the parent element.

    Example:
        >>> now = NodeFunc(lambda: "<time>12:00</time>")
        >>> str(el("p", now))
        '<p><time>12:00</time></p>'
    """

    __slots__ = ('fn', 'placement')

    def __init__(self, fn: Callable[[], str], placement: Placement = Placement.OUTSIDE):
        self.fn = fn
        self.placement = placement

    def render(self) -> str:
        return self.fn()

    def place(self) -> Placement:
        return self.placement

    def __repr__(self):
        return f'NodeFunc({self.fn!r}, {self.placement})'


def attr(name: str, *value: str) -> Attribute:
    """Create an attribute node.

    One argument gives a name-only attribute (like ``required``), two give a
    name-value attribute (like ``class="header"``). Any other count raises
    InvalidAttributeError.

    Example:
        >>> str(attr("required"))
        ' required'
        >>> str(attr("class", "header"))
        ' class="header"'
    """
    match len(value):
        case 0:
            return Attribute(name)
        case 1:
            return Attribute(name, value[0])
        case _:
            raise InvalidAttributeError(
                "attribute must be just name or name and value pair",
                name=name,
                values=value,
            )


def text(content: str) -> Text:
    """Create a text node that renders the escaped content."""
    return Text(content)


def textf(format_string: str, /, *args, **kwargs) -> Text:
    """Create a text node from a str.format() template.

    The formatted result is escaped as a whole; the arguments are not
    escaped individually.

    Example:
        >>> str(textf("{} < {}", 1, 2))
        '1 &lt; 2'
    """
    return Text(format_string.format(*args, **kwargs))


def raw(content: str) -> Raw:
    """Create a node that renders content without escaping."""
    return Raw(content)


def group(children: Iterable[Any] = ()) -> Group:
    """Group nodes so they can be passed around as one child."""
    return Group(children)


def if_(condition, node):
    """Return node when condition is truthy, otherwise None.

    Elements skip None children, so this reads naturally inline:

        el("button", if_(busy, attr("disabled")), text("Save"))
    """
    return node if condition else None


def map_(items: Iterable[Any], fn: Callable[[Any], Any]) -> Group:
    """Build a group from fn(item) for each item.

    Example:
        >>> str(el("ul", map_(["a", "b"], lambda s: el("li", text(s)))))
        '<ul><li>a</li><li>b</li></ul>'
    """
    return Group(fn(item) for item in items)
