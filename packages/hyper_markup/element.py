"""Elements and the composition of their children into markup."""

from typing import Any, Iterable, Iterator

from hyper_markup.nodes import Group, Node
from hyper_markup.placement import Placement, placement_of

__all__ = ['Element', 'el', 'flatten']


class Element(Node):
    """An element with a tag name and ordered children.

    Children are rendered lazily, each time the element is rendered:

    - Groups are flattened in place, however deeply nested.
    - None children are skipped.
    - INSIDE children (attributes) go into the opening tag, in their
      original relative order, ahead of all content.
    - OUTSIDE children (everything else) go between the tags.

    An element without content self-closes (``<br />``, ``<input type="text" />``),
    whatever its tag name. Any content, even an empty text node, produces
    an open/close pair.

    Trees must be acyclic. An element that contains itself never finishes
    rendering.
    """

    __slots__ = ('tag', 'children')

    def __init__(self, tag: str, children: Iterable[Any] = ()):
        self.tag = tag
        self.children = tuple(children)

    def render(self) -> str:
        if not self.children:
            return f'<{self.tag} />'

        inside = []
        outside = []
        for child in flatten(self.children):
            if placement_of(child) is Placement.INSIDE:
                inside.append(child.render())
            else:
                outside.append(child.render())

        if not outside:
            return f'<{self.tag}{"".join(inside)} />'
        return f'<{self.tag}{"".join(inside)}>{"".join(outside)}</{self.tag}>'

    def __repr__(self):
        return f'Element({self.tag!r}, {list(self.children)!r})'


def flatten(children: Iterable[Any]) -> Iterator[Any]:
    """Yield children in order with groups expanded in place.

    Uses an explicit stack of iterators so group nesting depth is not
    bounded by the interpreter's recursion limit. None entries are dropped.

    Example:
        >>> list(flatten([text("a"), group([text("b"), group([text("c")])])]))
        [Text('a'), Text('b'), Text('c')]
    """
    stack = [iter(children)]
    while stack:
        for child in stack[-1]:
            if child is None:
                continue
            if isinstance(child, Group):
                stack.append(iter(child.children))
                break
            yield child
        else:
            stack.pop()


def el(tag: str, *children) -> Element:
    """Create an element node with a tag name and child nodes.

    Use this if no helper in hyper_markup.tags exists for the tag.

    Example:
        >>> str(el("input", attr("type", "text"), attr("required")))
        '<input type="text" required />'
        >>> str(el("ul", el("li", text("one")), el("li", text("two"))))
        '<ul><li>one</li><li>two</li></ul>'
    """
    return Element(tag, children)
