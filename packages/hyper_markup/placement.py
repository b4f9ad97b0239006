"""Where a rendered child lands inside its parent element."""

from enum import Enum

__all__ = ['Placement', 'placement_of']


class Placement(Enum):
    """Placement of a child's markup relative to the parent's opening tag.

    INSIDE children (attributes) are written into the opening tag,
    OUTSIDE children (content) between the opening and closing tags.
    """

    OUTSIDE = 'outside'
    INSIDE = 'inside'


def placement_of(node) -> Placement:
    """Classify a node as INSIDE or OUTSIDE its parent's opening tag.

    Nodes declare their placement with a ``place()`` method. Nodes without
    a callable ``place`` (including a plain ``place`` field) are treated as
    content, so custom node types only need ``render()``.

    Example:
        >>> placement_of(attr("id", "main"))
        <Placement.INSIDE: 'inside'>
        >>> placement_of(text("hello"))
        <Placement.OUTSIDE: 'outside'>
    """
    place = getattr(node, 'place', None)
    if not callable(place):
        return Placement.OUTSIDE
    return place()
