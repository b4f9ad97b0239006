"""Helpers for common HTML elements and attributes.

Element helpers take child nodes, attribute helpers take the value:

    from hyper_markup import text
    from hyper_markup.tags import a, href, li, ul

    ul(li(a(href("/"), text("Home"))))

Names that clash with Python keywords or builtins get a trailing
underscore (``class_``, ``id_``, ``input_``, ``type_``). Attributes that
share a name with an element get an ``_attr`` suffix (``title_attr``,
``style_attr``). Fall back to el() and attr() for anything missing here.
"""

from typing import Iterator

from hyper_markup.element import Element, el
from hyper_markup.nodes import Attribute, NodeFunc, attr


def _element(tag: str, name: str | None = None):
    """Create an element helper for tag."""

    def make(*children) -> Element:
        return el(tag, *children)

    make.__name__ = make.__qualname__ = name or tag
    make.__doc__ = f"Create a <{tag}> element."
    return make


def _value_attr(attr_name: str, name: str | None = None):
    """Create a helper for a name="value" attribute."""

    def make(value: str) -> Attribute:
        return attr(attr_name, value)

    make.__name__ = make.__qualname__ = name or attr_name
    make.__doc__ = f'Create a {attr_name}="..." attribute.'
    return make


def _bool_attr(attr_name: str):
    """Create a helper for a name-only attribute."""

    def make() -> Attribute:
        return attr(attr_name)

    make.__name__ = make.__qualname__ = attr_name
    make.__doc__ = f"Create a boolean {attr_name} attribute."
    return make


# Elements

a = _element('a')
article = _element('article')
body = _element('body')
br = _element('br')
button = _element('button')
div = _element('div')
em = _element('em')
footer = _element('footer')
form = _element('form')
h1 = _element('h1')
h2 = _element('h2')
h3 = _element('h3')
head = _element('head')
header = _element('header')
hr = _element('hr')
html = _element('html')
img = _element('img')
input_ = _element('input', 'input_')
label = _element('label')
li = _element('li')
link = _element('link')
main = _element('main')
meta = _element('meta')
nav = _element('nav')
ol = _element('ol')
option = _element('option')
p = _element('p')
script = _element('script')
section = _element('section')
select = _element('select')
span = _element('span')
strong = _element('strong')
style = _element('style')
table = _element('table')
td = _element('td')
textarea = _element('textarea')
th = _element('th')
title = _element('title')
tr = _element('tr')
ul = _element('ul')

# Attributes

action = _value_attr('action')
alt = _value_attr('alt')
charset = _value_attr('charset')
class_ = _value_attr('class', 'class_')
content = _value_attr('content')
for_ = _value_attr('for', 'for_')
href = _value_attr('href')
id_ = _value_attr('id', 'id_')
lang = _value_attr('lang')
method = _value_attr('method')
name = _value_attr('name')
placeholder = _value_attr('placeholder')
rel = _value_attr('rel')
src = _value_attr('src')
style_attr = _value_attr('style', 'style_attr')
tabindex = _value_attr('tabindex')
target = _value_attr('target')
title_attr = _value_attr('title', 'title_attr')
type_ = _value_attr('type', 'type_')
value = _value_attr('value')

autofocus = _bool_attr('autofocus')
checked = _bool_attr('checked')
defer = _bool_attr('defer')
disabled = _bool_attr('disabled')
multiple = _bool_attr('multiple')
readonly = _bool_attr('readonly')
required = _bool_attr('required')
selected = _bool_attr('selected')


def data(key: str, value: str) -> Attribute:
    """Create a data-* attribute.

    Example:
        >>> str(data("user-id", "42"))
        ' data-user-id="42"'
    """
    return attr(f'data-{key}', value)


def aria(key: str, value: str) -> Attribute:
    """Create an aria-* attribute."""
    return attr(f'aria-{key}', value)


def _class_names(values) -> Iterator[str]:
    """Yield class names from strings, dicts and nested lists, in order."""
    stack = [iter(values)]
    while stack:
        for value in stack[-1]:
            if isinstance(value, str):
                yield from value.split()
            elif isinstance(value, dict):
                yield from (key for key, on in value.items() if on)
            elif isinstance(value, (list, tuple)):
                stack.append(iter(value))
                break
        else:
            stack.pop()


def classes(*values) -> Attribute | None:
    """Create a class attribute from strings, lists and dicts.

    Strings may hold several space-separated names, dict keys are kept
    when their value is truthy, and lists and tuples nest. Repeated names
    are written once. Returns None when no name is left, so the element
    gets no class attribute at all.

    Example:
        >>> str(div(classes("btn", {"active": True, "disabled": False}), text("x")))
        '<div class="btn active">x</div>'
        >>> str(div(classes({"hidden": False}), text("x")))
        '<div>x</div>'
    """
    names = dict.fromkeys(_class_names(values))
    if not names:
        return None
    return attr('class', ' '.join(names))


def styles(properties: dict | None = None, /, **declarations) -> Attribute | None:
    """Create a style attribute from CSS properties.

    Properties come from a dict, keyword arguments, or both; keyword names
    have underscores turned into hyphens. None values are left out.
    Returns None when nothing is left.

    Example:
        >>> str(styles({"color": "red"}, font_size="14px"))
        ' style="color:red;font-size:14px"'
    """
    merged = dict(properties or {})
    merged.update((key.replace('_', '-'), value) for key, value in declarations.items())
    rendered = ';'.join(f'{key}:{value}' for key, value in merged.items() if value is not None)
    if not rendered:
        return None
    return attr('style', rendered)


def doctype(sibling) -> NodeFunc:
    """Prefix sibling with the HTML5 doctype declaration.

    Example:
        >>> str(doctype(html(body(p(text("hi"))))))
        '<!doctype html><html><body><p>hi</p></body></html>'
    """
    return NodeFunc(lambda: '<!doctype html>' + sibling.render())
