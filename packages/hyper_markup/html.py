"""HTML escaping for Hyper Markup."""

__all__ = [
    'escape_html',
]

# Ampersand first so the entities added below are not escaped again
_ENTITIES = (
    ('&', '&amp;'),
    ('<', '&lt;'),
    ('>', '&gt;'),
    ('"', '&quot;'),
    ("'", '&#x27;'),
)


def _escape_str(s: str) -> str:
    """Escape the five markup characters in s, unconditionally."""
    for char, entity in _ENTITIES:
        s = s.replace(char, entity)
    return s


def escape_html(value) -> str:
    """Escape a value for safe HTML output.

    Replaces HTML special characters with their entity equivalents:
    - & → &amp;
    - < → &lt;
    - > → &gt;
    - " → &quot;
    - ' → &#x27;

    Escaping is not idempotent: already escaped text is escaped again.
    If the value has an __html__ method (like markupsafe.Markup), returns
    that directly without escaping. Text nodes do not take this shortcut;
    they always escape their content.

    Args:
        value: The value to escape. Can be any type.

    Returns:
        Escaped HTML string.

    Example:
        >>> escape_html("<script>alert('XSS')</script>")
        "&lt;script&gt;alert(&#x27;XSS&#x27;)&lt;/script&gt;"
        >>> escape_html("&amp;")
        '&amp;amp;'
    """
    if value is None:
        return ''
    if hasattr(value, '__html__'):
        return str(value.__html__())
    return _escape_str(str(value))
