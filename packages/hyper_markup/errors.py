"""Markup exceptions with contextual error messages."""


class MarkupError(Exception):
    """Base exception for all markup errors."""


class InvalidAttributeError(MarkupError, ValueError):
    """An attribute was constructed with an empty name or too many values."""

    def __init__(self, message: str, name: str | None = None, values: tuple = ()):
        self.name = name
        self.values = values

        full_message = message
        if name is not None:
            full_message += f"\n\n  Attribute: {name!r}"
        if values:
            full_message += f"\n  Values: {', '.join(repr(v) for v in values)}"

        super().__init__(full_message)


class GroupRenderError(MarkupError, TypeError):
    """A group was rendered on its own instead of through a parent element."""

    def __init__(self, group=None):
        self.group = group
        super().__init__(
            "cannot render group\n\n"
            "  Groups only exist to be flattened into a parent element. "
            "Pass the group as a child of el() or a tag helper."
        )


class MarkupWriteError(MarkupError, OSError):
    """Writing rendered markup to a sink failed."""

    def __init__(self, message: str, original_error: Exception | None = None):
        self.original_error = original_error

        full_message = message
        if original_error:
            full_message += f"\n\n  Original error: {type(original_error).__name__}: {original_error}"

        Exception.__init__(self, full_message)
