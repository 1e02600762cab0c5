## argvtriage — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

from typing import Any

import click


def render_default(value: Any) -> str:
    """Render a default so it converts back through the same path as a real argument."""
    if isinstance(value, str): return value
    if isinstance(value, bytes): return value.decode('utf-8', 'surrogateescape')
    # repr() of a float is the shortest text that round-trips to the identical value.
    if isinstance(value, float): return repr(value)
    return str(value)


def zero_value(kind) -> Any:
    if isinstance(kind, click.ParamType): return None
    try:
        return kind()
    except TypeError:
        return None


class ValueHandle:
    """String value that converts into a requested type, or a failed handle that never does."""

    __slots__ = ('_text', '_ok')

    def __init__(self, text: str):
        self._text = text
        self._ok = True

    @classmethod
    def failed(cls) -> "ValueHandle":
        handle = cls('')
        handle._ok = False
        return handle

    @property
    def text(self) -> str:
        return self._text

    def extract(self, kind=str) -> tuple[bool, Any]:
        """Convert with `click`'s type for `kind`; returns `(ok, value)` with a zero value on failure."""
        if not self._ok:
            return False, zero_value(kind)
        try:
            return True, click.types.convert_type(kind).convert(self._text, None, None)
        except (click.BadParameter, ValueError, ArithmeticError, TypeError):
            return False, zero_value(kind)

    def to(self, kind=str) -> Any:
        return self.extract(kind)[1]

    def __bool__(self) -> bool:
        return self._ok

    def __str__(self) -> str:
        return self._text

    def __eq__(self, other):
        if isinstance(other, ValueHandle):
            return (self._ok, self._text) == (other._ok, other._text)
        if isinstance(other, str):
            return self._ok and self._text == other
        return NotImplemented

    def __hash__(self):
        return hash((self._ok, self._text))

    def __repr__(self):
        return f"ValueHandle({self._text!r})" if self._ok else "ValueHandle.failed()"
