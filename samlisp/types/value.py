"""Textual rendering and kind dispatch for runtime values."""

from __future__ import annotations

from samlisp import LispValue
from samlisp.types.function import BuiltIn, Lambda

BOOL = "bool"
INTEGER = "integer"
FLOAT = "float"
LIST = "list"
FUNCTION = "function"

I64_MIN = -(2 ** 63)
I64_MAX = 2 ** 63 - 1


def kind_of(value: LispValue) -> str:
    # bool before int: True is an int to Python but never an integer here
    match value:
        case bool():
            return BOOL
        case int():
            return INTEGER
        case float():
            return FLOAT
        case list():
            return LIST
        case BuiltIn() | Lambda():
            return FUNCTION
    raise TypeError(f"Not a samlisp value: {value!r}")


def wrap_i64(n: int) -> int:
    """Reduce an int to the signed 64-bit range with two's complement wrap-around."""
    return ((n - I64_MIN) % 2 ** 64) + I64_MIN


def render(value: LispValue) -> str:
    """Render a value the way the REPL prints it."""
    match value:
        case bool():
            return "true" if value else "false"
        case int():
            return str(value)
        case float():
            return repr(value)
        case list():
            return "(" + " ".join(render(v) for v in value) + ")"
        case BuiltIn() | Lambda():
            return str(value)
    raise TypeError(f"Not a samlisp value: {value!r}")
