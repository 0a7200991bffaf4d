"""
  Reader: lexer and parser for samlisp source text.

- Streaming, lazy lexing
- Emits the expression tree as plain Python values:

    - true / false -> bool
    - integers -> int (signed 64-bit range)
    - floats -> float
    - symbols -> Symbol
    - lists -> tuple (immutable; evaluated as applications)

  The evaluator never imports this module; any producer of the same tree works.
"""

from __future__ import annotations

import re
from typing import Iterator, Optional

from samlisp import Expression
from samlisp.errors import ParseError
from samlisp.types.symbol import Symbol
from samlisp.types.value import I64_MIN, I64_MAX


TOKEN_RE = re.compile(
    r"(?P<whitespace>\s+)"
    r"|(?P<comment>;[^\n]*)"  # single-line comment
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<symbol>[^\s();]+)"  # atoms: numbers, booleans, symbols
)

INT_RE = re.compile(r"[+-]?[0-9]+")
FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.[0-9]*|\.[0-9]+|[0-9]+(?=[eE]))(?:[eE][+-]?[0-9]+)?")

BOOLEANS: dict[str, bool] = {
    "true": True,
    "false": False,
}

Token = tuple[str, str, int]


def line_col(source: str, offset: int) -> tuple[int, int]:
    """1-based (line, column) of `offset` in `source`."""
    line = source.count("\n", 0, offset) + 1
    last_nl = source.rfind("\n", 0, offset)
    return line, offset - last_nl


def lex(source: str) -> Iterator[Token]:
    """Token generator: yields (token_type, token_value, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        # every character matches one of the groups
        assert m is not None
        kind = m.lastgroup
        if kind not in ("whitespace", "comment"):
            yield kind, m.group(kind), pos
        pos = m.end()


def parse_atom(text: str) -> Expression:
    if text in BOOLEANS:
        return BOOLEANS[text]
    if INT_RE.fullmatch(text):
        value = int(text)
        if not I64_MIN <= value <= I64_MAX:
            raise ValueError(f"Integer literal out of range: {text}")
        return value
    if FLOAT_RE.fullmatch(text):
        return float(text)
    return Symbol(text)


class TokenStream:
    def __init__(self, token_iter: Iterator[Token], source: str = ""):
        self.tokens = iter(token_iter)
        self.source = source
        self.buffer: list[Token] = []

    def peek(self) -> Optional[Token]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None
        return self.buffer[0]

    def advance(self) -> Optional[Token]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, None)

    def error(self, message: str, offset: int) -> ParseError:
        line, col = line_col(self.source, offset)
        return ParseError(message, line, col)

    def parse_expr(self) -> Expression:
        """Parse the next expression; returns None at end of input."""
        tok = self.advance()
        if tok is None:
            return None
        tok_type, tok_val, offset = tok

        if tok_type == "symbol":
            try:
                return parse_atom(tok_val)
            except ValueError as ex:
                raise self.error(str(ex), offset) from None

        if tok_type == "rparen":
            raise self.error("Unexpected ')'", offset)

        # lparen: read items up to the matching ')'
        items = []
        while True:
            nxt = self.peek()
            if nxt is None:
                raise self.error("Unmatched '('", offset)
            if nxt[0] == "rparen":
                self.advance()
                return tuple(items)
            items.append(self.parse_expr())

    def parse_all(self) -> Iterator[Expression]:
        while self.peek() is not None:
            yield self.parse_expr()


def read_all(source: str) -> list[Expression]:
    """Parse every top-level form of a script."""
    return list(TokenStream(lex(source), source).parse_all())


def read(source: str) -> Expression:
    """Parse source that holds exactly one expression."""
    forms = read_all(source)
    if not forms:
        raise ParseError("Expected an expression, found end of input", *line_col(source, len(source)))
    if len(forms) > 1:
        raise ParseError(f"Expected a single expression, found {len(forms)}", *line_col(source, len(source)))
    return forms[0]
