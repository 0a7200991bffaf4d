"""
Lightweight indexer for samlisp files without evaluating code.

We scan the token stream for definitions of the form (def name ...) and
record whether the bound value is written as a (fn ...) literal. The reader
is run once over the whole buffer to report the first syntax error, if any.
Partial buffers are fine: the token scan never raises.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from samlisp.errors import ParseError
from samlisp.reader.parser import lex, line_col, read_all

TOO_DEEP_MSG = "Expression nested too deeply to read"


@dataclass
class SymbolDef:
    name: str
    kind: str  # "var" | "function"
    line: int
    col: int


@dataclass
class SyntaxProblem:
    message: str
    line: int
    col: int


@dataclass
class DocumentIndex:
    symbols: Dict[str, SymbolDef] = field(default_factory=dict)
    error: Optional[SyntaxProblem] = None


def _position_from_offset(text: str, offset: int) -> Tuple[int, int]:
    # Return (line, col), 0-based
    line, col = line_col(text, offset)
    return line - 1, col - 1


def build_index(text: str) -> DocumentIndex:
    idx = DocumentIndex()
    tokens = list(lex(text))

    for i, (kind, _, _) in enumerate(tokens):
        # (def name value ...)
        if kind != "lparen" or i + 2 >= len(tokens):
            continue
        head, name_tok = tokens[i + 1], tokens[i + 2]
        if head[:2] != ("symbol", "def") or name_tok[0] != "symbol":
            continue
        sym_kind = "var"
        if i + 4 < len(tokens):
            if tokens[i + 3][0] == "lparen" and tokens[i + 4][:2] == ("symbol", "fn"):
                sym_kind = "function"
        line, col = _position_from_offset(text, name_tok[2])
        idx.symbols[name_tok[1]] = SymbolDef(name=name_tok[1], kind=sym_kind, line=line, col=col)

    try:
        read_all(text)
    except ParseError as ex:
        idx.error = SyntaxProblem(message=ex.reason, line=ex.line - 1, col=ex.column - 1)
    except RecursionError:
        idx.error = SyntaxProblem(message=TOO_DEEP_MSG, line=0, col=0)

    return idx


# Builtin signatures for quick hover/completion without eval
BUILTIN_SIGNATURES: Dict[str, str] = {
    "def": "(def name value)",
    "fn": "(fn (params...) body)",
    "if": "(if condition then else)",
    "=": "(= a b &rest more)",
    "+": "(+ x &rest xs)",
    "-": "(- x &rest xs)",
    "*": "(* x &rest xs)",
    "/": "(/ x &rest xs)",
    "<": "(< a b)",
}
