from samlisp import Expression
from samlisp.evaluation.special_forms import SPECIAL_FORMS
from samlisp.types.symbol import Symbol
from samlisp.types.value import render

# ----------------- ANSI colors -----------------
RESET = "\033[0m"
COLOR_SYMBOL = "\033[94m"
COLOR_LITERAL = "\033[92m"
COLOR_SPECIAL_FORM = "\033[90m"

# ----------------- Defaults -----------------
DEFAULT_OPTIONS = {
    "max_line_length": 80,
    "max_depth": 8,
    "color": False,
}


# ----------------- Colorize utility -----------------
def colorize(obj: Expression, options: dict = DEFAULT_OPTIONS) -> str:
    if isinstance(obj, Symbol):
        name = str(obj)
        if not options.get("color", False):
            return name
        if name in SPECIAL_FORMS:
            return f"{COLOR_SPECIAL_FORM}{name}{RESET}"
        return f"{COLOR_SYMBOL}{name}{RESET}"
    text = render(obj)
    if options.get("color", False):
        return f"{COLOR_LITERAL}{text}{RESET}"
    return text


# ----------------- Pretty printer -----------------
def pprint_expr(
    expr: Expression,
    indent: int = 0,
    options: dict = DEFAULT_OPTIONS,
    _current_depth: int = 0,
) -> str:
    """Render an expression tree as source text, breaking long lists across lines."""
    if _current_depth >= options.get("max_depth", 8):
        return "…"

    if not isinstance(expr, tuple):
        return colorize(expr, options)

    if not expr:
        return "()"

    parts = [pprint_expr(e, indent + 1, options, _current_depth + 1) for e in expr]

    single_line = "(" + " ".join(parts) + ")"
    # ANSI codes do not take up columns
    visible = single_line
    if options.get("color", False):
        for code in (RESET, COLOR_SYMBOL, COLOR_LITERAL, COLOR_SPECIAL_FORM):
            visible = visible.replace(code, "")
    if len(visible) + indent * 2 <= options.get("max_line_length", 80) and "\n" not in visible:
        return single_line

    aligned_lines = ["(" + parts[0]]
    for part in parts[1:]:
        aligned_lines.append("  " * (indent + 1) + part)
    aligned_lines[-1] += ")"
    return "\n".join(aligned_lines)
