class LispError(Exception):
    """ Base class for all samlisp errors"""
    pass


class ParseError(LispError):
    """ Raised when source text is not a well-formed expression"""

    def __init__(self, message: str, line: int = 1, column: int = 1):
        super().__init__(f"{message} (line {line}, column {column})")
        self.reason = message
        self.line = line
        self.column = column


class EvalError(LispError):
    """ Base class for failures raised while evaluating an expression"""
    pass


class UnknownSymbol(EvalError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""

    def __init__(self, name: str):
        super().__init__(f"Unknown symbol '{name}'")
        self.name = name


class NotAFunction(EvalError):
    """ Raised when the head of an application does not evaluate to a function"""

    def __init__(self, rendered: str):
        super().__init__(f"{rendered} is not a function")
        self.rendered = rendered


class EmptyApplication(EvalError):
    """ Raised when evaluating the empty list"""

    def __init__(self):
        super().__init__("Cannot evaluate an empty list")


class ArityMismatch(EvalError):
    """ Raised when the number of arguments passed to a function is incorrect"""

    def __init__(self, form: str, expected: int, actual: int, at_least: bool = False):
        bound = f"at least {expected}" if at_least else str(expected)
        noun = "argument" if expected == 1 else "arguments"
        super().__init__(f"'{form}' takes {bound} {noun}, got {actual}")
        self.form = form
        self.expected = expected
        self.actual = actual
        self.at_least = at_least


class TypeMismatch(EvalError):
    """ Raised when an argument has the wrong kind of value"""

    def __init__(self, form: str, expected: str, got: str):
        super().__init__(f"'{form}' expected {expected}, got '{got}'")
        self.form = form
        self.expected = expected
        self.got = got


class MalformedSpecialForm(EvalError):
    """ Raised when a special form's unevaluated operands have the wrong shape"""

    def __init__(self, form: str, reason: str):
        super().__init__(f"Malformed '{form}': {reason}")
        self.form = form
        self.reason = reason


class DivisionByZero(EvalError):
    """ Raised on integer division by zero"""

    def __init__(self, form: str = "/"):
        super().__init__(f"'{form}' integer division by zero")
        self.form = form
