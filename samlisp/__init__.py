# Core type aliases for samlisp's data model.
# Code and runtime values are plain Python objects:
# - Expression: bool | int | float | Symbol | tuple[Expression, ...]
# - LispValue:  bool | int | float | list[LispValue] | BuiltIn | Lambda
#
# Syntactic lists are tuples and runtime lists are Python lists, so the two
# never compare equal by accident.

from typing import Any, Callable

# Parsed source form
Expression = Any
# Runtime value alias
LispValue = Any

# Evaluator function type: passed to builtins so they can evaluate operands
EvaluatorFn = Callable[..., LispValue]
