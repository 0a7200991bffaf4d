from __future__ import annotations
import logging
import os


# Defaults
_DEFAULT_PROMPT = "sam's lisp >> "
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_RECURSION_LIMIT = 10_000


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        raise ValueError(f"{var} must be an integer, got {raw!r}") from None


def get_prompt() -> str:
    return str_from_env('SAMLISP_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    name = str_from_env('SAMLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"SAMLISP_LOG_LEVEL: unknown level {name!r}")
    return level


def get_recursion_limit() -> int:
    return int_from_env('SAMLISP_RECURSION_LIMIT', _DEFAULT_RECURSION_LIMIT)
