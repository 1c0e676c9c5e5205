"""Call-site namer: callable token -> (path, function name).

Only place that maps a test method to source text. Reporters receive it
as an injectable function so tests can fake it.
"""

from __future__ import annotations

import functools
import inspect
import os
from pathlib import Path

from suitecheck.domain.model.call_site import UNKNOWN_FUNCTION, UNKNOWN_PATH, CallSite
from suitecheck.infrastructure.reflection import strip_locals

# Paths are shown relative to the directory the process started in
_INIT_DIR = Path(os.getcwd())


def describe_call_site(token: object) -> CallSite:
    """Stable path and function name for a test method.

    Args:
        token: Function, bound method, functools.partial or decorated
            callable (followed through __wrapped__)

    Returns:
        CallSite with "<unknown path>" / "<unknown function>" parts when
        the token cannot be introspected
    """
    try:
        return _describe_cached(token)
    except TypeError:
        # unhashable token
        return CallSite(path=nice_func_path(token), function=nice_func_name(token))


@functools.lru_cache(maxsize=1024)
def _describe_cached(token: object) -> CallSite:
    return CallSite(path=nice_func_path(token), function=nice_func_name(token))


def nice_func_path(token: object) -> str:
    """Source file and first line, relative to the start directory."""
    code = getattr(_resolve(token), "__code__", None)
    if code is None:
        return UNKNOWN_PATH

    filename = Path(code.co_filename)
    try:
        shown = filename.relative_to(_INIT_DIR)
    except ValueError:
        shown = filename
    return f"{shown.as_posix()}:{code.co_firstlineno}"


def nice_func_name(token: object) -> str:
    """Qualified name without module path or "<locals>" segments.

    Example: MySuite.test_bar
    """
    qualname = getattr(_resolve(token), "__qualname__", None)
    if not isinstance(qualname, str) or not qualname:
        return UNKNOWN_FUNCTION
    return strip_locals(qualname)


def _resolve(token: object) -> object:
    """Unwrap partials, bound methods and decorators down to a function."""
    while isinstance(token, functools.partial):
        token = token.func
    token = getattr(token, "__func__", token)
    if not callable(token):
        return token
    try:
        return inspect.unwrap(token)
    except ValueError:
        # __wrapped__ cycle
        return token
