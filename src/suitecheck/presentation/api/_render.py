"""Diagnostic rendering helpers for assertions.

Internal module - not part of public API.
"""

from __future__ import annotations

from rich.pretty import pretty_repr

from suitecheck.infrastructure.reflection import has_str, is_error, value_type_name

LINE_PREFIX = "... "
CONTINUATION = "...     "


def indent(text: str, prefix: str) -> str:
    """Prefix every line of text, blank lines included."""
    return prefix + text.replace("\n", "\n" + prefix)


def render_value(label: str, value: object) -> str:
    """One labelled value of a failure block.

    Formats:
        ... label = None
        ... label type = repr
        ... label type = repr ('str form')    objects with their own __str__
        ... label str = (                      multi-line strings
        ...     'first\\n'
        ...     'second'
        ... )
    """
    if value is None:
        return f"{LINE_PREFIX}{label} = None"

    head = f"{LINE_PREFIX}{label} {value_type_name(value)} = "
    if isinstance(value, str) and "\n" in value.rstrip("\n"):
        body = "\n".join(f"{CONTINUATION}{line!r}" for line in value.splitlines(keepends=True))
        return f"{head}(\n{body}\n{LINE_PREFIX})"

    shown = pretty_repr(value)
    if not isinstance(value, str) and not is_error(value) and has_str(value):
        text = str(value)
        if text != shown:
            shown = f"{shown} ({text!r})"
    if "\n" in shown:
        first, _, rest = shown.partition("\n")
        return head + first + "\n" + indent(rest, CONTINUATION)
    return head + shown


def render_failure(
    params: tuple[object, ...],
    names: tuple[str, ...],
    comment: str | None,
    error: str,
) -> str:
    """Whole failure block: values, then comment, then usage fault."""
    lines = [render_value(name, value) for name, value in zip(names, params, strict=True)]
    if comment:
        lines.append(indent(comment, LINE_PREFIX))
    if error:
        lines.append(indent(error, LINE_PREFIX))
    return "\n".join(lines)
