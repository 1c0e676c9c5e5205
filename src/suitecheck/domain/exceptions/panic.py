"""Abrupt fault carrying an arbitrary payload."""

from __future__ import annotations


class Panic(Exception):  # noqa: N818
    """Abrupt fault whose payload may be any value, including None.

    Raise it where a plain exception cannot express the payload:

        raise Panic("BOOM")
        raise Panic(None)

    Panics/PanicMatches compare the payload, not the carrier.

    Attributes:
        payload: The value the fault carries
    """

    def __init__(self, payload: object) -> None:
        self.payload = payload
        super().__init__(payload)

    def __repr__(self) -> str:
        """Show the payload."""
        return f"Panic({self.payload!r})"
