"""The distinguished Error value.

Evaluation never unwinds on a runtime failure; the failing sub-expression
yields an ErrorValue instead, and forms that observe one pass it outward.
"""

from __future__ import annotations

from cinder.types.errors import CinderError


class ErrorValue:
    __slots__ = ("kind", "message")

    def __init__(self, kind: str, message: str):
        self.kind = kind
        self.message = message

    @classmethod
    def from_exception(cls, exc: CinderError) -> ErrorValue:
        return cls(exc.kind, str(exc))

    def __eq__(self, other: object) -> bool:
        return (
            isinstance(other, ErrorValue)
            and self.kind == other.kind
            and self.message == other.message
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.message))

    def __repr__(self) -> str:
        return f"ErrorValue({self.kind!r}, {self.message!r})"

    def __str__(self) -> str:
        return f"#<error {self.kind}: {self.message}>"
