from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class SpanParseError(Exception):
    text: str
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        base = f"{self.message}: {self.text!r}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base
