from __future__ import annotations

from dataclasses import dataclass

from .uri import Uri


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """A protocol position.

    Line and character are 0-based, as on the language server wire format.
    """

    line: int
    character: int


@dataclass(frozen=True, slots=True)
class Range:
    """Half-open range [start, end) in a single document."""

    start: Position
    end: Position


# Stand-in range for diagnostics whose location could not be recovered.
NO_RANGE = Range(Position(0, 0), Position(100000, 0))


@dataclass(frozen=True, slots=True)
class Location:
    uri: Uri
    range: Range


def show_position(pos: Position) -> str:
    return f"{pos.line + 1}:{pos.character + 1}"


@dataclass(frozen=True, slots=True, order=True)
class SourceLoc:
    """A point in compiler output. Line and column are 1-based."""

    line: int
    column: int


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """A span as printed by the compiler, e.g. ``Foo.hs:(3,5)-(4,2)``.

    ``file`` is empty when the text carried no file name.
    """

    file: str
    start: SourceLoc
    end: SourceLoc

    @property
    def is_single_line(self) -> bool:
        return self.start.line == self.end.line

    def format(self) -> str:
        if self.is_single_line:
            loc = f"{self.start.line}:{self.start.column}"
            if self.end.column != self.start.column:
                loc += f"-{self.end.column}"
        else:
            loc = (
                f"({self.start.line},{self.start.column})"
                f"-({self.end.line},{self.end.column})"
            )
        if self.file == "":
            return loc
        return f"{self.file}:{loc}"


def span_to_range(span: SourceSpan | None) -> Range:
    """Convert a 1-based compiler span to a 0-based protocol range.

    ``None`` (nothing could be parsed) maps to :data:`NO_RANGE`.
    """
    if span is None:
        return NO_RANGE
    return Range(
        Position(max(span.start.line - 1, 0), max(span.start.column - 1, 0)),
        Position(max(span.end.line - 1, 0), max(span.end.column - 1, 0)),
    )
