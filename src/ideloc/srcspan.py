from __future__ import annotations

import logging

from .errors import SpanParseError
from .readp import ReadP, between, char, complete, munch1, option, sequence, split_on
from .spans import SourceLoc, SourceSpan


logger = logging.getLogger(__name__)


def _is_digit(c: str) -> bool:
    return "0" <= c <= "9"


_natural: ReadP[int] = munch1(_is_digit).map(int)
_colon = char(":")


def _starts_location(c: str) -> bool:
    return _is_digit(c) or c == "("


# Any run of characters ended by a ':' that opens a line number or a '(',
# every such boundary tried, or no file name at all.
_file_path: ReadP[str] = option("", split_on(":", follow=_starts_location))


def _single_line(parts: tuple[object, ...]) -> SourceSpan:
    fp, line, c0, c1 = parts
    end = c0 if c1 is None else c1
    return SourceSpan(file=fp, start=SourceLoc(line, c0), end=SourceLoc(line, end))


def _multi_line(parts: tuple[object, ...]) -> SourceSpan:
    fp, start, _, end = parts
    return SourceSpan(file=fp, start=start, end=end)


# file:line:col[-col]
_single_line_span: ReadP[SourceSpan] = sequence(
    _file_path,
    _natural << _colon,
    _natural,
    option(None, char("-") >> _natural),
).map(_single_line)

_loc: ReadP[SourceLoc] = sequence(_natural << char(","), _natural).map(
    lambda lc: SourceLoc(*lc)
)

# file:(line,col)-(line,col)
_multi_line_span: ReadP[SourceSpan] = sequence(
    _file_path,
    between(char("("), char(")"), _loc),
    char("-"),
    between(char("("), char(")"), _loc),
).map(_multi_line)

_src_span = _single_line_span | _multi_line_span


def read_src_span(text: str) -> list[tuple[SourceSpan, str]]:
    """All the ways `text` starts with a compiler source span.

    Each candidate comes with the input it left unconsumed. An empty list
    means `text` does not start with a span.
    """
    return _src_span(text)


def find_src_span(text: str) -> SourceSpan | None:
    """The span spelled by the whole of `text`, if there is one."""
    spans = complete(read_src_span(text))
    if not spans:
        logger.debug("no source span in %r", text)
        return None
    return spans[0]


def parse_src_span(text: str) -> SourceSpan:
    span = find_src_span(text)
    if span is None:
        raise SpanParseError(
            text=text,
            message="not a source span",
            hint="expected FILE:LINE:COL[-COL] or FILE:(LINE,COL)-(LINE,COL)",
        )
    return span
