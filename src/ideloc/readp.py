from __future__ import annotations

"""
A small backtracking parser-combinator library.

A parser maps its input to *every* way it can succeed: a list of
``(value, leftover)`` pairs. An empty list means no match, so parsers never
raise on bad input. Alternation with ``|`` keeps the results of both sides,
left side first; callers pick the candidate they want (usually the one that
consumed everything).

    p >> q     run p then q, keep q's value
    p << q     run p then q, keep p's value
    p | q      results of p followed by results of q
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar


T = TypeVar("T")
U = TypeVar("U")

Results = list[tuple[T, str]]


@dataclass(frozen=True, slots=True)
class ReadP(Generic[T]):
    run: Callable[[str], Results[T]]

    def __call__(self, text: str) -> Results[T]:
        return self.run(text)

    def __or__(self, other):
        if not isinstance(other, ReadP):
            return NotImplemented
        left, right = self.run, other.run
        return ReadP(lambda s: left(s) + right(s))

    def __rshift__(self, other):
        if not isinstance(other, ReadP):
            return NotImplemented
        return self.bind(lambda _: other)

    def __lshift__(self, other):
        if not isinstance(other, ReadP):
            return NotImplemented
        return self.bind(lambda v: other.map(lambda _: v))

    def bind(self, fn: Callable[[T], ReadP[U]]) -> ReadP[U]:
        run = self.run

        def go(s: str) -> Results[U]:
            out: Results[U] = []
            for v, rest in run(s):
                out.extend(fn(v).run(rest))
            return out

        return ReadP(go)

    def map(self, fn: Callable[[T], U]) -> ReadP[U]:
        run = self.run
        return ReadP(lambda s: [(fn(v), rest) for v, rest in run(s)])


def pure(value: T) -> ReadP[T]:
    return ReadP(lambda s: [(value, s)])


def satisfy(pred: Callable[[str], bool]) -> ReadP[str]:
    def go(s: str) -> Results[str]:
        if s and pred(s[0]):
            return [(s[0], s[1:])]
        return []

    return ReadP(go)


def char(c: str) -> ReadP[str]:
    if len(c) != 1:
        raise ValueError(f"char() expects a single character, got {c!r}")
    return satisfy(lambda x: x == c)


def munch1(pred: Callable[[str], bool]) -> ReadP[str]:
    """Longest non-empty prefix whose characters satisfy `pred`.

    Greedy: yields a single result, never the shorter prefixes.
    """

    def go(s: str) -> Results[str]:
        i = 0
        while i < len(s) and pred(s[i]):
            i += 1
        if i == 0:
            return []
        return [(s[:i], s[i:])]

    return ReadP(go)


def split_on(sep: str, follow: Callable[[str], bool] | None = None) -> ReadP[str]:
    """The text before each occurrence of `sep`, shortest first.

    The separator is consumed. With `follow`, only occurrences whose next
    character satisfies it are tried. Only real separator positions branch,
    so a line without `sep` costs a single scan.
    """
    if len(sep) != 1:
        raise ValueError(f"split_on() expects a single character, got {sep!r}")

    def go(s: str) -> Results[str]:
        out: Results[str] = []
        i = s.find(sep)
        while i != -1:
            nxt = s[i + 1 : i + 2]
            if follow is None or (nxt and follow(nxt)):
                out.append((s[:i], s[i + 1 :]))
            i = s.find(sep, i + 1)
        return out

    return ReadP(go)


def option(default: T, p: ReadP[T]) -> ReadP[T]:
    """`p`, or `default` without consuming input. Both are kept."""
    return p | pure(default)


def between(open_: ReadP[object], close: ReadP[object], p: ReadP[T]) -> ReadP[T]:
    return open_ >> p << close


def sequence(*parsers: ReadP[object]) -> ReadP[tuple[object, ...]]:
    """Run `parsers` one after another and collect their values in a tuple."""
    acc: ReadP[tuple[object, ...]] = pure(())
    for p in parsers:
        acc = acc.bind(lambda vs, p=p: p.map(lambda v, vs=vs: vs + (v,)))
    return acc


def complete(results: Results[T]) -> list[T]:
    """Values of the candidates that consumed the whole input."""
    return [v for v, rest in results if rest == ""]
