"""Parsing of conditional preprocessor directive lines."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

_DIRECTIVE_PREFIXES = ("ifdef::", "ifndef::", "ifeval::", "endif::")


class Combinator(Enum):
    """How several attribute names combine in a conditional check."""

    AND = "and"
    OR = "or"


@dataclass(frozen=True)
class Ifdef:
    """``ifdef::attr[]`` or the single-line ``ifdef::attr[content]``."""

    attributes: Tuple[str, ...]
    combinator: Combinator
    inline_content: Optional[str] = None


@dataclass(frozen=True)
class Ifndef:
    """``ifndef::attr[]`` or the single-line ``ifndef::attr[content]``."""

    attributes: Tuple[str, ...]
    combinator: Combinator
    inline_content: Optional[str] = None


@dataclass(frozen=True)
class Ifeval:
    """``ifeval::[expression]``."""

    expression: str


@dataclass(frozen=True)
class Endif:
    """``endif::[]`` or ``endif::attr[]``."""

    attribute: Optional[str] = None


@dataclass(frozen=True)
class Escaped:
    """A backslash-escaped directive; holds the line without the backslash."""

    content: str


Directive = Union[Ifdef, Ifndef, Ifeval, Endif, Escaped]


def parse_directive(line: str) -> Optional[Directive]:
    """Parse a line as a preprocessor directive, or return None."""
    trimmed = line.lstrip()

    if trimmed.startswith("\\"):
        rest = trimmed[1:]
        return Escaped(rest) if rest.startswith(_DIRECTIVE_PREFIXES) else None

    for parser in (_parse_ifdef, _parse_ifndef, _parse_ifeval, _parse_endif):
        directive = parser(trimmed)
        if directive is not None:
            return directive
    return None


def _parse_ifdef(line: str) -> Optional[Ifdef]:
    if not line.startswith("ifdef::"):
        return None
    body = _parse_conditional_body(line[len("ifdef::"):])
    return Ifdef(*body) if body is not None else None


def _parse_ifndef(line: str) -> Optional[Ifndef]:
    if not line.startswith("ifndef::"):
        return None
    body = _parse_conditional_body(line[len("ifndef::"):])
    return Ifndef(*body) if body is not None else None


def _parse_conditional_body(
    text: str,
) -> Optional[Tuple[Tuple[str, ...], Combinator, Optional[str]]]:
    attr_part, bracket, rest = text.partition("[")
    if not bracket:
        return None
    close = rest.rfind("]")
    if close < 0:
        return None
    parsed = _parse_attribute_list(attr_part)
    if parsed is None:
        return None
    attributes, combinator = parsed
    content = rest[:close]
    return attributes, combinator, content or None


def _parse_attribute_list(text: str) -> Optional[Tuple[Tuple[str, ...], Combinator]]:
    text = text.strip()
    if not text:
        return None
    for separator, combinator in (("+", Combinator.AND), (",", Combinator.OR)):
        if separator in text:
            names = tuple(
                name for name in (part.strip() for part in text.split(separator)) if name
            )
            return (names, combinator) if names else None
    return (text,), Combinator.OR


def _parse_ifeval(line: str) -> Optional[Ifeval]:
    prefix = "ifeval::["
    if not line.startswith(prefix):
        return None
    rest = line[len(prefix):]
    close = rest.rfind("]")
    if close < 0:
        return None
    return Ifeval(rest[:close])


def _parse_endif(line: str) -> Optional[Endif]:
    if not line.startswith("endif::"):
        return None
    attr_part, bracket, rest = line[len("endif::"):].partition("[")
    if not bracket or "]" not in rest:
        return None
    return Endif(attr_part.strip() or None)