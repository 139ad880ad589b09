"""Line-by-line evaluation of conditional preprocessor directives.

Supported directives:

- ``ifdef::attr[]`` / ``ifdef::attr[content]``: include if the attribute is set
- ``ifndef::attr[]`` / ``ifndef::attr[content]``: include if it is not set
- ``ifeval::[expression]``: include if the expression evaluates to true
- ``endif::[]``: close a conditional block

Escaped directives (``\\ifdef::attr[]``) are emitted without the backslash.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Mapping, Optional, Sequence

from asciidoxide.conditional import evaluate_ifdef, evaluate_ifndef
from asciidoxide.directive import (
    Combinator,
    Endif,
    Escaped,
    Ifdef,
    Ifeval,
    Ifndef,
    parse_directive,
)
from asciidoxide.expression import ExprError, evaluate_expression
from asciidoxide.span import SourceSpan

_DIRECTIVE_PATTERNS = ("ifdef::", "ifndef::", "ifeval::", "endif::")

# Approximate byte length of ``endif::[]`` used for unmatched-endif spans.
_ENDIF_SPAN_LENGTH = 8


class PreprocessSeverity(Enum):
    """Severity level of a preprocessing diagnostic."""

    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class PreprocessDiagnostic:
    """An issue found while preprocessing."""

    span: SourceSpan
    message: str
    severity: PreprocessSeverity


@dataclass
class PreprocessResult:
    """Preprocessed content and the diagnostics produced on the way.

    When the input holds no directive pattern at all, ``content`` is the
    input string itself, unchanged.
    """

    content: str
    diagnostics: List[PreprocessDiagnostic] = field(default_factory=list)


@dataclass
class _Frame:
    is_active: bool
    start_offset: int
    start_line: int


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def _lines(text: str) -> Iterator[str]:
    """Yield lines split on ``\\n`` with a trailing ``\\r`` removed.

    A final newline does not start another, empty line.
    """
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    for part in parts:
        yield part[:-1] if part.endswith("\r") else part


class _Preprocessor:
    def __init__(self, attributes: Mapping[str, str]) -> None:
        self._attributes = attributes
        self._stack: List[_Frame] = []
        self._output: List[str] = []
        self._diagnostics: List[PreprocessDiagnostic] = []

    @property
    def _active(self) -> bool:
        return all(frame.is_active for frame in self._stack)

    def _emit(self, text: str) -> None:
        self._output.append(text)
        self._output.append("\n")

    def process_line(self, line: str, line_num: int, line_start: int) -> None:
        directive = parse_directive(line)
        match directive:
            case None:
                if self._active:
                    self._emit(line)
            case Escaped(content):
                if self._active:
                    self._emit(content)
            case Ifdef(names, combinator, inline_content):
                condition = evaluate_ifdef(names, combinator, self._attributes)
                self._conditional(condition, inline_content, line_num, line_start)
            case Ifndef(names, combinator, inline_content):
                condition = evaluate_ifndef(names, combinator, self._attributes)
                self._conditional(condition, inline_content, line_num, line_start)
            case Ifeval(expression):
                self._ifeval(expression, line_num, line_start)
            case Endif():
                self._endif(line_start)

    def _conditional(
        self,
        condition: bool,
        inline_content: Optional[str],
        line_num: int,
        line_start: int,
    ) -> None:
        active = self._active and condition
        if inline_content is not None:
            if active:
                self._emit(inline_content)
        else:
            self._stack.append(_Frame(active, line_start, line_num))

    def _ifeval(self, expression: str, line_num: int, line_start: int) -> None:
        try:
            condition = evaluate_expression(expression, self._attributes)
        except ExprError as error:
            self._diagnostics.append(
                PreprocessDiagnostic(
                    span=SourceSpan(line_start, line_start + _byte_len(expression)),
                    message=f"Invalid ifeval expression: {error!r}",
                    severity=PreprocessSeverity.ERROR,
                )
            )
            condition = False
        self._stack.append(_Frame(self._active and condition, line_start, line_num))

    def _endif(self, line_start: int) -> None:
        if self._stack:
            self._stack.pop()
            return
        self._diagnostics.append(
            PreprocessDiagnostic(
                span=SourceSpan(line_start, line_start + _ENDIF_SPAN_LENGTH),
                message="Unmatched endif directive",
                severity=PreprocessSeverity.WARNING,
            )
        )

    def finish(self) -> PreprocessResult:
        for frame in self._stack:
            self._diagnostics.append(
                PreprocessDiagnostic(
                    span=SourceSpan(frame.start_offset, frame.start_offset + 1),
                    message=(
                        "Unclosed conditional directive starting at line "
                        f"{frame.start_line}"
                    ),
                    severity=PreprocessSeverity.WARNING,
                )
            )
        return PreprocessResult("".join(self._output), self._diagnostics)


def _contains_directive_pattern(text: str) -> bool:
    return any(pattern in text for pattern in _DIRECTIVE_PATTERNS)


def preprocess(input_text: str, attributes: Mapping[str, str]) -> PreprocessResult:
    """Evaluate the conditional directives in ``input_text``.

    ``attributes`` holds the document attributes that conditions test.
    Every emitted line ends with a newline. Malformed ``ifeval``
    expressions, unmatched ``endif`` lines and unclosed conditionals are
    reported as diagnostics rather than raised.
    """
    if not _contains_directive_pattern(input_text):
        return PreprocessResult(input_text, [])

    state = _Preprocessor(attributes)
    total = _byte_len(input_text)
    offset = 0
    for line_num, line in enumerate(_lines(input_text), start=1):
        state.process_line(line, line_num, offset)
        offset += _byte_len(line)
        if offset < total:
            offset += 1
    return state.finish()


__all__: Sequence[str] = (
    "Combinator",
    "PreprocessDiagnostic",
    "PreprocessResult",
    "PreprocessSeverity",
    "preprocess",
)