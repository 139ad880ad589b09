import pytest

from asciidoxide.directive import (
    Combinator,
    Endif,
    Escaped,
    Ifdef,
    Ifeval,
    Ifndef,
    parse_directive,
)


def test_parse_ifdef_block_form():
    assert parse_directive("ifdef::foo[]") == Ifdef(("foo",), Combinator.OR, None)


def test_parse_ifdef_inline_form():
    assert parse_directive("ifdef::foo[some content]") == Ifdef(
        ("foo",), Combinator.OR, "some content"
    )


def test_parse_ifdef_multi_attr_or():
    assert parse_directive("ifdef::a,b,c[]") == Ifdef(
        ("a", "b", "c"), Combinator.OR, None
    )


def test_parse_ifdef_multi_attr_and():
    assert parse_directive("ifdef::a+b[]") == Ifdef(("a", "b"), Combinator.AND, None)


def test_parse_ifndef_block_form():
    assert parse_directive("ifndef::bar[]") == Ifndef(("bar",), Combinator.OR, None)


def test_parse_ifeval():
    assert parse_directive("ifeval::[{level} > 2]") == Ifeval("{level} > 2")


def test_parse_endif_empty():
    assert parse_directive("endif::[]") == Endif(None)


def test_parse_endif_with_attr():
    assert parse_directive("endif::foo[]") == Endif("foo")


def test_parse_escaped_directive():
    assert parse_directive("\\ifdef::foo[]") == Escaped("ifdef::foo[]")


@pytest.mark.parametrize("line", ["just a regular line", "= A heading", ""])
def test_parse_non_directive(line):
    assert parse_directive(line) is None


def test_parse_with_leading_whitespace():
    assert parse_directive("  ifdef::foo[]") == Ifdef(("foo",), Combinator.OR, None)


def test_inline_content_uses_last_closing_bracket():
    assert parse_directive("ifdef::foo[a]b]") == Ifdef(("foo",), Combinator.OR, "a]b")


def test_attribute_names_are_trimmed_and_empty_ones_dropped():
    assert parse_directive("ifdef::a, ,b[]") == Ifdef(("a", "b"), Combinator.OR, None)


@pytest.mark.parametrize(
    "line",
    [
        "ifdef::[]",
        "ifdef::+[]",
        "ifdef::foo",
        "ifdef::foo[",
        "ifeval::[x",
        "endif::foo",
        "endif::[",
        "\\just a backslash",
    ],
)
def test_malformed_lines_are_not_directives(line):
    assert parse_directive(line) is None


def test_escaped_endif():
    assert parse_directive("\\endif::[]") == Escaped("endif::[]")


def test_directive_is_immutable():
    directive = parse_directive("endif::[]")
    with pytest.raises(AttributeError):
        directive.attribute = "x"  # type: ignore[union-attr]
    assert directive == Endif(None)