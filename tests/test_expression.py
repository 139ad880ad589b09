import pytest

from asciidoxide.expression import (
    ExprError,
    InvalidSyntaxError,
    TypeMismatchError,
    evaluate_expression,
)


def test_numeric_comparison():
    attrs = {"level": "3"}
    assert evaluate_expression("{level} > 2", attrs) is True
    assert evaluate_expression("{level} >= 3", attrs) is True
    assert evaluate_expression("{level} == 3", attrs) is True
    assert evaluate_expression("{level} != 5", attrs) is True
    assert evaluate_expression("{level} < 2", attrs) is False
    assert evaluate_expression("{level} <= 3", attrs) is True


def test_string_comparison():
    attrs = {"env": "production"}
    assert evaluate_expression('{env} == "production"', attrs) is True
    assert evaluate_expression('{env} != "development"', attrs) is True
    assert evaluate_expression('"abc" < "def"', attrs) is True


def test_boolean_comparison():
    attrs = {"enabled": "true"}
    assert evaluate_expression("{enabled} == true", attrs) is True
    assert evaluate_expression("{enabled} == false", attrs) is False


def test_nil_comparison():
    attrs = {"set": "value"}
    assert evaluate_expression("{unset} == nil", attrs) is True
    assert evaluate_expression("{set} != nil", attrs) is True


def test_literal_numbers():
    assert evaluate_expression("5 > 3", {}) is True
    assert evaluate_expression("3.14 >= 3.14", {}) is True
    assert evaluate_expression("10 == 10", {}) is True


def test_quoted_strings():
    assert evaluate_expression('"hello" == "hello"', {}) is True
    assert evaluate_expression("'foo' != 'bar'", {}) is True


def test_invalid_expression():
    with pytest.raises(InvalidSyntaxError):
        evaluate_expression("no operator here", {})


def test_invalid_expression_is_expr_error():
    with pytest.raises(ExprError):
        evaluate_expression("no operator here", {})


def test_cross_type_string_to_number():
    attrs = {"count": "42"}
    assert evaluate_expression("{count} == 42", attrs) is True
    assert evaluate_expression("42 == {count}", attrs) is True


def test_whitespace_handling():
    attrs = {"x": "5"}
    assert evaluate_expression("  {x}  ==  5  ", attrs) is True
    assert evaluate_expression("{x}>3", attrs) is True


def test_quoted_number_coerces_against_number():
    assert evaluate_expression("'42' == 42", {}) is True
    assert evaluate_expression("42 < '100'", {}) is True


def test_number_against_word_compares_as_text():
    assert evaluate_expression("5 == abc", {}) is False
    assert evaluate_expression("5 != abc", {}) is True


def test_null_keyword_is_nil():
    assert evaluate_expression("{missing} == null", {}) is True
    assert evaluate_expression("NIL == null", {}) is True


def test_boolean_ordering_is_rejected():
    with pytest.raises(TypeMismatchError):
        evaluate_expression("true < false", {})


def test_nil_ordering_is_rejected():
    with pytest.raises(TypeMismatchError):
        evaluate_expression("{missing} < 3", {})


def test_boolean_against_number_is_rejected():
    with pytest.raises(TypeMismatchError):
        evaluate_expression("true == 5", {})


def test_boolean_attribute_is_case_insensitive():
    assert evaluate_expression("{flag} == true", {"flag": "TRUE"}) is True