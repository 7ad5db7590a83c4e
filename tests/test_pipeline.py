"""
End-to-end tests for expression evaluation.

Run with: pytest tests/test_pipeline.py -v
"""

import math
from concurrent.futures import ThreadPoolExecutor

import pytest

from core import evaluate, try_evaluate, to_postfix
from core.errors import (
    ExpressionError, LexError, StructureError, ArityError, DivisionByZeroError, ShapeError
)


class TestBinaryOperators:
    """Tests for single binary expressions."""

    @pytest.mark.parametrize("text, expected", [
        ("2 + 2", 4.0),
        ("2 - 2", 0.0),
        ("2 * 2", 4.0),
        ("2 × 2", 4.0),
        ("2 / 2", 1.0),
        ("2 ^ 2", 4.0),
        ("2 ** 2", 4.0),
        ("2 % 2", 0.0),
    ])
    def test_matches_host_arithmetic(self, text, expected):
        """Should match direct arithmetic."""
        assert evaluate(text) == expected

    def test_division_by_zero(self):
        """Should fail instead of returning infinity."""
        with pytest.raises(DivisionByZeroError):
            evaluate("2 / 0")


class TestPrecedenceAndAssociativity:
    """Tests for ordering rules."""

    def test_exponent_is_right_associative(self):
        """Should evaluate 2 ^ 2 ^ 3 as 2 ^ 8."""
        assert evaluate("2 ^ 2 ^ 3") == 256.0

    def test_subtraction_is_left_associative(self):
        """Should evaluate 10 - 4 - 3 left to right."""
        assert evaluate("10 - 4 - 3") == 3.0

    def test_division_is_left_associative(self):
        """Should evaluate 100 / 10 / 5 left to right."""
        assert evaluate("100 / 10 / 5") == 2.0

    def test_multiplication_before_addition(self):
        """Should bind multiplication tighter on either side."""
        assert evaluate("1 + 2 * 3") == 7.0
        assert evaluate("2 * 3 + 4") == 10.0

    def test_exponent_before_multiplication(self):
        """Should bind exponent tighter than multiplication."""
        assert evaluate("2 ^ 3 * 4") == 32.0

    def test_reference_expression(self):
        """Should match the classic mixed-precedence example."""
        assert evaluate("3 + 4 × 2 ÷ ( 1 − 5 ) ^ 2 ^ 3") == pytest.approx(3.0001220703125)

    def test_parentheses_override_precedence(self):
        """Should evaluate grouped sub-expressions first."""
        assert evaluate("(1 + 2) * 3") == 9.0


class TestFunctions:
    """Tests for function calls and constants."""

    def test_max(self):
        """Should evaluate max with comma-separated arguments."""
        assert evaluate("max(2, 3)") == 3.0

    def test_sin_and_cos(self):
        """Should evaluate sin(0) and cos(0)."""
        assert evaluate("sin(0)") == 0.0
        assert evaluate("cos(0)") == 1.0

    def test_nested_functions(self):
        """Should evaluate nested functions with arithmetic."""
        result = evaluate("sin ( max ( 2, 3 ) ÷ 3 × pi )")
        assert result == pytest.approx(0.0, abs=1e-15)
        assert result == pytest.approx(math.sin(math.pi))

    def test_function_inside_arithmetic(self):
        """Should treat a function call as a single operand."""
        assert evaluate("1 + max(2, 5) * 2") == 11.0

    def test_constants(self):
        """Should evaluate pi and e."""
        assert evaluate("pi") == math.pi
        assert evaluate("2 * e") == 2 * math.e

    def test_case_insensitive(self):
        """Should accept upper-case keywords."""
        assert evaluate("MAX(1, COS(0))") == 1.0


class TestFailures:
    """Tests for invalid input."""

    def test_dangling_operator(self):
        """Should fail on a trailing operator."""
        with pytest.raises(ArityError):
            evaluate("2 +")

    def test_unknown_word(self):
        """Should fail on a bare word that is not a keyword."""
        with pytest.raises(ExpressionError):
            evaluate("exit")

    def test_unrecognized_character(self):
        """Should fail rather than ignore trailing garbage."""
        with pytest.raises(LexError):
            evaluate("2 + 3 $")

    def test_malformed_number(self):
        """Should fail on a number with two decimal points."""
        with pytest.raises(LexError):
            evaluate("1.2.3 + 1")

    def test_unbalanced_parentheses(self):
        """Should fail on unbalanced parentheses either way."""
        with pytest.raises(StructureError):
            evaluate("(1 + 2))")
        with pytest.raises(StructureError):
            evaluate("((1 + 2)")

    def test_two_numbers_without_operator(self):
        """Should fail when values are left over."""
        with pytest.raises(ShapeError):
            evaluate("2 3")

    def test_empty_input(self):
        """Should fail on empty input."""
        with pytest.raises(ShapeError):
            evaluate("   ")

    def test_unary_minus_is_not_supported(self):
        """Should fail on a leading minus sign."""
        with pytest.raises(ArityError):
            evaluate("-3")

    def test_expression_errors_are_value_errors(self):
        """Should raise ValueError subclasses."""
        with pytest.raises(ValueError):
            evaluate("2 / 0")

    def test_non_string_input(self):
        """Should reject non-string input with TypeError."""
        with pytest.raises(TypeError):
            evaluate(42)


class TestHelpers:
    """Tests for try_evaluate and to_postfix."""

    def test_try_evaluate_success(self):
        """Should return the value on success."""
        assert try_evaluate("1 + 1") == 2.0

    def test_try_evaluate_failure(self):
        """Should return None on failure."""
        assert try_evaluate("2 +") is None
        assert try_evaluate("2 / 0") is None

    def test_to_postfix(self):
        """Should render the postfix queue with source literals."""
        assert to_postfix("max(1, 2) ** 2") == "1.0 2.0 max 2.0 **"


class TestStatelessness:
    """Tests for independence between calls."""

    def test_idempotent(self):
        """Should give the same result when evaluated twice."""
        text = "3 + 4 × 2 ÷ ( 1 − 5 ) ^ 2 ^ 3"
        assert evaluate(text) == evaluate(text)

    def test_failure_does_not_affect_next_call(self):
        """Should not carry state over from a failed call."""
        with pytest.raises(ExpressionError):
            evaluate("(1 +")
        assert evaluate("1 + 1") == 2.0

    def test_concurrent_calls(self):
        """Should evaluate independently from several threads."""
        texts = ["2 ^ 2 ^ 3", "max(2, 3)", "10 - 4 - 3", "cos(0)"] * 25
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(evaluate, texts))
        assert results == [256.0, 3.0, 3.0, 1.0] * 25
