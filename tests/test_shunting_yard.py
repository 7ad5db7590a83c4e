"""
Tests for infix to postfix conversion.

Run with: pytest tests/test_shunting_yard.py -v
"""

import pytest

from core.errors import LexError, StructureError
from core.lexer import Lexer
from core.shunting_yard import shunting_yard
from core.token_system import format_rpn, TokenType


def postfix(text):
    return format_rpn(shunting_yard(Lexer(text)))


class TestPrecedence:
    """Tests for operator ordering."""

    def test_single_operator(self):
        """Should place the operator after both operands."""
        assert postfix("2 + 3") == "2.0 3.0 +"

    def test_higher_precedence_on_the_right(self):
        """Should emit the tighter operator first."""
        assert postfix("1 + 2 * 3") == "1.0 2.0 3.0 * +"

    def test_higher_precedence_on_the_left(self):
        """Should pop the tighter operator before pushing a looser one."""
        assert postfix("2 * 3 + 4") == "2.0 3.0 * 4.0 +"

    def test_left_associative_chain(self):
        """Should fold equal-precedence left-associative operators eagerly."""
        assert postfix("8 - 3 - 2") == "8.0 3.0 - 2.0 -"

    def test_right_associative_chain(self):
        """Should defer right-associative operators."""
        assert postfix("2 ^ 2 ^ 3") == "2.0 2.0 3.0 ^ ^"

    def test_reference_expression(self):
        """Should convert the classic shunting-yard example."""
        assert postfix("3 + 4 × 2 ÷ ( 1 − 5 ) ^ 2 ^ 3") == \
            "3.0 4.0 2.0 × 1.0 5.0 − 2.0 3.0 ^ ^ ÷ +"


class TestParentheses:
    """Tests for grouping and function calls."""

    def test_grouping(self):
        """Should honour parentheses over precedence."""
        assert postfix("(1 + 2) * 3") == "1.0 2.0 + 3.0 *"

    def test_function_after_arguments(self):
        """Should emit a function after its arguments."""
        assert postfix("max(2, 3)") == "2.0 3.0 max"

    def test_nested_functions(self):
        """Should close each function with its own argument list."""
        assert postfix("sin(max(2, 3) / 3 × pi)").startswith("2.0 3.0 max 3.0 / ")
        assert postfix("sin(max(2, 3) / 3 × pi)").endswith("× sin")

    def test_parentheses_never_in_output_when_balanced(self):
        """Should drop parentheses from the output queue."""
        queue = shunting_yard(Lexer("((1)) + (2)"))
        assert all(t.type not in (TokenType.PAREN_LEFT, TokenType.PAREN_RIGHT) for t in queue)

    def test_unbalanced_closing_parenthesis(self):
        """Should fail when ')' has no matching '('."""
        with pytest.raises(StructureError):
            postfix("1 + 2)")

    def test_unclosed_parenthesis_is_passed_through(self):
        """Should leave an unclosed '(' in the queue for the evaluator to reject."""
        queue = shunting_yard(Lexer("(1 + 2"))
        assert queue[-1].type == TokenType.PAREN_LEFT


class TestFailures:
    """Tests for failures raised during conversion."""

    def test_lexer_failure_propagates(self):
        """Should propagate a lexer failure as a hard error."""
        with pytest.raises(LexError):
            postfix("2 + 3 $")

    def test_empty_input(self):
        """Should produce an empty queue for empty input."""
        assert len(shunting_yard(Lexer(""))) == 0
