"""core/errors.py - 表达式求值的异常体系"""


class ExpressionError(ValueError):
    """Base exception for invalid expressions."""
    pass


class LexError(ExpressionError):
    """Raised when the input contains an unrecognized character, word or number literal."""

    def __init__(self, message, position=None, text=None):
        super().__init__(message)
        self.position = position
        self.text = text


class StructureError(ExpressionError):
    """Raised when parentheses are unbalanced."""
    pass


class ArityError(ExpressionError):
    """Raised when an operator has fewer operands than it needs."""
    pass


class DivisionByZeroError(ExpressionError):
    """Raised when dividing by exactly zero."""
    pass


class ShapeError(ExpressionError):
    """Raised when evaluation does not leave exactly one value."""
    pass
