"""核心模块 - Token系统、词法分析、调度场转换和RPN评估器"""
from .token_system import (
    TokenType, OperatorKind, Associativity, Operator, Token,
    OPERATOR_DEFINITIONS, FUNCTION_WORDS, CONSTANT_WORDS, FUNCTION_PRECEDENCE, format_rpn
)
from .errors import (
    ExpressionError, LexError, StructureError, ArityError, DivisionByZeroError, ShapeError
)
from .lexer import Lexer, tokenize
from .shunting_yard import shunting_yard
from .operators import Operators
from .rpn_evaluator import RPNEvaluator
from .pipeline import evaluate, try_evaluate, to_postfix

__all__ = [
    'TokenType', 'OperatorKind', 'Associativity', 'Operator', 'Token',
    'OPERATOR_DEFINITIONS', 'FUNCTION_WORDS', 'CONSTANT_WORDS', 'FUNCTION_PRECEDENCE', 'format_rpn',
    'ExpressionError', 'LexError', 'StructureError', 'ArityError', 'DivisionByZeroError', 'ShapeError',
    'Lexer', 'tokenize', 'shunting_yard', 'Operators', 'RPNEvaluator',
    'evaluate', 'try_evaluate', 'to_postfix'
]
