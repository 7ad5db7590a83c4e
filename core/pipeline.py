"""core/pipeline.py - 词法分析 -> 调度场 -> RPN 求值"""
import logging

from core.errors import ExpressionError
from core.lexer import Lexer
from core.rpn_evaluator import RPNEvaluator
from core.shunting_yard import shunting_yard
from core.token_system import format_rpn

logger = logging.getLogger(__name__)


def _check_text(text):
    if not isinstance(text, str):
        raise TypeError(f"Expression must be a string, got {type(text).__name__}")


def evaluate(text):
    """
    求值一条中缀表达式
    Args:
        text: 表达式文本，例如 '3 + 4 × 2'
    Returns:
        float
    Raises:
        ExpressionError: 表达式无效（具体子类见 core.errors）
    """
    _check_text(text)
    rpn_queue = shunting_yard(Lexer(text))
    return RPNEvaluator.evaluate(rpn_queue)


def try_evaluate(text):
    """与 evaluate 相同，但失败时返回 None"""
    try:
        return evaluate(text)
    except ExpressionError as e:
        logger.debug(f"Invalid expression {text!r}: {type(e).__name__}: {e}")
        return None


def to_postfix(text):
    """返回表达式的后缀形式字符串，仅用于诊断"""
    _check_text(text)
    return format_rpn(shunting_yard(Lexer(text)))
