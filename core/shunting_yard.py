"""core/shunting_yard.py - 中缀 Token 流转后缀（RPN）队列"""
from collections import deque
import logging

from core.errors import StructureError
from core.token_system import TokenType

logger = logging.getLogger(__name__)


def shunting_yard(tokens):
    """
    调度场算法
    Args:
        tokens: 中缀 Token 的可迭代对象（通常是 Lexer）
    Returns:
        deque: 后缀顺序的 Token 队列
    Raises:
        StructureError: 右括号找不到匹配的左括号
        LexError: 由 Lexer 在迭代过程中抛出
    """
    out = deque()
    operators = []  # 栈顶为列表末尾

    for token in tokens:
        if token.type == TokenType.NUMBER:
            out.append(token)
        elif token.type == TokenType.PAREN_LEFT:
            operators.append(token)
        elif token.type == TokenType.PAREN_RIGHT:
            _close_parenthesis(operators, out)
        elif token.type == TokenType.OPERATOR:
            _push_operator(token, operators, out)
        else:
            raise TypeError(f"Unexpected token type: {token.type}")

    # 剩余操作符按栈顺序全部输出
    while operators:
        out.append(operators.pop())

    return out


def _close_parenthesis(operators, out):
    while operators:
        token = operators.pop()
        if token.type != TokenType.PAREN_LEFT:
            out.append(token)
            continue

        # 左括号前面是函数标记时，这对括号就是它的参数列表
        if operators and operators[-1].type == TokenType.OPERATOR and operators[-1].operator.is_function:
            out.append(operators.pop())
        return

    logger.debug("Closing parenthesis without a matching opening parenthesis")
    raise StructureError("Unbalanced parentheses: unexpected ')'")


def _push_operator(token, operators, out):
    incoming = token.operator

    # 函数标记直接入栈，等待其参数列表闭合
    if not incoming.is_function:
        while operators and operators[-1].type == TokenType.OPERATOR:
            top = operators[-1].operator
            if top.precedence > incoming.precedence or \
                    (top.precedence == incoming.precedence and not incoming.is_right_associative):
                out.append(operators.pop())
            else:
                break

    operators.append(token)
