"""RPN表达式求值器 - 调用统一的Operators类"""
import numpy as np
import logging

from core.errors import ArityError, ShapeError, StructureError
from core.operators import Operators, UNARY_KINDS
from core.token_system import TokenType, format_rpn

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(rpn_queue):
        """
        从左到右消费后缀队列
        Args:
            rpn_queue: 后缀顺序的 Token 序列
        Returns:
            float: 唯一的结果值
        Raises:
            ArityError / DivisionByZeroError / ShapeError / StructureError
        """
        stack = []

        # inf/nan 按 IEEE 语义传播，不发出 RuntimeWarning
        with np.errstate(all='ignore'):
            for token in rpn_queue:
                if token.type == TokenType.NUMBER:
                    stack.append(token.value)
                elif token.type == TokenType.OPERATOR:
                    stack.append(RPNEvaluator._apply(token.operator, stack))
                else:
                    # 未闭合的 '(' 会被调度场算法原样输出到这里
                    logger.debug(f"Parenthesis left in RPN: {format_rpn(rpn_queue)}")
                    raise StructureError("Unbalanced parentheses: unclosed '('")

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            logger.debug(f"RPN expression: {format_rpn(rpn_queue)}")
            raise ShapeError(f"Malformed expression: {len(stack)} values left after evaluation")

        return stack[0]

    @staticmethod
    def _apply(operator, stack):
        # ================== 一元操作符处理 ==================
        if operator.arity == 1:
            if len(stack) < 1:
                logger.debug(f"Insufficient operands for {operator.literal}")
                raise ArityError(f"Insufficient operands for '{operator.literal}'")
            if operator.kind not in UNARY_KINDS:
                raise ArityError(f"Unexpected unary operator: '{operator.literal}'")
            operand = stack.pop()
            return Operators.get(operator.kind)(operand)

        # ================== 二元操作符处理 ==================
        if operator.arity == 2:
            if len(stack) < 2:
                logger.debug(f"Insufficient operands for {operator.literal}")
                raise ArityError(f"Insufficient operands for '{operator.literal}'")
            if operator.kind in UNARY_KINDS:
                raise ArityError(f"Unexpected binary operator: '{operator.literal}'")
            right = stack.pop()
            left = stack.pop()
            return Operators.get(operator.kind)(left, right)

        raise ArityError(f"Unsupported arity {operator.arity} for '{operator.literal}'")
