"""core/operators.py"""
import numpy as np
import logging

from core.errors import DivisionByZeroError
from core.token_system import OperatorKind

logger = logging.getLogger(__name__)


class Operators:
    """所有操作符的静态方法集合，统一返回 float"""

    # 一元操作符（弧度制）====================

    @staticmethod
    def sin(operand):
        return float(np.sin(operand))

    @staticmethod
    def cos(operand):
        return float(np.cos(operand))

    # 二元操作符====================

    @staticmethod
    def add(left, right):
        return float(np.add(left, right))

    @staticmethod
    def subtract(left, right):
        return float(np.subtract(left, right))

    @staticmethod
    def multiply(left, right):
        return float(np.multiply(left, right))

    @staticmethod
    def divide(left, right):
        """除数恰好为 0（含 -0.0）时报错，不返回 inf/nan"""
        if right == 0.0:
            raise DivisionByZeroError(f"Division by zero: {left!r} / {right!r}")
        return float(np.divide(left, right))

    @staticmethod
    def exponent(left, right):
        return float(np.power(np.float64(left), np.float64(right)))

    @staticmethod
    def modulus(left, right):
        """浮点取余，符号跟随被除数（C fmod 语义）"""
        return float(np.fmod(left, right))

    @staticmethod
    def max(left, right):
        # 一侧为 NaN 时返回另一侧
        return float(np.fmax(left, right))

    @staticmethod
    def get(kind):
        """按 OperatorKind 取对应的计算函数"""
        method = getattr(Operators, kind.value, None)
        if method is None:
            logger.error(f"No implementation for operator kind: {kind}")
        return method


UNARY_KINDS = frozenset({OperatorKind.SIN, OperatorKind.COS})
