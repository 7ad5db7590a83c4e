"""core/token_system.py"""
from enum import Enum
import math


class TokenType(Enum):
    NUMBER = "number"            # 数值（含常数 pi / e）
    OPERATOR = "operator"        # 操作符或函数
    PAREN_LEFT = "paren_left"    # (
    PAREN_RIGHT = "paren_right"  # )


class OperatorKind(Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    EXPONENT = "exponent"
    MODULUS = "modulus"

    # 函数类操作符，后面总是跟着括号参数列表
    SIN = "sin"
    COS = "cos"
    MAX = "max"


class Associativity(Enum):
    LEFT = "left"
    RIGHT = "right"


# 函数调用专用的优先级，普通操作符不得使用
FUNCTION_PRECEDENCE = 5


class Operator:
    """单个操作符出现的描述（不可变）"""

    __slots__ = ('kind', 'arity', 'associativity', 'precedence', 'literal')

    def __init__(self, kind, arity, associativity, precedence, literal):
        object.__setattr__(self, 'kind', kind)
        object.__setattr__(self, 'arity', arity)
        object.__setattr__(self, 'associativity', associativity)
        object.__setattr__(self, 'precedence', precedence)
        object.__setattr__(self, 'literal', literal)

    def __setattr__(self, name, value):
        raise AttributeError(f"Operator is immutable, cannot set '{name}'")

    @property
    def is_function(self):
        """是否为函数调用标记（sin / cos / max）"""
        return self.precedence == FUNCTION_PRECEDENCE

    @property
    def is_right_associative(self):
        return self.associativity is Associativity.RIGHT

    def __eq__(self, other):
        if not isinstance(other, Operator):
            return NotImplemented
        return (self.kind, self.arity, self.associativity, self.precedence, self.literal) == \
               (other.kind, other.arity, other.associativity, other.precedence, other.literal)

    def __hash__(self):
        return hash((self.kind, self.arity, self.associativity, self.precedence, self.literal))

    def __repr__(self):
        return (f"Operator({self.kind.name}, arity={self.arity}, "
                f"{self.associativity.name}, prec={self.precedence}, '{self.literal}')")


class Token:
    def __init__(self, token_type, value=None, operator=None):
        self.type = token_type
        self.value = value          # 仅 NUMBER 使用
        self.operator = operator    # 仅 OPERATOR 使用

    @classmethod
    def number(cls, value):
        return cls(TokenType.NUMBER, value=float(value))

    @classmethod
    def op(cls, operator):
        return cls(TokenType.OPERATOR, operator=operator)

    @classmethod
    def paren_left(cls):
        return cls(TokenType.PAREN_LEFT)

    @classmethod
    def paren_right(cls):
        return cls(TokenType.PAREN_RIGHT)

    @property
    def literal(self):
        """诊断用的源文本表示"""
        if self.type == TokenType.NUMBER:
            return repr(self.value)
        if self.type == TokenType.OPERATOR:
            return self.operator.literal
        if self.type == TokenType.PAREN_LEFT:
            return '('
        return ')'

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value, self.operator) == (other.type, other.value, other.operator)

    def __hash__(self):
        return hash((self.type, self.value, self.operator))

    def __repr__(self):
        if self.type == TokenType.NUMBER:
            return f"Token(NUMBER, {self.value!r})"
        if self.type == TokenType.OPERATOR:
            return f"Token(OPERATOR, {self.operator!r})"
        return f"Token({self.type.name})"


def _binary(kind, associativity, precedence, literal):
    return Operator(kind, 2, associativity, precedence, literal)


# 单字符操作符表（词法分析时直接映射）
OPERATOR_DEFINITIONS = {
    '+': _binary(OperatorKind.ADD, Associativity.LEFT, 2, '+'),
    '-': _binary(OperatorKind.SUBTRACT, Associativity.LEFT, 2, '-'),
    '−': _binary(OperatorKind.SUBTRACT, Associativity.LEFT, 2, '−'),   # unicode minus
    'x': _binary(OperatorKind.MULTIPLY, Associativity.LEFT, 3, 'x'),
    '×': _binary(OperatorKind.MULTIPLY, Associativity.LEFT, 3, '×'),
    '/': _binary(OperatorKind.DIVIDE, Associativity.LEFT, 3, '/'),
    '÷': _binary(OperatorKind.DIVIDE, Associativity.LEFT, 3, '÷'),
    '^': _binary(OperatorKind.EXPONENT, Associativity.RIGHT, 4, '^'),
    '%': _binary(OperatorKind.MODULUS, Associativity.LEFT, 3, '%'),
}

# 关键字/多字符操作符表，按顺序做前缀匹配（'**' 必须排在 '*' 之前）
FUNCTION_WORDS = [
    ('**', _binary(OperatorKind.EXPONENT, Associativity.RIGHT, 4, '**')),
    ('*', _binary(OperatorKind.MULTIPLY, Associativity.LEFT, 3, '*')),
    ('sin', Operator(OperatorKind.SIN, 1, Associativity.RIGHT, FUNCTION_PRECEDENCE, 'sin')),
    ('cos', Operator(OperatorKind.COS, 1, Associativity.RIGHT, FUNCTION_PRECEDENCE, 'cos')),
    ('max', Operator(OperatorKind.MAX, 2, Associativity.LEFT, FUNCTION_PRECEDENCE, 'max')),
]

# 命名常数（'pi' 先于 'e' 检查）
CONSTANT_WORDS = [
    ('pi', math.pi),
    ('e', math.e),
]


def format_rpn(tokens):
    """把后缀队列渲染成空格分隔的字符串，例如 '2 3 max'"""
    return ' '.join(token.literal for token in tokens)
