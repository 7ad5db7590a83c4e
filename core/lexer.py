"""core/lexer.py - 把文本按需切分成 Token"""
import logging

from core.errors import LexError
from core.token_system import Token, OPERATOR_DEFINITIONS, FUNCTION_WORDS, CONSTANT_WORDS

logger = logging.getLogger(__name__)


class Lexer:
    """
    惰性词法分析器，每次 next() 只前进到下一个 Token。
    输入在构造时统一转成小写，因此关键字大小写不敏感。
    """

    def __init__(self, text):
        self.data = text.lower()
        self.position = 0

    def __iter__(self):
        return self

    def __next__(self):
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    def next_token(self):
        """返回下一个 Token；到达末尾返回 None，无法识别时抛出 LexError"""
        while self.position < len(self.data):
            c = self.data[self.position]

            if c == '(':
                self.position += 1
                return Token.paren_left()
            if c == ')':
                self.position += 1
                return Token.paren_right()
            if c.isdigit() and c.isascii():
                return self._parse_number()
            # 逗号只是函数参数的视觉分隔
            if c.isspace() or c == ',':
                self.position += 1
                continue
            if c in OPERATOR_DEFINITIONS:
                self.position += 1
                return Token.op(OPERATOR_DEFINITIONS[c])
            return self._parse_word()

        return None

    def _peek(self, length):
        return self.data[self.position:self.position + length]

    def _parse_number(self):
        start = self.position
        while self.position < len(self.data):
            c = self.data[self.position]
            if not ((c.isdigit() and c.isascii()) or c == '.'):
                break
            self.position += 1

        literal = self.data[start:self.position]
        try:
            value = float(literal)
        except ValueError:
            logger.debug(f"Malformed number literal '{literal}' at {start}")
            raise LexError(f"Malformed number literal: '{literal}'", position=start, text=literal) from None
        return Token.number(value)

    def _parse_word(self):
        for word, value in CONSTANT_WORDS:
            if self._peek(len(word)) == word:
                self.position += len(word)
                return Token.number(value)

        for word, operator in FUNCTION_WORDS:
            if self._peek(len(word)) == word:
                self.position += len(word)
                return Token.op(operator)

        c = self.data[self.position]
        logger.debug(f"Unrecognized input '{c}' at {self.position}")
        raise LexError(f"Unrecognized input '{c}' at position {self.position}",
                       position=self.position, text=c)


def tokenize(text):
    """把整段文本物化为 Token 列表"""
    return list(Lexer(text))
