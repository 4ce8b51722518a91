"""词法分析：字符串 -> Token 序列"""
import logging
import re

from core.errors import UnexpectedCharacterError
from core.token_system import Token, TokenType, OPERATOR_CHARS

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?|\.\d+", re.ASCII)
_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

_PUNCTUATION = {
    '(': TokenType.LEFT_PAREN,
    ')': TokenType.RIGHT_PAREN,
    ',': TokenType.COMMA,
}


def tokenize(text):
    """
    从左到右贪婪匹配数字、标识符、单字符操作符/标点
    Args:
        text: 已规范化的表达式字符串
    Returns:
        Token 列表（空输入返回空列表，由调用方判定 EmptyExpression）
    Raises:
        UnexpectedCharacterError: 任一位置无法匹配
    """
    tokens = []
    pos = 0
    length = len(text)

    while pos < length:
        char = text[pos]

        if char.isspace():
            pos += 1
            continue

        match = _NUMBER_RE.match(text, pos)
        if match:
            tokens.append(Token(TokenType.NUMBER, match.group(), pos))
            pos = match.end()
            continue

        match = _IDENTIFIER_RE.match(text, pos)
        if match:
            tokens.append(Token(TokenType.IDENTIFIER, match.group(), pos))
            pos = match.end()
            continue

        if char in OPERATOR_CHARS:
            tokens.append(Token(TokenType.OPERATOR, char, pos))
        elif char in _PUNCTUATION:
            tokens.append(Token(_PUNCTUATION[char], char, pos))
        else:
            raise UnexpectedCharacterError(pos, char)
        pos += 1

    logger.debug(f"Tokenized {length} chars into {len(tokens)} tokens")
    return tokens
