"""表达式词法分析 - 字符串 -> Token序列（不会失败）"""
import logging

from core.token_system import (
    Token, TokenType, LEFT_PAREN, RIGHT_PAREN, OPERATOR_DEFINITIONS, GLYPH_ALIASES
)

logger = logging.getLogger(__name__)


def _is_digit(c):
    return '0' <= c <= '9'


def _is_letter(c):
    return c.isascii() and c.isalpha()


def _starts_operand(tokens):
    """下一个 '-' 是否为一元负号：开头、'(' 之后或其他操作符之后"""
    if not tokens:
        return True
    prev = tokens[-1]
    return prev.type in (TokenType.LEFT_PAREN, TokenType.OPERATOR)


def tokenize(expression):
    """
    将表达式字符串切分为Token序列
    Args:
        expression: 原始表达式，如 "3+4*sin(90)"
    Returns:
        Token列表；无法识别的字符（空白、未知符号）直接跳过
    """
    tokens = []
    s = expression or ''
    i = 0
    n = len(s)

    while i < n:
        c = s[i]

        # 数字：贪婪匹配数字和小数点，不校验格式
        if _is_digit(c) or (c == '.' and i + 1 < n and _is_digit(s[i + 1])):
            j = i + 1
            while j < n and (_is_digit(s[j]) or s[j] == '.'):
                j += 1
            tokens.append(Token.number(s[i:j]))
            i = j
            continue

        # 字母串：函数名候选；单独的 'x' 是乘号
        if _is_letter(c):
            j = i + 1
            while j < n and _is_letter(s[j]):
                j += 1
            word = s[i:j]
            if word in GLYPH_ALIASES:
                tokens.append(Token.operator(GLYPH_ALIASES[word]))
            else:
                tokens.append(Token.identifier(word))
            i = j
            continue

        if c == '-':
            if _starts_operand(tokens):
                # 一元负号改写为 0 - x
                tokens.append(Token.number('0'))
                tokens.append(Token.operator('-', unary=True))
            else:
                tokens.append(Token.operator('-'))
            i += 1
            continue

        if c in OPERATOR_DEFINITIONS:
            tokens.append(Token.operator(c))
        elif c == '(':
            tokens.append(LEFT_PAREN)
        elif c == ')':
            tokens.append(RIGHT_PAREN)
        elif c in GLYPH_ALIASES:
            tokens.append(Token.operator(GLYPH_ALIASES[c]))
        elif not c.isspace():
            logger.debug(f"Skipping unrecognized character {c!r} at position {i}")
        i += 1

    return tokens
