"""Shunting-yard：Token序列 -> 后缀(RPN)指令序列"""
import logging

from core.token_system import TokenType, Instruction, UNCLOSED_PAREN, operator_definition

logger = logging.getLogger(__name__)


def _should_pop(top, current):
    """栈顶操作符是否应在 current 入栈前弹出"""
    if top.type != TokenType.OPERATOR:
        # '(' 和待定的函数名都会挡住弹出
        return False
    top_def = operator_definition(top)
    cur_def = operator_definition(current)
    if top_def['precedence'] > cur_def['precedence']:
        return True
    return top_def['precedence'] == cur_def['precedence'] and not cur_def['right_assoc']


def _emit(token):
    if token.type == TokenType.OPERATOR:
        return Instruction.binary_op(token.text)
    return Instruction.function(token.text)


def to_postfix(tokens):
    """
    将中缀Token序列转换为后缀指令序列
    不做结构校验：括号不匹配、缺少操作数等错误留到求值阶段暴露
    Args:
        tokens: tokenize() 的输出
    Returns:
        Instruction列表
    """
    output = []
    stack = []

    for token in tokens:
        if token.type == TokenType.NUMBER:
            output.append(Instruction.push_number(token.value, token.text))

        elif token.type == TokenType.OPERATOR:
            while stack and _should_pop(stack[-1], token):
                output.append(_emit(stack.pop()))
            stack.append(token)

        elif token.type == TokenType.IDENTIFIER:
            stack.append(token)

        elif token.type == TokenType.LEFT_PAREN:
            stack.append(token)

        elif token.type == TokenType.RIGHT_PAREN:
            while stack and stack[-1].type != TokenType.LEFT_PAREN:
                output.append(_emit(stack.pop()))
            if stack:
                stack.pop()
                # 括号组结束，紧挨着的函数名立即作用于组内结果
                if stack and stack[-1].type == TokenType.IDENTIFIER:
                    output.append(_emit(stack.pop()))
            else:
                logger.debug("Unmatched ')' ignored")

    while stack:
        token = stack.pop()
        if token.type == TokenType.LEFT_PAREN:
            # 未闭合的 '(' 原样留在指令序列里，由求值器报错
            output.append(Instruction.function(UNCLOSED_PAREN))
            continue
        output.append(_emit(token))

    return output
