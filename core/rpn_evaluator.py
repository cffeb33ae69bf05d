"""RPN指令求值器 - 调用统一的Operators类"""
import logging

from core.token_system import (
    AngleMode, InstructionType, OPERATOR_DEFINITIONS, FUNCTION_DEFINITIONS, TRIG_FUNCTIONS
)
from core.operators import Operators
from core.errors import InvalidExpressionError, UnknownFunctionError

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """在数值栈上执行后缀指令序列"""

    @staticmethod
    def evaluate(instructions, angle_mode=AngleMode.DEGREES):
        """
        执行后缀指令序列
        Args:
            instructions: to_postfix() 输出的指令序列
            angle_mode: 角度模式，只影响 sin/cos/tan
        Returns:
            float 结果
        Raises:
            InvalidExpressionError: 栈下溢、结束时栈中不止一个值、非法数字
            UnknownFunctionError: 未知函数名
            InvalidFactorialError: 负数阶乘
        """
        angle_mode = AngleMode.parse(angle_mode)
        stack = []

        for instruction in instructions:
            # ================== 数字 ==================
            if instruction.type == InstructionType.PUSH_NUMBER:
                if instruction.is_malformed:
                    logger.debug(f"Malformed number literal: {instruction.symbol}")
                    raise InvalidExpressionError(f"Malformed number: {instruction.symbol}")
                stack.append(instruction.value)

            # ================== 二元操作符 ==================
            elif instruction.type == InstructionType.APPLY_BINARY_OP:
                if len(stack) < 2:
                    logger.debug(f"Insufficient operands for {instruction.symbol}")
                    raise InvalidExpressionError(f"Insufficient operands for {instruction.symbol}")
                b = stack.pop()
                a = stack.pop()

                definition = OPERATOR_DEFINITIONS.get(instruction.symbol)
                if definition is None:
                    raise InvalidExpressionError(f"Unknown operator: {instruction.symbol}")
                op_method = getattr(Operators, definition['method'])
                stack.append(op_method(a, b))

            # ================== 函数 ==================
            elif instruction.type == InstructionType.APPLY_FUNCTION:
                name = instruction.symbol
                if instruction.is_unclosed_paren:
                    logger.debug("Unclosed '(' at end of input")
                    raise InvalidExpressionError("Mismatched parentheses")
                if not stack:
                    logger.debug(f"Missing argument for {name}")
                    raise InvalidExpressionError(f"Missing argument for {name}")
                arg = stack.pop()

                method_name = FUNCTION_DEFINITIONS.get(name)
                if method_name is None:
                    logger.debug(f"Unknown function: {name}")
                    raise UnknownFunctionError(name)
                op_method = getattr(Operators, method_name)
                if name in TRIG_FUNCTIONS:
                    stack.append(op_method(arg, angle_mode))
                else:
                    stack.append(op_method(arg))

            else:
                raise InvalidExpressionError(f"Unknown instruction: {instruction!r}")

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise InvalidExpressionError(f"Stack has {len(stack)} elements after evaluation")

        return float(stack[0])
