"""求值错误类型"""
from enum import Enum


class ErrorKind(Enum):
    INVALID_EXPRESSION = "InvalidExpression"
    UNKNOWN_FUNCTION = "UnknownFunction"
    INVALID_FACTORIAL = "InvalidFactorial"


class EvaluationError(Exception):
    """求值失败的基类，kind 保留错误类别"""
    kind = ErrorKind.INVALID_EXPRESSION

    def __init__(self, message=None):
        super().__init__(message or self.kind.value)


class InvalidExpressionError(EvaluationError):
    """栈下溢、结束时栈中值不止一个、非法数字字面量"""
    kind = ErrorKind.INVALID_EXPRESSION


class UnknownFunctionError(EvaluationError):
    kind = ErrorKind.UNKNOWN_FUNCTION

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown function: {name}")


class InvalidFactorialError(EvaluationError):
    kind = ErrorKind.INVALID_FACTORIAL

    def __init__(self, argument):
        self.argument = argument
        super().__init__(f"Invalid factorial argument: {argument}")
