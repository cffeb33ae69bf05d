"""核心模块 - 词法分析、Shunting-yard、RPN求值器、操作符和格式化"""
from .token_system import (
    AngleMode, TokenType, Token, InstructionType, Instruction,
    OPERATOR_DEFINITIONS, FUNCTION_DEFINITIONS
)
from .tokenizer import tokenize
from .parser import to_postfix
from .operators import Operators
from .rpn_evaluator import RPNEvaluator
from .formatter import format_number
from .errors import (
    ErrorKind, EvaluationError, InvalidExpressionError,
    UnknownFunctionError, InvalidFactorialError
)

__all__ = [
    'AngleMode', 'TokenType', 'Token', 'InstructionType', 'Instruction',
    'OPERATOR_DEFINITIONS', 'FUNCTION_DEFINITIONS',
    'tokenize', 'to_postfix', 'Operators', 'RPNEvaluator', 'format_number',
    'ErrorKind', 'EvaluationError', 'InvalidExpressionError',
    'UnknownFunctionError', 'InvalidFactorialError'
]
