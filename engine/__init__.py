"""求值入口 - 表达式字符串 -> EvalResult"""
from .evaluator import ExpressionEvaluator, EvalResult, evaluate_expression, compile_expression

__all__ = ['ExpressionEvaluator', 'EvalResult', 'evaluate_expression', 'compile_expression']
