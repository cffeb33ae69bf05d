import logging
from collections import OrderedDict
from typing import NamedTuple, Optional

from config.config import ENGINE_CONFIG
from core import (
    AngleMode, ErrorKind, EvaluationError, RPNEvaluator, format_number, to_postfix, tokenize
)

logger = logging.getLogger(__name__)


class EvalResult(NamedTuple):
    """求值结果：成功时 error 为 None，失败时 value 为 None"""
    value: Optional[float]
    error: Optional[EvaluationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[ErrorKind]:
        return None if self.error is None else self.error.kind

    def display(self) -> str:
        return format_number(self.value) if self.ok else "Error"


def compile_expression(expression: str) -> tuple:
    """表达式 -> 后缀指令元组（词法和语法阶段都不会失败）"""
    return tuple(to_postfix(tokenize(expression)))


def evaluate_expression(expression: str, angle_mode=None) -> EvalResult:
    """
    对外的唯一求值入口：不缓存、不持有任何全局状态
    Args:
        expression: 表达式字符串
        angle_mode: 'deg' / 'rad' 或 AngleMode，默认取 ENGINE_CONFIG
    Returns:
        EvalResult；任何求值错误都不会抛出到调用方
    """
    if angle_mode is None:
        angle_mode = ENGINE_CONFIG['default_angle_mode']
    angle_mode = AngleMode.parse(angle_mode)

    if not expression or not expression.strip():
        return EvalResult(0.0)

    try:
        return EvalResult(RPNEvaluator.evaluate(compile_expression(expression), angle_mode))
    except EvaluationError as e:
        logger.debug(f"Error evaluating expression '{expression[:50]}': {e}")
        return EvalResult(None, e)


class ExpressionEvaluator:

    def __init__(self, cache_size=None, angle_mode=None):
        # 使用有限大小的OrderedDict实现LRU缓存（缓存的是后缀程序，不是结果）
        self.cache_size = ENGINE_CONFIG['program_cache_size'] if cache_size is None else cache_size
        self.angle_mode = AngleMode.parse(
            ENGINE_CONFIG['default_angle_mode'] if angle_mode is None else angle_mode
        )
        self._program_cache = OrderedDict()
        self._cache_hits = 0
        self._cache_misses = 0

    def _manage_cache(self):
        """管理缓存大小"""
        while len(self._program_cache) > self.cache_size:
            # 删除最久未使用的条目
            self._program_cache.popitem(last=False)

    def clear_cache(self):
        """清空缓存（供外部调用）"""
        self._program_cache.clear()
        logger.info(f"Cache cleared. Hits: {self._cache_hits}, Misses: {self._cache_misses}")
        self._cache_hits = 0
        self._cache_misses = 0

    @property
    def cache_info(self):
        return {
            'hits': self._cache_hits,
            'misses': self._cache_misses,
            'size': len(self._program_cache),
            'max_size': self.cache_size,
        }

    def compile(self, expression: str) -> tuple:
        """编译表达式，命中缓存时直接返回"""
        if expression in self._program_cache:
            # 移到末尾（最近使用）
            self._program_cache.move_to_end(expression)
            self._cache_hits += 1
            return self._program_cache[expression]

        self._cache_misses += 1
        program = compile_expression(expression)
        self._program_cache[expression] = program
        self._manage_cache()
        return program

    def evaluate(self, expression: str, angle_mode=None) -> EvalResult:
        """
        Args:
            expression: 表达式字符串
            angle_mode: 本次调用的角度模式，None 时用实例默认值
        Returns:
            EvalResult，失败时带错误类别
        """
        mode = self.angle_mode if angle_mode is None else AngleMode.parse(angle_mode)

        if not expression or not expression.strip():
            return EvalResult(0.0)

        try:
            value = RPNEvaluator.evaluate(self.compile(expression), mode)
            return EvalResult(value)
        except EvaluationError as e:
            logger.debug(f"Error evaluating expression '{expression[:50]}': {type(e).__name__}: {e}")
            return EvalResult(None, e)
