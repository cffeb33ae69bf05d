"""计算器会话 - 表达式缓冲区、记忆寄存器、百分号、角度模式和历史（仅内存状态）"""
import logging
import math
import re

import numpy as np

from config.config import SESSION_CONFIG
from core import AngleMode, format_number
from engine import ExpressionEvaluator, EvalResult
from session.history import History

logger = logging.getLogger(__name__)

_TRAILING_NUMBER = re.compile(r'(\d+\.?\d*)$')


def _number_text(value):
    """数值 -> 可被重新解析的文本（不用指数形式）"""
    return np.format_float_positional(float(value), trim='-')


class CalculatorSession:
    """一个计算器实例的全部可变状态"""

    def __init__(self, evaluator=None, angle_mode=None, history_limit=None, random_seed=None):
        self.evaluator = evaluator or ExpressionEvaluator()
        self._angle_mode = self.evaluator.angle_mode if angle_mode is None else AngleMode.parse(angle_mode)
        self.history = History(history_limit)
        self.expression = ''
        self.memory = 0.0
        seed = SESSION_CONFIG['random_seed'] if random_seed is None else random_seed
        self._rng = np.random.default_rng(seed)

    # ---------- 角度模式 ----------
    @property
    def angle_mode(self):
        return self._angle_mode

    @angle_mode.setter
    def angle_mode(self, value):
        self._angle_mode = AngleMode.parse(value)

    def toggle_angle_mode(self):
        if self._angle_mode == AngleMode.DEGREES:
            self._angle_mode = AngleMode.RADIANS
        else:
            self._angle_mode = AngleMode.DEGREES
        logger.debug(f"Angle mode switched to {self._angle_mode.value}")
        return self._angle_mode

    # ---------- 输入编辑 ----------
    def input(self, text):
        self.expression += text
        return self.expression

    def add_function(self, name):
        """追加 'name(' ，等待参数"""
        self.expression += name + '('
        return self.expression

    def clear(self):
        self.expression = ''
        return self.expression

    def delete(self):
        self.expression = self.expression[:-1]
        return self.expression

    def insert_constant(self, name):
        if name == 'pi':
            text = repr(math.pi)
        elif name == 'e':
            text = repr(math.e)
        elif name == 'rand':
            text = _number_text(self._rng.random())
        else:
            raise ValueError(f"Unknown constant: {name}")
        self.expression += text
        return self.expression

    def apply_percent(self):
        """末尾的数字 n 替换为 (n/100)；末尾不是数字时不变"""
        match = _TRAILING_NUMBER.search(self.expression)
        if match:
            n = float(match.group(1))
            self.expression = self.expression[:match.start()] + '(' + _number_text(n / 100) + ')'
        return self.expression

    # ---------- 求值 ----------
    def evaluate(self) -> EvalResult:
        return self.evaluator.evaluate(self.expression, self._angle_mode)

    def display(self):
        """实时预览：空表达式和NaN显示 0，错误显示 Error"""
        result = self.evaluate()
        if not result.ok:
            return "Error"
        if math.isnan(result.value):
            return "0"
        return format_number(result.value)

    def equals(self) -> EvalResult:
        """成功时写入历史并用结果替换表达式；失败时表达式不变"""
        result = self.evaluate()
        if not result.ok:
            logger.debug(f"Evaluation failed for '{self.expression}': {result.kind.value}")
            return result

        res = format_number(result.value)
        if self.expression.strip():
            self.history.push(self.expression, res)
        self.expression = res
        return result

    def recall_history(self, index):
        """用第 index 条历史的结果替换当前表达式"""
        self.expression = self.history[index].result
        return self.expression

    # ---------- 记忆寄存器 ----------
    def _display_value(self):
        try:
            value = float(self.display())
        except ValueError:
            return 0.0
        return 0.0 if math.isnan(value) else value

    def memory_clear(self):
        self.memory = 0.0

    def memory_recall(self):
        self.expression += _number_text(self.memory)
        return self.expression

    def memory_add(self):
        self.memory += self._display_value()
        return self.memory

    def memory_subtract(self):
        self.memory -= self._display_value()
        return self.memory
