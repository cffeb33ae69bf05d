"""会话模块 - 计算器状态和历史"""
from .history import History, HistoryEntry
from .calculator import CalculatorSession

__all__ = ['History', 'HistoryEntry', 'CalculatorSession']
