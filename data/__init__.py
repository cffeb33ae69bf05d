"""数据模块 - 批量表达式求值"""
from .batch_loader import load_expressions, evaluate_batch, save_results

__all__ = ['load_expressions', 'evaluate_batch', 'save_results']
