"""批量求值 - 从CSV读取表达式、逐行求值、写回结果"""
import logging

import pandas as pd

from config.config import BATCH_CONFIG
from engine import ExpressionEvaluator

logger = logging.getLogger(__name__)


def load_expressions(file_path, expression_column=None):
    """
    加载表达式文件

    Parameters:
    - file_path: CSV文件路径
    - expression_column: 表达式所在列，默认 BATCH_CONFIG['expression_column']

    Returns:
    - DataFrame，表达式列为字符串（空单元格为 ""）
    """
    expression_column = expression_column or BATCH_CONFIG['expression_column']
    logger.info(f"Loading expressions from {file_path}")

    df = pd.read_csv(file_path, dtype=str, keep_default_na=False)

    # 确保表达式列存在
    if expression_column not in df.columns:
        raise ValueError(f"Expression column '{expression_column}' not found in file.")

    df[expression_column] = df[expression_column].fillna('').astype(str)
    logger.info(f"Loaded {len(df)} expressions")
    return df


def evaluate_batch(df, evaluator=None, angle_mode=None, expression_column=None,
                   angle_mode_column=None):
    """
    逐行求值，返回带 value / display / error 列的新DataFrame

    Parameters:
    - df: load_expressions() 的结果
    - evaluator: ExpressionEvaluator，None 时新建一个（同一批次共享编译缓存）
    - angle_mode: 默认角度模式；若存在 angle_mode 列则逐行覆盖
    """
    expression_column = expression_column or BATCH_CONFIG['expression_column']
    angle_mode_column = angle_mode_column or BATCH_CONFIG['angle_mode_column']
    evaluator = evaluator or ExpressionEvaluator(angle_mode=angle_mode)

    has_mode_column = angle_mode_column in df.columns
    values, displays, errors = [], [], []

    for _, row in df.iterrows():
        mode = angle_mode
        if has_mode_column and isinstance(row[angle_mode_column], str) and row[angle_mode_column].strip():
            mode = row[angle_mode_column]

        result = evaluator.evaluate(row[expression_column], mode)
        values.append(result.value if result.ok else float('nan'))
        displays.append(result.display())
        errors.append(result.kind.value if result.kind else '')

    out = df.copy()
    out['value'] = values
    out['display'] = displays
    out['error'] = errors

    n_failed = sum(1 for e in errors if e)
    logger.info(f"Evaluated {len(out)} expressions, {n_failed} failed")
    return out


def save_results(df, output_path=None):
    output_path = output_path or BATCH_CONFIG['output_path']
    df.to_csv(output_path, index=False)
    logger.info(f"Results saved to {output_path}")
    return output_path
