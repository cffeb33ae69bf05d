"""数值 -> 显示字符串"""
import math

import numpy as np

from config.config import FORMAT_CONFIG


def format_number(value, exponent_upper=None, exponent_lower=None,
                  exponent_digits=None, fixed_digits=None):
    """
    格式化求值结果（纯函数，不会失败）
    - ±inf 一律显示为 "Infinity"（丢弃符号）
    - |v| >= 1e12 或 0 < |v| < 1e-6：指数形式，8位小数
    - 整数值不带小数点；其他最多10位小数，去掉末尾0
    """
    exponent_upper = FORMAT_CONFIG['exponent_upper'] if exponent_upper is None else exponent_upper
    exponent_lower = FORMAT_CONFIG['exponent_lower'] if exponent_lower is None else exponent_lower
    exponent_digits = FORMAT_CONFIG['exponent_digits'] if exponent_digits is None else exponent_digits
    fixed_digits = FORMAT_CONFIG['fixed_digits'] if fixed_digits is None else fixed_digits

    v = float(value)
    if math.isinf(v):
        return "Infinity"
    if math.isnan(v):
        return "NaN"

    magnitude = abs(v)
    if magnitude >= exponent_upper or (0 < magnitude < exponent_lower):
        # 指数部分不补零：1.00000000e-7
        return np.format_float_scientific(v, precision=exponent_digits, unique=False,
                                          trim='k', exp_digits=1)

    if v.is_integer():
        return str(int(v))

    rounded = round(v, fixed_digits)
    if rounded.is_integer():
        return str(int(rounded))
    return np.format_float_positional(rounded, trim='-')
