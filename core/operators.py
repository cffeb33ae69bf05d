"""core/operators.py"""
import numpy as np

from core.errors import InvalidFactorialError
from core.token_system import AngleMode


def _to_radians(operand, angle_mode):
    if AngleMode.parse(angle_mode) == AngleMode.DEGREES:
        return np.deg2rad(operand)
    return operand


class Operators:
    """所有操作符和函数的静态方法集合（float64，IEEE语义，不抛数值异常）"""

    # 二元操作符====================

    @staticmethod
    def add(a, b):
        with np.errstate(all='ignore'):
            return np.float64(a) + np.float64(b)

    @staticmethod
    def sub(a, b):
        with np.errstate(all='ignore'):
            return np.float64(a) - np.float64(b)

    @staticmethod
    def mul(a, b):
        with np.errstate(all='ignore'):
            return np.float64(a) * np.float64(b)

    @staticmethod
    def div(a, b):
        """不检查除零：1/0 -> inf，0/0 -> nan"""
        with np.errstate(all='ignore'):
            return np.divide(np.float64(a), np.float64(b))

    @staticmethod
    def pow(a, b):
        """负底数的非整数次幂为 nan，溢出为 inf"""
        with np.errstate(all='ignore'):
            return np.power(np.float64(a), np.float64(b))

    # 三角函数（受角度模式影响）====================

    @staticmethod
    def sin(operand, angle_mode=AngleMode.RADIANS):
        with np.errstate(all='ignore'):
            return np.sin(_to_radians(np.float64(operand), angle_mode))

    @staticmethod
    def cos(operand, angle_mode=AngleMode.RADIANS):
        with np.errstate(all='ignore'):
            return np.cos(_to_radians(np.float64(operand), angle_mode))

    @staticmethod
    def tan(operand, angle_mode=AngleMode.RADIANS):
        with np.errstate(all='ignore'):
            return np.tan(_to_radians(np.float64(operand), angle_mode))

    # 其他一元函数====================

    @staticmethod
    def log(operand, angle_mode=None):
        """以10为底"""
        with np.errstate(all='ignore'):
            return np.log10(np.float64(operand))

    @staticmethod
    def ln(operand, angle_mode=None):
        with np.errstate(all='ignore'):
            return np.log(np.float64(operand))

    @staticmethod
    def sqrt(operand, angle_mode=None):
        with np.errstate(all='ignore'):
            return np.sqrt(np.float64(operand))

    @staticmethod
    def abs(operand, angle_mode=None):
        return np.abs(np.float64(operand))

    @staticmethod
    def fact(operand, angle_mode=None):
        """
        阶乘：向零截断为整数 n，计算 2*3*...*n
        n < 0 报 InvalidFactorial；无上限检查，n 过大时溢出为 inf
        """
        x = np.float64(operand)
        if np.isnan(x):
            return x
        n = np.trunc(x)
        if n < 0:
            raise InvalidFactorialError(float(x))

        result = np.float64(1.0)
        i = np.float64(2.0)
        with np.errstate(over='ignore'):
            while i <= n:
                result *= i
                if np.isinf(result):
                    # 已溢出，继续乘下去结果不变
                    break
                i += 1
        return result
