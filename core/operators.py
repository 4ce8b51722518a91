"""core/operators.py"""
import numpy as np

from core.errors import DivisionByZeroError, DomainError
from core.token_system import AngleUnit


def _to_radians(value, angle_unit):
    if angle_unit == AngleUnit.DEGREES:
        return np.deg2rad(value)
    return value


def _from_radians(value, angle_unit):
    if angle_unit == AngleUnit.DEGREES:
        return np.rad2deg(value)
    return value


class Operators:
    """所有操作符和函数的静态方法集合，结果统一为 Python float"""

    # 二元操作符========================================
    @staticmethod
    def add(operand1, operand2):
        return float(operand1 + operand2)

    @staticmethod
    def sub(operand1, operand2):
        return float(operand1 - operand2)

    @staticmethod
    def mul(operand1, operand2):
        with np.errstate(over='ignore'):
            return float(np.float64(operand1) * np.float64(operand2))

    @staticmethod
    def div(operand1, operand2):
        """除数恰为0时报错，其余交给IEEE运算"""
        if operand2 == 0.0:
            raise DivisionByZeroError()
        with np.errstate(over='ignore', under='ignore'):
            return float(np.float64(operand1) / np.float64(operand2))

    @staticmethod
    def pow(operand1, operand2):
        """无定义域限制，溢出或无效幂得到 inf/nan，由最终的有限性检查处理"""
        with np.errstate(all='ignore'):
            return float(np.power(np.float64(operand1), np.float64(operand2)))

    # 一元操作符====================
    @staticmethod
    def neg(operand):
        return float(-operand)

    @staticmethod
    def percent(operand):
        """后缀百分号：除以100"""
        return float(operand / 100.0)

    # 三角函数（参数按上下文角度单位换算）====================
    @staticmethod
    def sin(operand, angle_unit=AngleUnit.RADIANS):
        return float(np.sin(_to_radians(operand, angle_unit)))

    @staticmethod
    def cos(operand, angle_unit=AngleUnit.RADIANS):
        return float(np.cos(_to_radians(operand, angle_unit)))

    @staticmethod
    def tan(operand, angle_unit=AngleUnit.RADIANS):
        return float(np.tan(_to_radians(operand, angle_unit)))

    # 反三角函数（结果换算回上下文角度单位）
    @staticmethod
    def asin(operand, angle_unit=AngleUnit.RADIANS):
        with np.errstate(invalid='ignore'):
            return float(_from_radians(np.arcsin(operand), angle_unit))

    @staticmethod
    def acos(operand, angle_unit=AngleUnit.RADIANS):
        with np.errstate(invalid='ignore'):
            return float(_from_radians(np.arccos(operand), angle_unit))

    @staticmethod
    def atan(operand, angle_unit=AngleUnit.RADIANS):
        return float(_from_radians(np.arctan(operand), angle_unit))

    # 其他函数====================
    @staticmethod
    def sqrt(operand, angle_unit=None):
        if operand < 0:
            raise DomainError('sqrt', operand)
        return float(np.sqrt(operand))

    @staticmethod
    def log(operand, angle_unit=None):
        """以10为底"""
        if operand <= 0:
            raise DomainError('log', operand)
        return float(np.log10(operand))

    @staticmethod
    def ln(operand, angle_unit=None):
        if operand <= 0:
            raise DomainError('ln', operand)
        return float(np.log(operand))

    @staticmethod
    def abs(operand, angle_unit=None):
        return float(np.abs(operand))

    @staticmethod
    def pow_function(base, exponent, angle_unit=None):
        """pow(a, b) 与 ^ 等价"""
        return Operators.pow(base, exponent)


# 函数名 -> Operators 方法；pow 与二元 ^ 共用实现但签名不同
FUNCTION_IMPLEMENTATIONS = {
    'sin': Operators.sin,
    'cos': Operators.cos,
    'tan': Operators.tan,
    'asin': Operators.asin,
    'acos': Operators.acos,
    'atan': Operators.atan,
    'sqrt': Operators.sqrt,
    'log': Operators.log,
    'ln': Operators.ln,
    'abs': Operators.abs,
    'pow': Operators.pow_function,
}
