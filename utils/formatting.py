"""utils/formatting.py"""
import numpy as np

from config.config import FORMAT_CONFIG

# 超出该区间改用科学计数法
_SMALL = 1e-9
_LARGE = 1e15


def round_result(value, precision=None):
    """按有效数字位数舍入"""
    precision = precision or FORMAT_CONFIG['precision']
    if value == 0 or not np.isfinite(value):
        return float(value)
    return float(f"{value:.{precision}g}")


def format_result(value, precision=None, zero_threshold=None):
    """
    将最终结果格式化为展示用字符串
    - 绝对值小于 zero_threshold 视为0（如 sin(pi) 的舍入误差）
    - 整数值不带小数点，去掉末尾多余的0
    - -0 显示为 0
    """
    precision = precision or FORMAT_CONFIG['precision']
    if zero_threshold is None:
        zero_threshold = FORMAT_CONFIG['zero_threshold']

    if abs(value) < zero_threshold:
        return "0"
    value = round_result(value, precision)
    if value == 0:
        return "0"

    magnitude = abs(value)
    if magnitude < _SMALL or magnitude >= _LARGE:
        mantissa, exponent = f"{value:.{precision - 1}e}".split('e')
        if '.' in mantissa:
            mantissa = mantissa.rstrip('0').rstrip('.')
        return f"{mantissa}e{int(exponent)}"

    if value.is_integer():
        return str(int(value))

    return np.format_float_positional(value, trim='-')
