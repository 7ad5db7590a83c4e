"""utils/formatting.py"""
import math


def format_result(value):
    """整数值不带小数部分（4 而不是 4.0），其余使用最短往返表示"""
    if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(float(value))
