"""工具模块"""
from .formatting import format_result

__all__ = ['format_result']
