"""数据模块 - 表达式加载和批量求值"""
from .data_loader import load_expressions, save_results
from .batch_evaluator import BatchEvaluator

__all__ = ['load_expressions', 'save_results', 'BatchEvaluator']
