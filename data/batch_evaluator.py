import numpy as np
import pandas as pd
import logging

from config.config import BATCH_CONFIG
from core import evaluate, ExpressionError

logger = logging.getLogger(__name__)


class BatchEvaluator:
    """逐条独立求值一组表达式，失败的行给出 NaN 和错误类型"""

    def __init__(self, expression_column=None, result_column=None, error_column=None):
        self.expression_column = expression_column or BATCH_CONFIG['expression_column']
        self.result_column = result_column or BATCH_CONFIG['result_column']
        self.error_column = error_column or BATCH_CONFIG['error_column']

    def evaluate_one(self, text):
        """
        Returns:
            (result, error_name)：成功时 error_name 为空字符串
        """
        try:
            return evaluate(text), ''
        except ExpressionError as e:
            logger.debug(f"Failed to evaluate {text!r}: {type(e).__name__}: {e}")
            return np.nan, type(e).__name__

    def evaluate_series(self, expressions):
        """
        Args:
            expressions: 表达式字符串的 Series 或列表
        Returns:
            pd.DataFrame，列为 expression / result / error，保留原索引
        """
        if not isinstance(expressions, pd.Series):
            expressions = pd.Series(list(expressions), dtype=object)

        results = []
        errors = []
        for text in expressions:
            result, error = self.evaluate_one(text)
            results.append(result)
            errors.append(error)

        frame = pd.DataFrame({
            self.expression_column: expressions.values,
            self.result_column: np.asarray(results, dtype=float),
            self.error_column: errors,
        }, index=expressions.index)

        summary = self.summary(frame)
        logger.info(f"Evaluated {summary['total']} expressions: "
                    f"{summary['succeeded']} succeeded, {summary['failed']} failed")
        return frame

    def summary(self, frame):
        failed = int((frame[self.error_column] != '').sum())
        return {
            'total': len(frame),
            'succeeded': len(frame) - failed,
            'failed': failed,
        }
