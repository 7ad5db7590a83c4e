"""数据加载模块 - 读取待求值的表达式并保存结果"""
import pandas as pd
import logging

from config.config import BATCH_CONFIG

logger = logging.getLogger(__name__)


def load_expressions(file_path, column=None):
    """
    加载表达式列表。

    Parameters:
    - file_path: CSV 文件（按列读取）或纯文本文件（每行一条表达式）
    - column: CSV 中表达式所在的列名, 默认为 BATCH_CONFIG['expression_column']

    Returns:
    - expressions: pd.Series，元素为字符串
    """
    logger.info(f"Loading expressions from {file_path}")
    column = column or BATCH_CONFIG['expression_column']

    if str(file_path).lower().endswith('.csv'):
        # keep_default_na=False: 'nan' 之类的文本按原样保留
        frame = pd.read_csv(file_path, dtype=str, keep_default_na=False)
        if column not in frame.columns:
            raise KeyError(f"Column '{column}' not found in {file_path}; available: {list(frame.columns)}")
        expressions = frame[column]
    else:
        with open(file_path, 'r', encoding='utf-8') as f:
            lines = [line.rstrip('\r\n') for line in f]
        expressions = pd.Series(lines, dtype=object)

    # 去掉空行
    expressions = expressions[expressions.str.strip() != '']
    expressions = expressions.rename(BATCH_CONFIG['expression_column'])

    logger.info(f"Loaded {len(expressions)} expressions")
    return expressions


def save_results(results, output_path=None):
    """把批量求值结果写成 CSV（不含索引）"""
    output_path = output_path or BATCH_CONFIG['default_output_path']
    logger.info(f"Saving {len(results)} results to {output_path}")
    results.to_csv(output_path, index=False)
    return output_path
