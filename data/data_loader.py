"""数据加载和批量计算模块"""
import pandas as pd
import numpy as np
import logging

from config.config import BATCH_CONFIG

logger = logging.getLogger(__name__)


def load_expression_dataset(file_path, expression_column=None):
    """
    加载包含表达式的CSV文件

    Parameters:
    - file_path: CSV文件路径
    - expression_column: 表达式所在列名，默认取 BATCH_CONFIG

    Returns:
    - df: 去掉空表达式后的DataFrame（表达式列为字符串）
    """
    expression_column = expression_column or BATCH_CONFIG['expression_column']
    logger.info(f"Loading expressions from {file_path}")

    # 全部按字符串读取，避免 "2.50" 被解析为数字
    df = pd.read_csv(file_path, dtype=str, keep_default_na=False, na_values=[''])

    if expression_column not in df.columns:
        raise ValueError(f"Expression column '{expression_column}' not found in dataset.")

    before = len(df)
    df = df.dropna(subset=[expression_column])
    df = df[df[expression_column].str.strip() != ''].reset_index(drop=True)
    if len(df) < before:
        logger.warning(f"Dropped {before - len(df)} rows with empty expressions")

    logger.info(f"Loaded {len(df)} expressions")
    return df


def evaluate_expression_frame(df, evaluator, expression_column=None, angle_column=None):
    """
    对每一行的表达式求值，返回带结果列的新DataFrame

    Parameters:
    - df: 输入DataFrame
    - evaluator: ExpressionEvaluator 实例
    - expression_column: 表达式列名
    - angle_column: 可选，逐行覆盖角度单位的列名

    Returns:
    - result_df: 原始列 + result / formatted / error / error_kind
    """
    expression_column = expression_column or BATCH_CONFIG['expression_column']
    if expression_column not in df.columns:
        raise ValueError(f"Expression column '{expression_column}' not found in dataset.")
    if angle_column is not None and angle_column not in df.columns:
        raise ValueError(f"Angle column '{angle_column}' not found in dataset.")

    results, formatted, errors, kinds = [], [], [], []
    for _, row in df.iterrows():
        angle_unit = None
        if angle_column is not None and isinstance(row[angle_column], str) and row[angle_column].strip():
            angle_unit = row[angle_column]
        outcome = evaluator.calculate(row[expression_column], angle_unit=angle_unit)
        results.append(outcome.result if outcome.ok else np.nan)
        formatted.append(outcome.formatted)
        errors.append(outcome.error)
        kinds.append(outcome.error_kind)

    result_df = df.copy()
    result_df[BATCH_CONFIG['result_column']] = pd.Series(results, index=df.index, dtype=float)
    result_df[BATCH_CONFIG['formatted_column']] = formatted
    result_df[BATCH_CONFIG['error_column']] = errors
    result_df['error_kind'] = kinds

    failed = result_df[BATCH_CONFIG['error_column']].notna().sum()
    logger.info(f"Evaluated {len(result_df)} expressions, {failed} failed")
    return result_df


def summarize_results(result_df):
    """统计成功/失败数量，以及每种错误类型的数量"""
    failed_mask = result_df[BATCH_CONFIG['error_column']].notna()
    summary = {
        'total': int(len(result_df)),
        'ok': int((~failed_mask).sum()),
        'failed': int(failed_mask.sum()),
        'by_kind': result_df.loc[failed_mask, 'error_kind'].value_counts().to_dict(),
    }
    return summary


def save_results(result_df, output_path=None):
    output_path = output_path or BATCH_CONFIG['default_output_path']
    logger.info(f"Saving results to {output_path}")
    result_df.to_csv(output_path, index=False)
    return output_path
