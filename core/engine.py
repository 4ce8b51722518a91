"""引擎对外的唯一边界：tokenize -> parse -> evaluate -> 有限性检查"""
import logging

import numpy as np

from core.errors import EmptyExpressionError, NonFiniteResultError
from core.parser import parse
from core.rpn_evaluator import RPNEvaluator
from core.token_system import AngleUnit, EvalContext
from core.tokenizer import tokenize

logger = logging.getLogger(__name__)


def compile_expression(raw_text):
    """表达式字符串 -> RPN 序列；空表达式报 EmptyExpressionError"""
    tokens = tokenize(raw_text)
    if not tokens:
        raise EmptyExpressionError()
    return parse(tokens)


def evaluate_rpn(rpn_sequence, angle_unit=AngleUnit.RADIANS):
    """求值已编译的 RPN，并要求结果为有限数"""
    result = RPNEvaluator.evaluate(rpn_sequence, EvalContext(angle_unit))
    if not np.isfinite(result):
        raise NonFiniteResultError(result)
    return float(result)


def evaluate_expression(raw_text, angle_unit=AngleUnit.RADIANS):
    """
    Args:
        raw_text: 已规范化的表达式（仅含数字、字母、+-*/^%(),、空白）
        angle_unit: AngleUnit 或 'degrees' / 'radians'
    Returns:
        有限的 float
    Raises:
        EngineError 的各子类，见 core.errors
    """
    return evaluate_rpn(compile_expression(raw_text), angle_unit)
