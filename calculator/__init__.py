"""计算器宿主层 - 输入规范化、会话历史和求值门面"""
from .evaluator import ExpressionEvaluator, CalculationResult
from .history import CalculationHistory, HistoryStore, HistoryEntry
from .normalizer import normalize

__all__ = [
    'ExpressionEvaluator', 'CalculationResult',
    'CalculationHistory', 'HistoryStore', 'HistoryEntry', 'normalize'
]
