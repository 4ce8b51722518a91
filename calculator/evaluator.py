import logging

from config.config import ENGINE_CONFIG, FORMAT_CONFIG, HISTORY_CONFIG
from core import AngleUnit, EngineError, EmptyExpressionError, InputTooLongError, evaluate_expression
from calculator.history import HistoryStore
from calculator.normalizer import normalize
from utils.formatting import format_result

logger = logging.getLogger(__name__)


class CalculationResult:
    """calculate() 的返回值；成功时 error 为 None"""
    __slots__ = ('expression', 'result', 'formatted', 'error', 'error_kind')

    def __init__(self, expression, result=None, formatted=None, error=None, error_kind=None):
        self.expression = expression
        self.result = result
        self.formatted = formatted
        self.error = error
        self.error_kind = error_kind

    @property
    def ok(self):
        return self.error is None

    def as_dict(self):
        return {name: getattr(self, name) for name in self.__slots__}

    def __repr__(self):
        if self.ok:
            return f"CalculationResult({self.expression!r} = {self.formatted})"
        return f"CalculationResult({self.expression!r}, {self.error_kind}: {self.error})"


class ExpressionEvaluator:

    def __init__(self, angle_unit=None, precision=None, max_length=None, history_store=None):
        self.angle_unit = AngleUnit.parse(angle_unit or ENGINE_CONFIG['default_angle_unit'])
        self.precision = precision or FORMAT_CONFIG['precision']
        self.max_length = max_length or ENGINE_CONFIG['max_expression_length']
        self.history_store = history_store if history_store is not None else HistoryStore(
            HISTORY_CONFIG['max_entries'])

    def evaluate(self, expression, angle_unit=None):
        """
        规范化后交给引擎求值
        Args:
            expression: 原始输入
            angle_unit: 覆盖实例的角度单位
        Returns:
            有限的 float
        Raises:
            EngineError
        """
        text = normalize(expression)
        if not text:
            raise EmptyExpressionError()
        if len(text) > self.max_length:
            raise InputTooLongError(len(text), self.max_length)

        unit = self.angle_unit if angle_unit is None else AngleUnit.parse(angle_unit)
        return evaluate_expression(text, unit)

    def calculate(self, expression, angle_unit=None, session_id=None):
        """
        不抛出 EngineError 的版本，错误写入返回值
        session_id 不为 None 时，成功的计算记入该会话的历史
        """
        try:
            value = self.evaluate(expression, angle_unit)
        except EngineError as e:
            logger.warning(f"Rejected expression {str(expression)[:50]!r}: {e.kind}: {e}")
            return CalculationResult(expression, error=str(e), error_kind=e.kind)

        formatted = format_result(value, self.precision)
        if session_id is not None:
            self.history_store.get(session_id).add(expression, formatted)
        return CalculationResult(expression, result=value, formatted=formatted)

    def history(self, session_id):
        return self.history_store.get(session_id)
