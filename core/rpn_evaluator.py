"""RPN表达式求值器 - 调用统一的Operators类"""
import logging

from core.errors import (
    StackUnderflowError, ArityMismatchError, UnknownFunctionError,
    UnknownOperatorError, MalformedExpressionError
)
from core.operators import Operators, FUNCTION_IMPLEMENTATIONS
from core.token_system import RpnTokenType, EvalContext, OPERATORS, FUNCTIONS

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """评估RPN表达式的值"""

    @staticmethod
    def evaluate(rpn_sequence, context=None):
        """
        从左到右处理RPN序列
        Args:
            rpn_sequence: RpnToken 序列（Parser 的输出）
            context: EvalContext，默认弧度
        Returns:
            栈中唯一剩余的值（不在这里检查是否有限）
        """
        if context is None:
            context = EvalContext()
        stack = []

        for token in rpn_sequence:
            if token.type == RpnTokenType.LITERAL:
                stack.append(token.value)

            elif token.type == RpnTokenType.OPERATOR:
                spec = OPERATORS.get(token.name)
                op_method = getattr(Operators, spec.name, None) if spec else None
                if op_method is None:
                    raise UnknownOperatorError(token.name)

                if len(stack) < spec.arity:
                    raise StackUnderflowError(token.name, spec.arity, len(stack))

                # ================== 二元操作符处理 ==================
                if spec.arity == 2:
                    operand2 = stack.pop()
                    operand1 = stack.pop()
                    stack.append(op_method(operand1, operand2))
                # ================== 一元操作符处理 ==================
                else:
                    stack.append(op_method(stack.pop()))

            elif token.type == RpnTokenType.FUNCTION_CALL:
                spec = FUNCTIONS.get(token.name)
                func = FUNCTION_IMPLEMENTATIONS.get(token.name)
                if spec is None or func is None:
                    raise UnknownFunctionError(token.name)

                argc = spec.arity if token.argc is None else token.argc
                if argc != spec.arity:
                    raise ArityMismatchError(token.name, spec.arity, argc)
                if len(stack) < spec.arity:
                    raise ArityMismatchError(token.name, spec.arity, len(stack))

                # 按书写顺序取参数
                args = stack[-spec.arity:]
                del stack[-spec.arity:]
                stack.append(func(*args, angle_unit=context.angle_unit))

            else:
                raise UnknownOperatorError(str(token))

        if len(stack) != 1:
            logger.debug(f"Stack has {len(stack)} elements after evaluation, expected 1")
            raise MalformedExpressionError(len(stack))

        return stack[0]
