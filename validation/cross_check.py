"""交叉验证模块 validation/cross_check.py

由 RPN 重建表达式树，用递归求值作为参照，与栈式求值结果对比
"""
import logging

import numpy as np

from core import (
    RpnTokenType, EvalContext, OPERATORS, FUNCTIONS, UNARY_MINUS,
    Operators, StackUnderflowError, ArityMismatchError, MalformedExpressionError,
    UnknownFunctionError, UnknownOperatorError, EngineError,
    compile_expression, evaluate_rpn
)
from core.operators import FUNCTION_IMPLEMENTATIONS

logger = logging.getLogger(__name__)


class NumberNode:
    def __init__(self, value):
        self.value = value


class OperatorNode:
    def __init__(self, symbol, operands):
        self.symbol = symbol
        self.operands = operands


class FunctionNode:
    def __init__(self, name, args):
        self.name = name
        self.args = args


def build_tree(rpn_sequence):
    """用栈把 RPN 还原为表达式树（迭代，不递归）"""
    stack = []
    for token in rpn_sequence:
        if token.type == RpnTokenType.LITERAL:
            stack.append(NumberNode(token.value))
        elif token.type == RpnTokenType.OPERATOR:
            spec = OPERATORS.get(token.name)
            if spec is None:
                raise UnknownOperatorError(token.name)
            if len(stack) < spec.arity:
                raise StackUnderflowError(token.name, spec.arity, len(stack))
            operands = stack[-spec.arity:]
            del stack[-spec.arity:]
            stack.append(OperatorNode(token.name, operands))
        else:
            spec = FUNCTIONS.get(token.name)
            if spec is None:
                raise UnknownFunctionError(token.name)
            if token.argc != spec.arity or len(stack) < spec.arity:
                raise ArityMismatchError(token.name, spec.arity, token.argc)
            args = stack[-spec.arity:]
            del stack[-spec.arity:]
            stack.append(FunctionNode(token.name, args))

    if len(stack) != 1:
        raise MalformedExpressionError(len(stack))
    return stack[0]


def evaluate_tree(node, context=None):
    """递归参照求值，与 RPNEvaluator 共用 Operators"""
    if context is None:
        context = EvalContext()
    if isinstance(node, NumberNode):
        return node.value
    if isinstance(node, OperatorNode):
        op_method = getattr(Operators, OPERATORS[node.symbol].name)
        return op_method(*[evaluate_tree(child, context) for child in node.operands])
    func = FUNCTION_IMPLEMENTATIONS[node.name]
    return func(*[evaluate_tree(arg, context) for arg in node.args], angle_unit=context.angle_unit)


def _render(node):
    if isinstance(node, NumberNode):
        # repr 保留全部精度；负数或科学计数法时无法直接重新分词
        text = repr(node.value)
        if 'e' in text or 'inf' in text or 'nan' in text:
            text = np.format_float_positional(node.value, trim='-')
        if text.startswith('-'):
            return f"(-{text[1:]})"
        return text
    if isinstance(node, OperatorNode):
        if node.symbol == UNARY_MINUS:
            return f"(-{_render(node.operands[0])})"
        if node.symbol == '%':
            return f"({_render(node.operands[0])}%)"
        left, right = node.operands
        return f"({_render(left)}{node.symbol}{_render(right)})"
    return f"{node.name}({','.join(_render(arg) for arg in node.args)})"


def to_infix(rpn_sequence):
    """渲染为全括号中缀表达式，可重新分词、解析"""
    return _render(build_tree(rpn_sequence))


def cross_check(expression, angle_unit='radians', rel_tol=1e-12):
    """
    Args:
        expression: 已规范化的表达式
    Returns:
        bool: 栈式求值与递归求值是否一致
    """
    rpn = compile_expression(expression)
    try:
        stack_result = evaluate_rpn(rpn, angle_unit)
    except EngineError as e:
        logger.debug(f"Stack evaluation failed for {expression!r}: {e.kind}")
        return False
    tree_result = evaluate_tree(build_tree(rpn), EvalContext(angle_unit))
    return bool(np.isclose(stack_result, tree_result, rtol=rel_tol, atol=0.0))
