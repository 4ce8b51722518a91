"""验证模块"""
from .cross_check import build_tree, evaluate_tree, to_infix, cross_check

__all__ = ['build_tree', 'evaluate_tree', 'to_infix', 'cross_check']
