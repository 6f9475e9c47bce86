"""
基础设施层 - 公式扫描模块
"""
from .math_scanner import MathDelimiterScanner

__all__ = ["MathDelimiterScanner"]
