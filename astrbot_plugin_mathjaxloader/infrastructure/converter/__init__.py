"""
基础设施层 - 转换器模块
"""
from .markdown_converter import MarkdownConverter, PAGE_TEMPLATE

__all__ = [
    "MarkdownConverter",
    "PAGE_TEMPLATE",
]
