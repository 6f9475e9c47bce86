"""
工具层 - 渲染流程装饰器、就绪轮询和正则常量
"""

from .decorators import log_stage, with_render_timeout
from .polling import ReadinessPoller
from . import regex_patterns

__all__ = ["log_stage", "with_render_timeout", "ReadinessPoller", "regex_patterns"]
