"""
基础设施层 - 浏览器模块
"""
from .browser_manager import BrowserManager
from .page_renderer import PlaywrightMathJaxRenderer

__all__ = [
    "BrowserManager",
    "PlaywrightMathJaxRenderer",
]
