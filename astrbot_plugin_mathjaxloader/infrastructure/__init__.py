"""
基础设施层
"""
from .browser import (
    BrowserManager,
    PlaywrightMathJaxRenderer,
)
from .converter import MarkdownConverter
from .locale import ConfigLocaleProvider, LanguageCodeMapper
from .scanner import MathDelimiterScanner

__all__ = [
    "BrowserManager",
    "PlaywrightMathJaxRenderer",
    "MarkdownConverter",
    "ConfigLocaleProvider",
    "LanguageCodeMapper",
    "MathDelimiterScanner",
]
