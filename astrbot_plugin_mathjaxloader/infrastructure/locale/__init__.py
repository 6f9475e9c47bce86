"""
基础设施层 - 语言模块
"""
from .language_mapper import LanguageCodeMapper, MATHJAX_LANG_CODES, EXPLICIT_MAPPING
from .locale_provider import ConfigLocaleProvider

__all__ = [
    "LanguageCodeMapper",
    "MATHJAX_LANG_CODES",
    "EXPLICIT_MAPPING",
    "ConfigLocaleProvider",
]
