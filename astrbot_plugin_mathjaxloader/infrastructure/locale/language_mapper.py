"""
语言代码映射器
将应用语言代码映射为 MathJax 本地化语言代码
"""

from types import MappingProxyType
from typing import Callable, Union

# MathJax/localization/ 目录下的语言代码
MATHJAX_LANG_CODES: frozenset[str] = frozenset({
    "ar", "ast", "bcc", "bg", "br", "ca", "cdo", "ce", "cs", "cy", "da", "de",
    "diq", "en", "eo", "es", "fa", "fi", "fr", "gl", "he", "ia", "it", "ja",
    "kn", "ko", "lb", "lki", "lt", "mk", "nl", "oc", "pl", "pt", "pt-br",
    "qqq", "ru", "scn", "sco", "sk", "sl", "sv", "th", "tr", "uk", "vi",
    "zh-hans", "zh-hant",
})

# 显式映射和已知例外（应用 => MathJax）
EXPLICIT_MAPPING = MappingProxyType({
    "zh-tw": "zh-hant",
    "zh-cn": "zh-hans",
})


class LanguageCodeMapper:
    """语言代码映射器

    优先级：显式映射 > 完全匹配 > 主语言子标签 > 默认语言
    """

    def __init__(self, default_language: Union[str, Callable[[], str]] = "en"):
        self._default_language = default_language

    def resolve(self, app_locale: str) -> str:
        """映射语言代码，总能返回可用的语言"""
        # 显式映射优先级最高
        if app_locale in EXPLICIT_MAPPING:
            return EXPLICIT_MAPPING[app_locale]

        # 完全匹配
        if app_locale in MATHJAX_LANG_CODES:
            return app_locale

        # 尝试主语言，如 fr-ca -> fr
        base = app_locale.split("-")[0]
        if base in MATHJAX_LANG_CODES:
            return base

        # 不再猜测，使用默认语言
        return self.default_language

    @property
    def default_language(self) -> str:
        if callable(self._default_language):
            return self._default_language()
        return self._default_language
