"""
基于插件配置的语言提供者
"""

from typing import Any, Mapping, Optional


class ConfigLocaleProvider:
    """从插件配置读取当前语言和默认语言，当前语言可在运行时切换"""

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        language: str = "en",
        default_language: str = "en",
    ):
        config = config or {}
        self._current = config.get("language") or language
        self._default = config.get("default_language") or default_language

    def get_current_language(self) -> str:
        return self._current

    def get_default_language(self) -> str:
        return self._default

    def set_current_language(self, lang: str) -> bool:
        """切换当前语言

        Returns:
            语言是否发生变化
        """
        if lang == self._current:
            return False
        self._current = lang
        return True
