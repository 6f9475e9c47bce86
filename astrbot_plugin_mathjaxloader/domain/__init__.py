"""
领域层 - 核心接口和错误定义
"""

from .interfaces import (
    IMathScanner,
    ILanguageMapper,
    ILocaleProvider,
    IReadinessPoller,
    IExternalRenderer,
    ReadyPredicate,
)
from .errors import (
    ErrorCode,
    LoaderError,
    BrowserError,
    DependencyError,
    RenderError,
    ConfigError,
)

__all__ = [
    "IMathScanner",
    "ILanguageMapper",
    "ILocaleProvider",
    "IReadinessPoller",
    "IExternalRenderer",
    "ReadyPredicate",
    "ErrorCode",
    "LoaderError",
    "BrowserError",
    "DependencyError",
    "RenderError",
    "ConfigError",
]
