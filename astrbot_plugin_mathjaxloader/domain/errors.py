"""
领域层 - 错误类型定义

扫描器、语言映射和就绪轮询本身从不抛出异常，
这里的错误只用于浏览器、配置等外围环节。
"""

from enum import Enum


class ErrorCode(Enum):
    """错误代码枚举"""

    BROWSER_LAUNCH_FAILED = "BROWSER_LAUNCH_FAILED"
    DEPENDENCY_MISSING = "DEPENDENCY_MISSING"
    RENDER_FAILED = "RENDER_FAILED"
    CONFIG_INVALID = "CONFIG_INVALID"


class LoaderError(Exception):
    """MathJaxLoader 错误基类"""

    def __init__(self, message: str, code: ErrorCode = None):
        super().__init__(message)
        self.code = code


class BrowserError(LoaderError):
    """浏览器相关错误"""

    def __init__(self, message: str):
        super().__init__(message, code=ErrorCode.BROWSER_LAUNCH_FAILED)


class DependencyError(LoaderError):
    """依赖缺失错误"""

    def __init__(self, message: str, install_command: str = ""):
        super().__init__(message, code=ErrorCode.DEPENDENCY_MISSING)
        self.install_command = install_command


class RenderError(LoaderError):
    """渲染错误"""

    def __init__(self, message: str):
        super().__init__(message, code=ErrorCode.RENDER_FAILED)


class ConfigError(LoaderError):
    """配置错误"""

    def __init__(self, message: str):
        super().__init__(message, code=ErrorCode.CONFIG_INVALID)
