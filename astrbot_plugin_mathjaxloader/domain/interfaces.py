"""
领域层 - 核心接口定义
遵循依赖倒置原则(DIP)，外部渲染库以窄接口注入，而不是通过全局对象查找
"""

from typing import TYPE_CHECKING, Awaitable, Callable, Protocol, Union, runtime_checkable

if TYPE_CHECKING:
    from ..types import ScanResult


# 就绪判断：同步谓词，或返回可等待对象（如 Playwright 的 page.evaluate）
ReadyPredicate = Callable[[], Union[bool, Awaitable[bool]]]


@runtime_checkable
class IMathScanner(Protocol):
    """公式分隔符扫描器接口"""

    def scan(self, text: str) -> "ScanResult":
        """扫描文本并包裹公式区域"""
        ...


@runtime_checkable
class ILanguageMapper(Protocol):
    """语言代码映射接口"""

    def resolve(self, app_locale: str) -> str:
        """将应用语言代码映射为渲染库支持的语言代码"""
        ...


@runtime_checkable
class ILocaleProvider(Protocol):
    """语言提供者接口"""

    def get_current_language(self) -> str:
        """当前应用语言"""
        ...

    def get_default_language(self) -> str:
        """无法匹配时使用的默认语言"""
        ...


@runtime_checkable
class IReadinessPoller(Protocol):
    """就绪轮询器接口"""

    async def wait(self, is_ready: ReadyPredicate) -> bool:
        """等待就绪或重试耗尽

        Returns:
            是否在重试耗尽前就绪
        """
        ...


@runtime_checkable
class IExternalRenderer(Protocol):
    """外部公式渲染库接口（MathJax）"""

    async def configure(self, locale: str, mathjax_config: str) -> None:
        """写入渲染库配置"""
        ...

    async def set_locale(self, locale: str) -> None:
        """切换渲染库界面语言"""
        ...

    async def mark_configured(self) -> None:
        """通知渲染库配置完成"""
        ...

    async def is_initialized(self) -> bool:
        """渲染库是否已加载"""
        ...

    async def typeset(self, container_selector: str, equation_selector: str) -> int:
        """排版容器内带标记的节点

        Returns:
            提交排版的节点数
        """
        ...
