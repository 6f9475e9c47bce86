"""
MathJax 加载器
持有加载状态，负责语言配置、就绪等待和排版调用
"""

from typing import TYPE_CHECKING, Optional

from astrbot.api import logger

from ..types import DEFAULT_MATHJAX_CONFIG, LoaderState
from ..utils.decorators import log_stage
from ..utils.polling import ReadinessPoller
from ..utils.regex_patterns import EQUATION_SELECTOR

if TYPE_CHECKING:
    from ..domain.interfaces import IExternalRenderer, ILanguageMapper, IReadinessPoller


class MathJaxLoader:
    """
    MathJax 加载器

    状态流转：
    UNINITIALIZED ──configure()──► CONFIGURING ──首次 typeset()──► CONFIGURED

    语言在 configure 时只是记下，等渲染库真正加载后首次排版时再应用。
    """

    def __init__(
        self,
        renderer: "IExternalRenderer",
        mapper: "ILanguageMapper",
        poller: Optional["IReadinessPoller"] = None,
        mathjax_config: str = DEFAULT_MATHJAX_CONFIG,
    ):
        self._renderer = renderer
        self._mapper = mapper
        self._poller = poller or ReadinessPoller()
        self._mathjax_config = mathjax_config
        self._state = LoaderState.UNINITIALIZED
        self._lang = ""

    @property
    def state(self) -> LoaderState:
        return self._state

    @property
    def lang(self) -> str:
        return self._lang

    async def configure(self, app_lang: str) -> str:
        """写入配置并记下语言

        Returns:
            映射后的 MathJax 语言
        """
        self._lang = self._mapper.resolve(app_lang)
        self._state = LoaderState.CONFIGURING
        await self._renderer.configure(self._lang, self._mathjax_config)
        logger.info(f"[MathJaxLoader] 已配置，语言: {app_lang} -> {self._lang}")
        return self._lang

    async def is_ready(self) -> bool:
        return await self._renderer.is_initialized()

    @log_stage("等待 MathJax 加载")
    async def wait_for_ready(self) -> bool:
        """等待渲染库加载，超时后照常返回"""
        return await self._poller.wait(self.is_ready)

    async def typeset(self, container_selector: str) -> int:
        """排版容器中带标记的公式节点

        Returns:
            提交排版的节点数，渲染库未加载时为 0
        """
        if self._state is not LoaderState.CONFIGURED:
            await self._apply_locale()

        if not await self._renderer.is_initialized():
            logger.warning("[MathJaxLoader] MathJax 未加载，跳过排版")
            return 0

        count = await self._renderer.typeset(container_selector, EQUATION_SELECTOR)
        logger.debug(f"[MathJaxLoader] 已提交排版节点: {count}")
        return count

    async def on_language_changed(self, app_lang: str) -> str:
        """应用语言变化时同步 MathJax 语言

        Returns:
            映射后的 MathJax 语言
        """
        lang = self._mapper.resolve(app_lang)
        self._lang = lang

        if await self._renderer.is_initialized():
            await self._renderer.set_locale(lang)
            logger.info(f"[MathJaxLoader] 语言已切换: {app_lang} -> {lang}")
        return lang

    async def _apply_locale(self) -> None:
        """渲染库加载后应用记下的语言，并标记配置完成"""
        if not await self._renderer.is_initialized():
            return

        # 未调用过 configure 时保留 MathJax 自己的语言
        if self._lang:
            await self._renderer.set_locale(self._lang)
        await self._renderer.mark_configured()
        self._state = LoaderState.CONFIGURED
        logger.debug(f"[MathJaxLoader] 已应用语言: {self._lang}")
