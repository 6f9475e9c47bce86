"""
渲染编排器
编排完整的渲染流程
"""
import traceback
from typing import Optional

from astrbot.api import logger

from ..domain.errors import LoaderError, RenderError
from ..infrastructure.browser import BrowserManager, PlaywrightMathJaxRenderer
from ..infrastructure.converter import MarkdownConverter
from ..infrastructure.locale import LanguageCodeMapper
from ..types import LoaderConfig, RenderOutput
from ..utils.decorators import log_stage, with_render_timeout
from ..utils.polling import ReadinessPoller
from .filter_handler import MathJaxFilterHandler
from .mathjax_loader import MathJaxLoader


class RenderOrchestrator:
    """
    渲染编排器

    Pipeline:
    content ──► markdown ──► filter ──► page ──► wait ready ──► typeset ──► html

    1. Markdown转HTML，正文经过公式过滤器 (markdown_converter / filter_handler)
    2. 新建页面并写入配置 (browser_manager / mathjax_loader)
    3. 加载MathJax，等待就绪后排版 (page_renderer / filter_handler)

    渲染进行中的加载器会收到语言变化通知。
    """

    def __init__(self, config: LoaderConfig, mapper: LanguageCodeMapper):
        self._config = config
        self._mapper = mapper
        self._browser_manager = BrowserManager(
            viewport_width=config.viewport_width,
            viewport_height=config.viewport_height,
        )
        self._markdown_converter = MarkdownConverter()
        self._active_loaders: set[MathJaxLoader] = set()

    @property
    def config(self) -> LoaderConfig:
        return self._config

    def _new_filter(self, renderer: PlaywrightMathJaxRenderer) -> MathJaxFilterHandler:
        # 每个页面独立的加载器状态和轮询计数
        poller = ReadinessPoller(
            interval_ms=self._config.poll_interval_ms,
            max_retries=self._config.max_retries,
        )
        loader = MathJaxLoader(
            renderer, self._mapper, poller, mathjax_config=self._config.mathjax_config
        )
        return MathJaxFilterHandler(loader)

    @log_stage("渲染")
    async def render(self, content: str, lang: Optional[str] = None) -> RenderOutput:
        """渲染内容

        Args:
            content: Markdown/LaTeX内容
            lang: 应用语言，缺省使用配置语言

        Returns:
            排版后的页面HTML

        Raises:
            BrowserError: 浏览器启动失败
            DependencyError: Chromium 未安装
            RenderError: 渲染失败或超时
        """
        logger.info(f"[MathJaxLoader] 开始渲染，内容长度: {len(content)}")
        try:
            return await self._render_page(content, lang or self._config.language)
        except LoaderError:
            raise
        except Exception as e:
            logger.error(f"[MathJaxLoader] 渲染失败: {type(e).__name__}: {e}")
            logger.error(f"[MathJaxLoader] 堆栈信息:\n{traceback.format_exc()}")
            raise RenderError(f"渲染失败: {e}")

    @with_render_timeout
    async def _render_page(self, content: str, lang: str) -> RenderOutput:
        page = await self._browser_manager.new_page()
        loader = None
        try:
            renderer = PlaywrightMathJaxRenderer(page, self._config.mathjax_url)
            handler = self._new_filter(renderer)
            loader = handler.loader
            self._active_loaders.add(loader)

            html = self._markdown_converter.convert_to_html(
                content, self._config.bg_color, body_filter=handler.filter
            )
            await page.set_content(html, wait_until="domcontentloaded")

            await loader.configure(lang)
            await renderer.load()

            result = await handler.handle_html("body")
            if result.ready and result.typeset_count:
                await renderer.wait_idle()

            logger.info(
                f"[MathJaxLoader] 渲染完成，语言: {loader.lang}，公式块: {result.typeset_count}"
            )
            return RenderOutput(html=await page.content(), lang=loader.lang, typeset=result)
        finally:
            self._active_loaders.discard(loader)
            await page.close()

    async def on_language_changed(self, app_lang: str) -> int:
        """通知渲染中的加载器切换语言

        Returns:
            已通知的加载器数量
        """
        notified = 0
        for loader in list(self._active_loaders):
            try:
                await loader.on_language_changed(app_lang)
                notified += 1
            except Exception as e:
                # 页面可能已在关闭
                logger.warning(f"[MathJaxLoader] 同步语言失败: {type(e).__name__}: {e}")
        return notified

    async def close(self) -> None:
        """释放资源"""
        await self._browser_manager.close()
        logger.info("[MathJaxLoader] 编排器资源已释放")
