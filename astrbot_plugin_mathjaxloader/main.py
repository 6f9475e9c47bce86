"""
AstrBot MathJaxLoader 插件
为文本中的公式打上保护标记，并在浏览器中调用 MathJax 排版
"""
from astrbot.api.event import filter, AstrMessageEvent
from astrbot.api.star import Context, Star, register
from astrbot.api import logger
from astrbot.api import AstrBotConfig

from .application import MathJaxFilterHandler, RenderOrchestrator
from .handlers import CommandHandler
from .infrastructure.locale import ConfigLocaleProvider, LanguageCodeMapper
from .types import LoaderConfig


@register(
    "astrbot_plugin_mathjaxloader",
    "mathjaxloader",
    "识别 TeX 公式分隔符并用 MathJax 排版",
    "1.0.0"
)
class MathJaxLoaderPlugin(Star):
    """MathJaxLoader 插件"""

    def __init__(self, context: Context, config: AstrBotConfig):
        super().__init__(context)
        self.config = config

        self._loader_config = LoaderConfig.from_plugin_config(config)
        self._locale_provider = ConfigLocaleProvider(config)
        # 默认语言每次从语言提供者读取
        self._mapper = LanguageCodeMapper(self._locale_provider.get_default_language)

        self._render_orchestrator = RenderOrchestrator(self._loader_config, self._mapper)
        self._command_handler = CommandHandler(
            render_orchestrator=self._render_orchestrator,
            filter_handler=MathJaxFilterHandler(),
            locale_provider=self._locale_provider,
            mapper=self._mapper,
        )

        current = self._locale_provider.get_current_language()
        logger.info(
            f"[MathJaxLoader] 插件已加载，语言: {current} -> {self._mapper.resolve(current)}"
        )

    @filter.command("mjfilter")
    async def cmd_filter(self, event: AstrMessageEvent, content: str = ""):
        """为公式打上 nolink 标记"""
        async for result in self._command_handler.handle_filter(event):
            yield result

    @filter.command("mjlang")
    async def cmd_lang(self, event: AstrMessageEvent, content: str = ""):
        """查看或切换 MathJax 语言"""
        async for result in self._command_handler.handle_lang(event):
            yield result

    @filter.command("mjrender")
    async def cmd_render(self, event: AstrMessageEvent, content: str = ""):
        """在浏览器中排版 Markdown/TeX 内容"""
        async for result in self._command_handler.handle_render(event):
            yield result

    async def terminate(self):
        """插件卸载时清理资源"""
        await self._render_orchestrator.close()
        logger.info("MathJaxLoader 插件已卸载")
