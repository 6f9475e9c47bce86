"""
命令处理器
处理 /mjfilter, /mjlang, /mjrender 命令
"""

import traceback
from typing import TYPE_CHECKING, AsyncIterator

from astrbot.api import logger
from astrbot.api.event import AstrMessageEvent

from ..domain.errors import DependencyError

if TYPE_CHECKING:
    from ..application import MathJaxFilterHandler, RenderOrchestrator
    from ..infrastructure.locale import ConfigLocaleProvider, LanguageCodeMapper


class CommandHandler:
    """命令处理器"""

    def __init__(
        self,
        render_orchestrator: "RenderOrchestrator",
        filter_handler: "MathJaxFilterHandler",
        locale_provider: "ConfigLocaleProvider",
        mapper: "LanguageCodeMapper",
    ):
        self._render_orchestrator = render_orchestrator
        self._filter_handler = filter_handler
        self._locale_provider = locale_provider
        self._mapper = mapper

    async def handle_filter(self, event: AstrMessageEvent) -> AsyncIterator:
        """处理 /mjfilter 命令：返回打过标记的文本"""
        text = self._extract_command_content(event, "mjfilter")

        if not text:
            yield event.plain_result("请提供要处理的文本，例如: /mjfilter \\(a^2\\)")
            return

        filtered = self._filter_handler.filter(text)
        if filtered == text:
            yield event.plain_result("未检测到公式，文本保持不变")
            return

        yield event.plain_result(filtered)

    async def handle_lang(self, event: AstrMessageEvent) -> AsyncIterator:
        """处理 /mjlang 命令：查看或切换语言"""
        lang = self._extract_command_content(event, "mjlang")

        if not lang:
            current = self._locale_provider.get_current_language()
            yield event.plain_result(
                f"当前语言: {current}，MathJax 语言: {self._mapper.resolve(current)}"
            )
            return

        changed = self._locale_provider.set_current_language(lang)
        resolved = self._mapper.resolve(lang)
        if changed:
            notified = await self._render_orchestrator.on_language_changed(lang)
            logger.info(
                f"[MathJaxLoader] 应用语言已切换: {lang} -> {resolved}，"
                f"已通知渲染中的加载器: {notified}"
            )
        yield event.plain_result(f"语言: {lang}，MathJax 语言: {resolved}")

    async def handle_render(self, event: AstrMessageEvent) -> AsyncIterator:
        """处理 /mjrender 命令：在浏览器中排版"""
        content = self._extract_command_content(event, "mjrender")

        if not content:
            yield event.plain_result("请提供要渲染的内容，例如: /mjrender $$E=mc^2$$")
            return

        logger.info(f"[MathJaxLoader] /mjrender 内容长度: {len(content)}")

        try:
            output = await self._render_orchestrator.render(
                content, self._locale_provider.get_current_language()
            )
        except DependencyError as e:
            yield event.plain_result(f"{e}，请在服务器上执行: {e.install_command}")
            return
        except Exception as e:
            logger.error(f"[MathJaxLoader] 渲染失败: {type(e).__name__}: {e}")
            logger.error(f"[MathJaxLoader] 堆栈信息:\n{traceback.format_exc()}")
            yield event.plain_result(f"渲染失败: {e}")
            return

        if not output.typeset.ready:
            yield event.plain_result("MathJax 未能及时加载，公式未排版")
            return

        yield event.plain_result(
            f"排版完成，语言: {output.lang}，公式块: {output.typeset.typeset_count}"
        )

    def _extract_command_content(self, event: AstrMessageEvent, cmd_name: str) -> str:
        """从完整消息中提取命令后的内容（避免空格截断问题）"""
        full_msg = event.get_message_str()
        content = ""

        for prefix in [f"/{cmd_name} ", f"{cmd_name} "]:
            if prefix in full_msg:
                content = full_msg.split(prefix, 1)[1]
                break

        return content.strip()
