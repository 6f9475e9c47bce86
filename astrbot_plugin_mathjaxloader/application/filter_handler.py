"""
MathJax 过滤器
filter 阶段给公式打标记，handle_html 阶段等待 MathJax 并排版带标记的节点
"""

from typing import TYPE_CHECKING, Optional

from astrbot.api import logger

from ..infrastructure.scanner import MathDelimiterScanner
from ..types import FilterOptions, TypesetResult
from ..utils.regex_patterns import (
    EQUATION_ATTRIBUTE,
    EQUATION_CLOSE,
    EQUATION_OPEN,
    MATH_BACKSLASH_OPENER,
    MATH_DOLLAR_OPENER,
)

if TYPE_CHECKING:
    from ..domain.interfaces import IMathScanner
    from .mathjax_loader import MathJaxLoader


class MathJaxFilterHandler:
    """MathJax 过滤器"""

    name = "MathJaxFilterHandler"
    filter_name = "mathjaxloader"

    def __init__(
        self,
        loader: Optional["MathJaxLoader"] = None,
        scanner: Optional["IMathScanner"] = None,
    ):
        self._loader = loader
        self._scanner = scanner or MathDelimiterScanner()

    @property
    def loader(self) -> Optional["MathJaxLoader"]:
        return self._loader

    def filter(self, text: str, options: Optional[FilterOptions] = None) -> str:
        """过滤文本

        Args:
            text: 待过滤文本
            options: 过滤选项，ws_not_filtered 为 False 时表示上游已处理

        Returns:
            过滤后的文本；包含公式时整体包裹在 filter_mathjaxloader_equation span 中
        """
        options = options or FilterOptions()

        # 上游已经处理过
        if not options.ws_not_filtered:
            return text

        # 文本已经被处理过
        if EQUATION_ATTRIBUTE in text:
            return text

        # 只有包含公式符号时才扫描
        if not (MATH_BACKSLASH_OPENER.search(text) or MATH_DOLLAR_OPENER.search(text)):
            return text

        result = self._scanner.scan(text)
        if not result.changed:
            return text

        logger.debug(f"[MathJaxLoader] 检测到公式，文本长度: {len(text)}")
        return EQUATION_OPEN + result.text + EQUATION_CLOSE

    async def handle_html(self, container_selector: str) -> TypesetResult:
        """等待 MathJax 就绪后排版容器内带标记的节点"""
        if self._loader is None:
            logger.warning("[MathJaxLoader] 未绑定加载器，跳过排版")
            return TypesetResult(ready=False)

        ready = await self._loader.wait_for_ready()
        count = await self._loader.typeset(container_selector)
        return TypesetResult(ready=ready, typeset_count=count)
