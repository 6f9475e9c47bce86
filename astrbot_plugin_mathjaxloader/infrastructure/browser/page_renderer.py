"""
Playwright MathJax 渲染器
在浏览器页面中驱动 MathJax 2.x，实现外部渲染库接口
"""

from typing import TYPE_CHECKING

from astrbot.api import logger

if TYPE_CHECKING:
    from playwright.async_api import Page


_IS_INITIALIZED_JS = """
() => typeof window.MathJax !== 'undefined' && !!window.MathJax.Hub
"""

_SET_LOCALE_JS = """
(lang) => {
    MathJax.Hub.Queue(function () {
        MathJax.Localization.setLocale(lang);
    });
}
"""

_MARK_CONFIGURED_JS = """
() => { MathJax.Hub.Configured(); }
"""

# 排版时把 processSectionDelay 置 0，完成后恢复
_TYPESET_JS = """
([containerSelector, equationSelector]) => {
    const container = document.querySelector(containerSelector);
    if (!container) {
        return 0;
    }
    const processDelay = MathJax.Hub.processSectionDelay;
    MathJax.Hub.processSectionDelay = 0;

    const equations = Array.from(container.querySelectorAll(equationSelector));
    equations.forEach(function (node) {
        MathJax.Hub.Queue(['Typeset', MathJax.Hub, node]);
    });

    MathJax.Hub.processSectionDelay = processDelay;
    return equations.length;
}
"""

_WAIT_IDLE_JS = """
() => new Promise(function (resolve) {
    MathJax.Hub.Queue(function () { resolve(true); });
})
"""


class PlaywrightMathJaxRenderer:
    """Playwright MathJax 渲染器 - 每个页面一个实例"""

    def __init__(self, page: "Page", mathjax_url: str):
        self._page = page
        self._mathjax_url = mathjax_url

    @property
    def page(self) -> "Page":
        return self._page

    async def configure(self, locale: str, mathjax_config: str) -> None:
        """在页面中加入 MathJax 配置脚本"""
        await self._page.add_script_tag(
            content=mathjax_config, type="text/x-mathjax-config"
        )
        logger.debug(f"[MathJaxLoader] 已注入 MathJax 配置，语言: {locale}")

    async def load(self) -> None:
        """加载 MathJax 脚本"""
        logger.info(f"[MathJaxLoader] 加载 MathJax: {self._mathjax_url}")
        await self._page.add_script_tag(url=self._mathjax_url)

    async def set_locale(self, locale: str) -> None:
        await self._page.evaluate(_SET_LOCALE_JS, locale)

    async def mark_configured(self) -> None:
        await self._page.evaluate(_MARK_CONFIGURED_JS)

    async def is_initialized(self) -> bool:
        return bool(await self._page.evaluate(_IS_INITIALIZED_JS))

    async def typeset(self, container_selector: str, equation_selector: str) -> int:
        return int(
            await self._page.evaluate(
                _TYPESET_JS, [container_selector, equation_selector]
            )
        )

    async def wait_idle(self) -> None:
        """等待 MathJax 队列清空"""
        await self._page.evaluate(_WAIT_IDLE_JS)
