"""
浏览器管理器
管理Playwright浏览器实例的生命周期，所有渲染共享一个Chromium
"""
import asyncio
import traceback
from typing import Optional

from playwright.async_api import async_playwright, Browser, Page, Playwright

from astrbot.api import logger
from ...domain.errors import BrowserError, DependencyError


class BrowserManager:
    """浏览器管理器"""

    LAUNCH_ARGS = [
        "--disable-web-security",
        "--allow-file-access-from-files",
    ]
    INSTALL_COMMAND = "playwright install chromium"

    def __init__(self, viewport_width: int = 1150, viewport_height: int = 2000):
        self._viewport = {"width": viewport_width, "height": viewport_height}
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._lock = asyncio.Lock()

    async def get_browser(self) -> Browser:
        """获取或创建浏览器实例（并发安全）"""
        async with self._lock:
            try:
                if self._browser is None or not self._browser.is_connected():
                    logger.info("[MathJaxLoader] 正在启动浏览器...")
                    if self._playwright is None:
                        self._playwright = await async_playwright().start()
                        logger.debug("[MathJaxLoader] Playwright 已启动")

                    self._browser = await self._playwright.chromium.launch(
                        headless=True, args=self.LAUNCH_ARGS
                    )
                    logger.info("[MathJaxLoader] 浏览器实例已创建")
                return self._browser

            except Exception as e:
                if "Executable doesn't exist" in str(e):
                    logger.error(
                        f"[MathJaxLoader] 未找到 Chromium，请执行: {self.INSTALL_COMMAND}"
                    )
                    raise DependencyError(
                        "Chromium 未安装", install_command=self.INSTALL_COMMAND
                    )
                logger.error(f"[MathJaxLoader] 浏览器启动失败: {type(e).__name__}: {e}")
                logger.error(f"[MathJaxLoader] 堆栈信息:\n{traceback.format_exc()}")
                raise BrowserError(f"浏览器启动失败: {e}")

    async def new_page(self) -> Page:
        """新建页面，调用方负责关闭"""
        browser = await self.get_browser()
        page = await browser.new_page(viewport=self._viewport)
        page.on(
            "console", lambda msg: logger.debug(f"[Browser] {msg.type}: {msg.text}")
        )
        page.on("pageerror", lambda err: logger.error(f"[Browser Error] {err}"))
        return page

    async def close(self) -> None:
        """关闭浏览器和Playwright"""
        async with self._lock:
            if self._browser:
                try:
                    await self._browser.close()
                except Exception as e:
                    logger.warning(f"[MathJaxLoader] 关闭浏览器时出错: {e}")
                finally:
                    self._browser = None

            if self._playwright:
                try:
                    await self._playwright.stop()
                except Exception as e:
                    logger.warning(f"[MathJaxLoader] 关闭Playwright时出错: {e}")
                finally:
                    self._playwright = None

            logger.info("[MathJaxLoader] 浏览器资源已释放")
