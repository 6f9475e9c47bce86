"""
就绪轮询器
以固定间隔检查外部渲染库是否就绪，超过重试上限后照常继续
"""

import asyncio
import inspect
from typing import Awaitable, Callable

from astrbot.api import logger

from ..domain.interfaces import ReadyPredicate


class ReadinessPoller:
    """
    就绪轮询器

    - 就绪时立即返回 True
    - 否则每隔 interval_ms 重试一次
    - 重试 max_retries 次仍未就绪时返回 False，不抛出异常

    每次 wait 调用拥有独立的计数，可并发使用。
    """

    def __init__(
        self,
        interval_ms: int = 250,
        max_retries: int = 20,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self._interval_ms = interval_ms
        self._max_retries = max_retries
        self._sleep = sleep

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @property
    def max_retries(self) -> int:
        return self._max_retries

    async def wait(self, is_ready: ReadyPredicate) -> bool:
        """等待就绪

        Returns:
            重试耗尽前是否就绪
        """
        retries = 0
        while True:
            if await self._check(is_ready):
                if retries:
                    logger.debug(f"[MathJaxLoader] 第 {retries} 次重试后就绪")
                return True

            if retries >= self._max_retries:
                logger.warning(
                    f"[MathJaxLoader] 等待就绪超过 {self._max_retries} 次重试，继续执行"
                )
                return False

            await self._sleep(self._interval_ms / 1000)
            retries += 1

    async def _check(self, is_ready: ReadyPredicate) -> bool:
        try:
            result = is_ready()
            if inspect.isawaitable(result):
                result = await result
            return bool(result)
        except Exception as e:
            logger.warning(f"[MathJaxLoader] 就绪检查失败: {type(e).__name__}: {e}")
            return False
