"""
工具层 - 渲染流程装饰器
阶段日志与按配置的渲染超时
"""

import asyncio
import functools
import time
from typing import Awaitable, Callable, TypeVar

from astrbot.api import logger

from ..domain.errors import RenderError

T = TypeVar("T")


def log_stage(stage: str):
    """记录一个异步阶段的开始、耗时和失败

    Args:
        stage: 日志中显示的阶段名称，如 "渲染"、"等待 MathJax"
    """

    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            logger.debug(f"[MathJaxLoader] {stage}开始")
            start = time.perf_counter()
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"[MathJaxLoader] {stage}失败，耗时: {time.perf_counter() - start:.2f}s, "
                    f"错误: {type(e).__name__}: {e}"
                )
                raise
            logger.debug(
                f"[MathJaxLoader] {stage}完成，耗时: {time.perf_counter() - start:.2f}s"
            )
            return result

        return wrapper

    return decorator


def with_render_timeout(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
    """按实例 config.render_timeout_ms 限制方法耗时

    超时时取消被装饰的协程（其 finally 照常执行）并抛出 RenderError。
    """

    @functools.wraps(func)
    async def wrapper(self, *args, **kwargs) -> T:
        timeout_ms = self.config.render_timeout_ms
        try:
            return await asyncio.wait_for(
                func(self, *args, **kwargs), timeout=timeout_ms / 1000
            )
        except asyncio.TimeoutError:
            logger.warning(f"[MathJaxLoader] {func.__name__} 超时 ({timeout_ms}ms)")
            raise RenderError(f"渲染超时 ({timeout_ms}ms)")

    return wrapper
