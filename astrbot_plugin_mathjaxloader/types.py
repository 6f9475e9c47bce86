"""
MathJaxLoader 类型定义
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional

from .domain.errors import ConfigError


DEFAULT_MATHJAX_URL = "https://cdnjs.cloudflare.com/ajax/libs/mathjax/2.7.2/MathJax.js"

DEFAULT_MATHJAX_CONFIG = """
MathJax.Hub.Config({
    extensions: [
        "Safe.js",
        "tex2jax.js",
        "mml2jax.js",
        "MathEvents.js",
        "MathZoom.js",
        "MathMenu.js",
        "toMathML.js",
        "TeX/noErrors.js",
        "TeX/noUndefined.js",
        "TeX/AMSmath.js",
        "TeX/AMSsymbols.js",
        "fast-preview.js",
        "AssistiveMML.js",
        "[a11y]/accessibility-menu.js"
    ],
    jax: ["input/TeX","input/MathML","output/SVG"],
    menuSettings: {
        zoom: "Double-Click",
        mpContext: true,
        mpMouse: true
    },
    errorSettings: { message: ["!"] },
    skipStartupTypeset: true,
    messageStyle: "none"
});
"""


class DisplayKind(Enum):
    """行间公式分隔符风格（互斥）"""

    BRACKET = "bracket"  # \[ ... \]
    DOLLAR = "dollar"  # $$ ... $$


class RegionKind(Enum):
    """公式区域类型"""

    DISPLAY = "display"
    INLINE = "inline"


class LoaderState(Enum):
    """加载器配置状态"""

    UNINITIALIZED = "uninitialized"
    CONFIGURING = "configuring"
    CONFIGURED = "configured"


@dataclass(frozen=True)
class MathRegion:
    """已闭合的公式区域，end 为包含位置"""

    start: int
    end: int
    kind: RegionKind

    def slice(self, text: str) -> str:
        return text[self.start:self.end + 1]


@dataclass(frozen=True)
class ScanResult:
    """扫描结果（不可变）"""

    text: str
    changed: bool


@dataclass(frozen=True)
class FilterOptions:
    """过滤选项

    ws_not_filtered 为 False 表示上游已经处理过该文本
    """

    ws_not_filtered: bool = True


@dataclass(frozen=True)
class TypesetResult:
    """排版结果"""

    ready: bool
    typeset_count: int = 0


@dataclass(frozen=True)
class RenderOutput:
    """渲染输出：排版后的页面HTML"""

    html: str
    lang: str
    typeset: TypesetResult


@dataclass(frozen=True)
class LoaderConfig:
    """加载器配置（不可变）"""

    mathjax_url: str = DEFAULT_MATHJAX_URL
    mathjax_config: str = DEFAULT_MATHJAX_CONFIG
    language: str = "en"
    default_language: str = "en"
    poll_interval_ms: int = 250
    max_retries: int = 20
    render_timeout_ms: int = 60000
    bg_color: str = "#FFFFFF"
    viewport_width: int = 1150
    viewport_height: int = 2000

    @classmethod
    def from_plugin_config(cls, config: Optional[Mapping[str, Any]]) -> "LoaderConfig":
        """从插件配置构建，缺省项使用默认值

        Raises:
            ConfigError: 轮询间隔、重试次数或渲染超时不是正整数
        """
        config = config or {}
        defaults = cls()

        numbers = {}
        for key in ("poll_interval_ms", "max_retries", "render_timeout_ms"):
            try:
                value = int(config.get(key, getattr(defaults, key)))
            except (TypeError, ValueError) as e:
                raise ConfigError(f"{key} 配置无效: {e}")
            if value <= 0:
                raise ConfigError(f"{key} 必须为正数: {value}")
            numbers[key] = value

        return cls(
            mathjax_url=config.get("mathjax_url") or defaults.mathjax_url,
            language=config.get("language") or defaults.language,
            default_language=config.get("default_language") or defaults.default_language,
            **numbers,
            bg_color=config.get("background_color") or defaults.bg_color,
        )
