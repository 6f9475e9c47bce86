"""
正则表达式模式集中管理模块

本模块集中定义和预编译正则表达式与标记常量。
所有模式按功能分组，使用全大写+下划线命名。
"""

import re
from typing import Pattern

# ============================================================================
# 标记 span (math_scanner.py / filter_handler.py)
# ============================================================================

# 包裹单个公式区域，阻止链接识别等后续过滤
NOLINK_OPEN = '<span class="nolink">'
NOLINK_CLOSE = "</span>"

# 包裹整段已处理文本，渲染阶段据此定位节点
EQUATION_CLASS = "filter_mathjaxloader_equation"
EQUATION_OPEN = f'<span class="{EQUATION_CLASS}">'
EQUATION_CLOSE = "</span>"
EQUATION_ATTRIBUTE = f'class="{EQUATION_CLASS}"'
EQUATION_SELECTOR = f".{EQUATION_CLASS}"

# 扫描器跳过已包裹内容时用于计算 span 嵌套
SPAN_TAG: Pattern[str] = re.compile(r"<span\b|</span>")


# ============================================================================
# 过滤器预检 (filter_handler.py)
# ============================================================================

# \[ 或 \( 开头
MATH_BACKSLASH_OPENER: Pattern[str] = re.compile(r"\\[\[\(]")

# $$
MATH_DOLLAR_OPENER: Pattern[str] = re.compile(r"\$\$")


# ============================================================================
# Markdown 转换器相关正则 (markdown_converter.py)
# ============================================================================

# \[ ... \] 行间公式
MD_DISPLAY_BRACKET: Pattern[str] = re.compile(r"\\\[[\s\S]*?\\\]")

# \( ... \) 行内公式
MD_INLINE_PAREN: Pattern[str] = re.compile(r"\\\([\s\S]*?\\\)")

# $$ ... $$ 行间公式
MD_DISPLAY_DOLLAR: Pattern[str] = re.compile(r"\$\$[\s\S]*?\$\$")

# ``` 代码块
MD_FENCED_CODE: Pattern[str] = re.compile(r"```[\s\S]*?```")

# 标题缺少空格 (#标题)
MD_HEADING_NO_SPACE: Pattern[str] = re.compile(r"^(#{1,6})([^#\s])")

# 标题
MD_HEADING: Pattern[str] = re.compile(r"^#{1,6}\s+")

# 列表项
MD_LIST_ITEM: Pattern[str] = re.compile(r"^(?:[-*]|\d+\.)\s+")
