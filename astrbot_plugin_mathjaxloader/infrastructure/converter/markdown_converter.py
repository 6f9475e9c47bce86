"""
Markdown转换器
将Markdown转换为HTML页面，公式区域原样保留给过滤器和MathJax处理
"""

from typing import Callable, Optional

import markdown

from ...utils.regex_patterns import (
    MD_DISPLAY_BRACKET,
    MD_DISPLAY_DOLLAR,
    MD_FENCED_CODE,
    MD_HEADING,
    MD_HEADING_NO_SPACE,
    MD_INLINE_PAREN,
    MD_LIST_ITEM,
)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<style>
:root { --bg-color: #FFFFFF; }
body {
    background: var(--bg-color);
    font-family: -apple-system, "Segoe UI", "Noto Sans CJK SC", sans-serif;
    line-height: 1.6;
    padding: 24px 40px;
}
pre { background: rgba(0, 0, 0, 0.05); padding: 12px; overflow-x: auto; }
</style>
</head>
<body>
{{CONTENT}}
</body>
</html>
"""


class MarkdownConverter:
    """Markdown转换器"""

    def __init__(self, template: str = PAGE_TEMPLATE):
        self._template = template

    def convert_to_html(
        self,
        md_text: str,
        bg_color: str = "#FFFFFF",
        body_filter: Optional[Callable[[str], str]] = None,
    ) -> str:
        """将Markdown转换为完整HTML

        Args:
            md_text: Markdown文本
            bg_color: 背景颜色
            body_filter: 作用于HTML正文的过滤器（如公式标记）
        """
        html_body = self.convert_body(md_text)
        if body_filter is not None:
            html_body = body_filter(html_body)
        return self._apply_template(html_body, bg_color)

    def convert_body(self, md_text: str) -> str:
        """只转换正文，不套模板"""
        md_text = self._preprocess_markdown(md_text)

        # 保护公式和代码块，避免Markdown吃掉反斜杠
        md_text, code_blocks = self._extract_blocks(md_text, [MD_FENCED_CODE], "CODEBLOCK")
        md_text, math_blocks = self._extract_blocks(
            md_text,
            [MD_DISPLAY_BRACKET, MD_INLINE_PAREN, MD_DISPLAY_DOLLAR],
            "MATHBLOCK",
        )

        html_body = markdown.markdown(md_text, extensions=["tables", "nl2br"])

        html_body = self._restore_blocks(html_body, math_blocks, "MATHBLOCK")
        html_body = self._restore_code_blocks(html_body, code_blocks)
        return html_body

    def _preprocess_markdown(self, text: str) -> str:
        """预处理Markdown，自动修复常见格式问题"""
        lines = text.split("\n")
        result = []
        in_code_block = False

        for line in lines:
            stripped = line.strip()

            if stripped.startswith("```") or stripped.startswith("~~~"):
                in_code_block = not in_code_block
                result.append(line)
                continue

            if in_code_block:
                result.append(line)
                continue

            # 修复标题格式 #标题 -> # 标题
            heading_match = MD_HEADING_NO_SPACE.match(stripped)
            if heading_match:
                line = heading_match.group(1) + " " + stripped[len(heading_match.group(1)):]
                stripped = line

            # 在标题或列表块前添加空行
            is_heading = bool(MD_HEADING.match(stripped))
            is_list_item = bool(MD_LIST_ITEM.match(stripped))

            if (is_heading or is_list_item) and result:
                prev_line = result[-1].strip()
                prev_is_list = bool(MD_LIST_ITEM.match(prev_line))
                if prev_line and (is_heading or not prev_is_list):
                    result.append("")

            result.append(line)

        return "\n".join(result)

    def _extract_blocks(self, text: str, patterns, tag: str) -> tuple[str, list[str]]:
        """用占位符替换匹配的块"""
        blocks = []

        def substitute(match):
            placeholder = f"{tag}{len(blocks)}{tag}"
            blocks.append(match.group(0))
            return placeholder

        for pattern in patterns:
            text = pattern.sub(substitute, text)
        return text, blocks

    def _restore_blocks(self, html: str, blocks: list[str], tag: str) -> str:
        for i, block in enumerate(blocks):
            html = html.replace(f"{tag}{i}{tag}", block)
        return html

    def _restore_code_blocks(self, html: str, blocks: list[str]) -> str:
        """还原代码块"""
        for i, block in enumerate(blocks):
            content = block.strip("`")
            if "\n" in content:
                language, _, code_content = content.partition("\n")
                language = language.strip()
            else:
                language = ""
                code_content = content

            lang_class = f' class="language-{language}"' if language else ""
            code_html = f"<pre><code{lang_class}>{code_content}</code></pre>"
            html = html.replace(f"CODEBLOCK{i}CODEBLOCK", code_html)
        return html

    def _apply_template(self, html_body: str, bg_color: str) -> str:
        """应用HTML模板"""
        full_html = self._template.replace("{{CONTENT}}", html_body)
        return full_html.replace("--bg-color: #FFFFFF;", f"--bg-color: {bg_color};")
