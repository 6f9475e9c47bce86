"""
公式分隔符扫描器
在文本中查找数学公式环境，并用 nolink span 包裹，避免后续过滤器改写公式

识别的环境：
- 行间公式 \\[ \\] 与 $$ $$
- 行内公式 \\( \\)

公式嵌套时只包裹最外层；行间公式打开期间，其中的一切（包括行内分隔符）
都视为公式内容。

行间公式未打开时，已有的 <span class="nolink">…</span> 整体跳过，因此重复扫描
不会再包裹任何内容。代价是：上游过滤器已用 nolink 包裹的公式不会被识别，
整段文本原样返回，也就不会打上排版标记。
"""

from dataclasses import dataclass
from typing import Optional

from ...types import DisplayKind, MathRegion, RegionKind, ScanResult
from ...utils.regex_patterns import NOLINK_CLOSE, NOLINK_OPEN, SPAN_TAG


@dataclass
class _Segment:
    """输出片段，start/end 为原文偏移（end 不包含）"""

    start: int
    end: int
    text: str


class _SegmentBuilder:
    """按顺序累积原文片段和包裹片段，最后一次性拼接"""

    def __init__(self, source: str):
        self._source = source
        self._segments: list[_Segment] = []
        self._cursor = 0

    def copy_until(self, end: int) -> None:
        """原样复制 cursor 到 end（不包含）之间的文本"""
        if end > self._cursor:
            self._segments.append(
                _Segment(self._cursor, end, self._source[self._cursor:end])
            )
            self._cursor = end

    def wrap(self, start: int, end: int) -> None:
        """用 nolink span 包裹原文 [start, end]"""
        if start >= self._cursor:
            self.copy_until(start)
            inner = ""
        else:
            # 起点落在已输出的内容里：把其后的片段收回到新 span 中
            inner = self._fold_back(start)

        inner += self._source[self._cursor:end + 1]
        self._segments.append(_Segment(start, end + 1, NOLINK_OPEN + inner + NOLINK_CLOSE))
        self._cursor = end + 1

    def _fold_back(self, start: int) -> str:
        folded = []
        while self._segments and self._segments[-1].start >= start:
            folded.append(self._segments.pop().text)
        folded.reverse()

        if self._segments and self._segments[-1].end > start:
            # 只有原文片段可能跨过 start
            head = self._segments.pop()
            if start > head.start:
                self._segments.append(
                    _Segment(head.start, start, self._source[head.start:start])
                )
            folded.insert(0, self._source[start:head.end])

        return "".join(folded)

    def build(self) -> str:
        self.copy_until(len(self._source))
        return "".join(segment.text for segment in self._segments)


class MathDelimiterScanner:
    """公式分隔符扫描器 - 单遍扫描，两字符回看"""

    def scan(self, text: str) -> ScanResult:
        """包裹文本中的公式区域

        Returns:
            ScanResult(text, changed)，未闭合的分隔符保持原样
        """
        regions = self.find_regions(text)
        if not regions:
            return ScanResult(text=text, changed=False)

        builder = _SegmentBuilder(text)
        # 按闭合顺序包裹，外层行内公式在其内部行间公式之后闭合
        for region in regions:
            builder.wrap(region.start, region.end)

        return ScanResult(text=builder.build(), changed=True)

    def find_regions(self, text: str) -> list[MathRegion]:
        """找出所有已闭合的公式区域，按闭合顺序返回"""
        regions: list[MathRegion] = []
        display_start: Optional[int] = None
        display_kind: Optional[DisplayKind] = None
        inline_start: Optional[int] = None

        length = len(text)
        i = 1
        while i < length:
            prev, current = text[i - 1], text[i]

            if display_start is None:
                if text.startswith(NOLINK_OPEN, i - 1):
                    # 已包裹的内容不再扫描；其前未闭合的行内起点作废
                    wrapped_end = self._find_wrapped_end(text, i - 1)
                    if wrapped_end is not None:
                        inline_start = None
                        i = wrapped_end + 1
                        continue

                if prev == "\\":
                    if current == "[":
                        display_start = i - 1
                        display_kind = DisplayKind.BRACKET
                    elif current == "(":
                        inline_start = i - 1
                    elif current == ")" and inline_start is not None:
                        regions.append(MathRegion(inline_start, i, RegionKind.INLINE))
                        inline_start = None
                        # 从闭合符之后继续，闭合符不参与下一次回看
                        i += 2
                        continue
                elif prev == "$" and current == "$":
                    display_start = i - 1
                    display_kind = DisplayKind.DOLLAR

            elif (
                prev == "\\" and current == "]" and display_kind is DisplayKind.BRACKET
            ) or (
                prev == "$" and current == "$" and display_kind is DisplayKind.DOLLAR
            ):
                regions.append(MathRegion(display_start, i, RegionKind.DISPLAY))
                display_start = None
                display_kind = None
                i += 2
                continue

            i += 1

        return regions

    def _find_wrapped_end(self, text: str, pos: int) -> Optional[int]:
        """返回 pos 处 nolink span 闭合标签之后的位置，未闭合返回 None"""
        depth = 0
        for match in SPAN_TAG.finditer(text, pos):
            if match.group(0) == NOLINK_CLOSE:
                depth -= 1
                if depth == 0:
                    return match.end()
            else:
                depth += 1
        return None
