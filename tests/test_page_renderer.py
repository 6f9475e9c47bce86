"""
Unit tests for infrastructure/browser/page_renderer.py - PlaywrightMathJaxRenderer
"""
import pytest

from astrbot_plugin_mathjaxloader.infrastructure.browser import PlaywrightMathJaxRenderer


class FakePage:
    """Records the calls a Playwright Page would receive."""

    def __init__(self, results=None):
        self.results = list(results or [])
        self.evaluated = []
        self.script_tags = []

    async def evaluate(self, expression, arg=None):
        self.evaluated.append((expression, arg))
        return self.results.pop(0) if self.results else None

    async def add_script_tag(self, **kwargs):
        self.script_tags.append(kwargs)


class TestPlaywrightMathJaxRenderer:
    """Test the page-side MathJax calls."""

    @pytest.mark.asyncio
    async def test_configure_injects_config_script(self):
        page = FakePage()
        renderer = PlaywrightMathJaxRenderer(page, "https://example.org/MathJax.js")

        await renderer.configure("fr", "MathJax.Hub.Config({});")

        assert page.script_tags == [
            {"content": "MathJax.Hub.Config({});", "type": "text/x-mathjax-config"}
        ]

    @pytest.mark.asyncio
    async def test_load_adds_library_script(self):
        page = FakePage()
        await PlaywrightMathJaxRenderer(page, "https://example.org/MathJax.js").load()
        assert page.script_tags == [{"url": "https://example.org/MathJax.js"}]

    @pytest.mark.asyncio
    async def test_is_initialized(self):
        page = FakePage(results=[False, True])
        renderer = PlaywrightMathJaxRenderer(page, "")

        assert await renderer.is_initialized() is False
        assert await renderer.is_initialized() is True
        assert "window.MathJax" in page.evaluated[0][0]

    @pytest.mark.asyncio
    async def test_set_locale_passes_language(self):
        page = FakePage()
        await PlaywrightMathJaxRenderer(page, "").set_locale("zh-hans")

        expression, arg = page.evaluated[0]
        assert "MathJax.Localization.setLocale" in expression
        assert arg == "zh-hans"

    @pytest.mark.asyncio
    async def test_typeset_returns_node_count(self):
        page = FakePage(results=[4])
        renderer = PlaywrightMathJaxRenderer(page, "")

        count = await renderer.typeset("body", ".filter_mathjaxloader_equation")

        assert count == 4
        expression, arg = page.evaluated[0]
        assert "processSectionDelay" in expression
        assert arg == ["body", ".filter_mathjaxloader_equation"]

    @pytest.mark.asyncio
    async def test_mark_configured(self):
        page = FakePage()
        await PlaywrightMathJaxRenderer(page, "").mark_configured()
        assert "MathJax.Hub.Configured()" in page.evaluated[0][0]
