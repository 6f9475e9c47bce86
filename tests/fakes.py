"""
Fakes for the MathJaxLoader tests.
"""
import asyncio


class FakeRenderer:
    """In-memory stand-in for the MathJax external renderer."""

    def __init__(self, initialized=True, equations=1):
        self.initialized = initialized
        self.equations = equations
        self.calls = []

    async def configure(self, locale, mathjax_config):
        self.calls.append(("configure", locale))

    async def set_locale(self, locale):
        self.calls.append(("set_locale", locale))

    async def mark_configured(self):
        self.calls.append(("mark_configured",))

    async def is_initialized(self):
        return self.initialized

    async def typeset(self, container_selector, equation_selector):
        self.calls.append(("typeset", container_selector, equation_selector))
        return self.equations

    def names(self):
        return [call[0] for call in self.calls]


class RecordingSleep:
    """Records requested delays instead of sleeping.

    If ``on_sleep`` is given it is called with the number of delays so far,
    which lets a test flip readiness after a given number of retries.
    """

    def __init__(self, on_sleep=None):
        self.delays = []
        self._on_sleep = on_sleep

    async def __call__(self, seconds):
        self.delays.append(seconds)
        if self._on_sleep is not None:
            self._on_sleep(len(self.delays))
        # yield control so concurrent waits interleave
        await asyncio.sleep(0)


class FakeEvent:
    """Minimal AstrMessageEvent replacement for command handler tests."""

    def __init__(self, message):
        self._message = message

    def get_message_str(self):
        return self._message

    def plain_result(self, text):
        return text


class FakeMathJaxPage:
    """Playwright Page stand-in that answers the MathJax page scripts.

    ``on_load`` is awaited when the MathJax library script is added, which
    lets a test act while a render is in flight.
    """

    def __init__(
        self,
        mathjax_loaded=True,
        equations=1,
        set_content_error=None,
        set_content_delay=0,
        on_load=None,
    ):
        self.mathjax_loaded = mathjax_loaded
        self.equations = equations
        self.set_content_error = set_content_error
        self.set_content_delay = set_content_delay
        self._on_load = on_load
        self.html = ""
        self.script_tags = []
        self.evaluated = []
        self.closed = False

    async def set_content(self, html, wait_until=None):
        if self.set_content_delay:
            await asyncio.sleep(self.set_content_delay)
        if self.set_content_error is not None:
            raise self.set_content_error
        self.html = html

    async def add_script_tag(self, **kwargs):
        self.script_tags.append(kwargs)
        if "url" in kwargs and self._on_load is not None:
            await self._on_load()

    async def evaluate(self, expression, arg=None):
        self.evaluated.append((expression, arg))
        if "typeof window.MathJax" in expression:
            return self.mathjax_loaded
        if "querySelectorAll" in expression:
            return self.equations
        return None

    async def content(self):
        return self.html

    async def close(self):
        self.closed = True


class FakeBrowserManager:
    """Hands out a single prepared page."""

    def __init__(self, page, error=None):
        self.page = page
        self.error = error
        self.closed = False

    async def new_page(self):
        if self.error is not None:
            raise self.error
        return self.page

    async def close(self):
        self.closed = True
