"""
Unit tests for infrastructure/locale - LanguageCodeMapper and ConfigLocaleProvider
"""
import pytest

from astrbot_plugin_mathjaxloader.infrastructure.locale import (
    EXPLICIT_MAPPING,
    MATHJAX_LANG_CODES,
    ConfigLocaleProvider,
    LanguageCodeMapper,
)


class TestLanguageCodeMapper:
    """Test language resolution precedence."""

    def test_explicit_mapping(self):
        mapper = LanguageCodeMapper()
        assert mapper.resolve("zh-tw") == "zh-hant"
        assert mapper.resolve("zh-cn") == "zh-hans"

    def test_exact_match(self):
        mapper = LanguageCodeMapper()
        assert mapper.resolve("fr") == "fr"
        assert mapper.resolve("pt-br") == "pt-br"

    def test_base_subtag_fallback(self):
        mapper = LanguageCodeMapper()
        assert "fr-ca" not in MATHJAX_LANG_CODES
        assert mapper.resolve("fr-ca") == "fr"
        assert mapper.resolve("es-mx") == "es"

    def test_unknown_uses_default(self):
        mapper = LanguageCodeMapper(default_language="de")
        assert mapper.resolve("xx-yy") == "de"
        assert mapper.resolve("xx") == "de"

    def test_default_from_callable(self):
        defaults = iter(["en", "it"])
        mapper = LanguageCodeMapper(default_language=lambda: next(defaults))
        assert mapper.resolve("xx") == "en"
        assert mapper.resolve("xx") == "it"

    def test_explicit_mapping_wins_over_base_subtag(self):
        # "zh" alone is not supported, so only the explicit table helps
        mapper = LanguageCodeMapper(default_language="en")
        assert "zh" not in MATHJAX_LANG_CODES
        assert mapper.resolve("zh-tw") == "zh-hant"
        assert mapper.resolve("zh-hk") == "en"

    def test_empty_code_uses_default(self):
        assert LanguageCodeMapper(default_language="en").resolve("") == "en"

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            EXPLICIT_MAPPING["xx"] = "yy"
        with pytest.raises(AttributeError):
            MATHJAX_LANG_CODES.add("xx")


class TestConfigLocaleProvider:
    """Test the config-backed locale provider."""

    def test_reads_config(self):
        provider = ConfigLocaleProvider({"language": "zh-cn", "default_language": "fr"})
        assert provider.get_current_language() == "zh-cn"
        assert provider.get_default_language() == "fr"

    def test_defaults_without_config(self):
        provider = ConfigLocaleProvider()
        assert provider.get_current_language() == "en"
        assert provider.get_default_language() == "en"

    def test_set_current_language_reports_change(self):
        provider = ConfigLocaleProvider()
        assert provider.set_current_language("ja") is True
        assert provider.set_current_language("ja") is False
        assert provider.get_current_language() == "ja"

    def test_mapper_follows_provider_default(self):
        provider = ConfigLocaleProvider({"default_language": "ru"})
        mapper = LanguageCodeMapper(provider.get_default_language)
        assert mapper.resolve("xx-yy") == "ru"
