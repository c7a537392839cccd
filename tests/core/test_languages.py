# tests/core/test_languages.py
import pytest

from corenlp_bridge.core.domain.languages import LanguageRegistry, LANGUAGE_CODES
from corenlp_bridge.core.domain.models import LanguageCode
from corenlp_bridge.core.domain.exceptions import UnresolvedLanguageError, DomainError


class TestLanguageRegistry:

    @pytest.mark.parametrize("token", ["english", "eng", "en"])
    def test_english_aliases_resolve_identically(self, token):
        assert LanguageRegistry().resolve(token) == LanguageCode.ENGLISH

    def test_every_alias_resolves_to_its_language(self):
        registry = LanguageRegistry()
        for language, tokens in LANGUAGE_CODES.items():
            assert {registry.resolve(t) for t in tokens} == {language}

    def test_lookup_ignores_case_and_whitespace(self):
        registry = LanguageRegistry()
        assert registry.resolve(" French ") == LanguageCode.FRENCH
        assert registry.resolve("DE") == LanguageCode.GERMAN

    def test_canonical_value_passes_through(self):
        assert LanguageRegistry().resolve(LanguageCode.ARABIC) == LanguageCode.ARABIC

    def test_unknown_token_raises(self):
        with pytest.raises(UnresolvedLanguageError) as excinfo:
            LanguageRegistry().resolve("klingon")

        assert excinfo.value.token == "klingon"
        assert isinstance(excinfo.value, DomainError)
        assert "klingon" in str(excinfo.value)

    def test_overlapping_code_sets_are_rejected(self):
        with pytest.raises(ValueError):
            LanguageRegistry({
                LanguageCode.ENGLISH: ("en", "eng"),
                LanguageCode.GERMAN: ("de", "en"),
            })

    def test_supported_and_aliases(self):
        registry = LanguageRegistry()
        assert LanguageCode.CHINESE in registry.supported()
        assert "zh" in registry.aliases(LanguageCode.CHINESE)

    @pytest.mark.parametrize("token", ["ch", "zh", "chi", "zho", "chinese"])
    def test_chinese_accepts_legacy_ch(self, token):
        assert LanguageRegistry().resolve(token) == LanguageCode.CHINESE
