"""Unit tests for the language registry."""

from __future__ import annotations

import pytest
from readabilitycore.languages import (
    SUPPORTED_LANGUAGES,
    get_language_name,
    get_target_score,
    is_supported_language,
    normalize_language,
)


class TestSupportedLanguages:
    def test_registry_contents(self):
        assert dict(SUPPORTED_LANGUAGES) == {
            "eng": "english",
            "deu": "german",
            "spa": "spanish",
            "ita": "italian",
            "fra": "french",
            "nld": "dutch",
        }

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            SUPPORTED_LANGUAGES["por"] = "portuguese"  # type: ignore[index]

    def test_codes_and_names_are_one_to_one(self):
        assert len(set(SUPPORTED_LANGUAGES.values())) == len(SUPPORTED_LANGUAGES)


class TestIsSupportedLanguage:
    @pytest.mark.parametrize("value", ["eng", "deu", "spa", "ita", "fra", "nld"])
    def test_codes(self, value):
        assert is_supported_language(value) is True

    @pytest.mark.parametrize("value", ["english", "german", "spanish", "italian", "french", "dutch"])
    def test_names(self, value):
        assert is_supported_language(value) is True

    @pytest.mark.parametrize("value", ["ENGLISH", "German", "ENG", "DEU", "  dutch  "])
    def test_case_and_whitespace_variations(self, value):
        assert is_supported_language(value) is True

    @pytest.mark.parametrize("value", ["chinese", "japanese", "xyz", "", "   ", None])
    def test_unsupported(self, value):
        assert is_supported_language(value) is False


class TestGetLanguageName:
    def test_known_codes(self):
        assert get_language_name("eng") == "english"
        assert get_language_name("deu") == "german"
        assert get_language_name("spa") == "spanish"
        assert get_language_name("ita") == "italian"
        assert get_language_name("fra") == "french"
        assert get_language_name("nld") == "dutch"

    def test_case_insensitive(self):
        assert get_language_name("NLD") == "dutch"

    @pytest.mark.parametrize("value", ["xyz", "", None, "english"])
    def test_unknown(self, value):
        assert get_language_name(value) == "unknown"


class TestTargetScore:
    @pytest.mark.parametrize("language", [None, "english", "german", "xyz"])
    def test_constant_for_every_language(self, language):
        assert get_target_score(language) == 30

    def test_no_argument(self):
        assert get_target_score() == 30


class TestNormalizeLanguage:
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_defaults_to_english(self, value):
        assert normalize_language(value) == "english"

    def test_codes_resolve_to_names(self):
        assert normalize_language("DEU") == "german"
        assert normalize_language("fra") == "french"

    def test_names_lowercased(self):
        assert normalize_language("  Italian ") == "italian"

    def test_unknown_passes_through(self):
        assert normalize_language("XYZ") == "xyz"
