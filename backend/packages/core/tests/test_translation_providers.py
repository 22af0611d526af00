"""Tests for translation providers."""

from unittest.mock import MagicMock, patch

import pytest

from voyage_core.services.translation_providers import (
    DeepLProvider,
    FallbackProvider,
    GoogleFreeProvider,
    OpenAIProvider,
    TranslationProvider,
    create_translation_provider,
    parse_numbered_lines,
    split_long_text,
)


class _FailingProvider(TranslationProvider):
    name = "failing"

    def translate(self, text: str, source: str, target: str) -> str:
        raise RuntimeError("provider down")

    def translate_batch(self, texts: list[str], source: str, target: str) -> list[str]:
        raise RuntimeError("provider down")


class _UpperProvider(TranslationProvider):
    name = "upper"

    def translate(self, text: str, source: str, target: str) -> str:
        return text.upper()


def test_create_provider_defaults_to_google() -> None:
    assert isinstance(create_translation_provider(None), GoogleFreeProvider)
    assert isinstance(create_translation_provider({}), GoogleFreeProvider)


def test_create_provider_returns_deepl_with_key() -> None:
    provider = create_translation_provider(
        {"translation_provider": "deepl", "translation_api_key": "key-123"}
    )

    assert isinstance(provider, DeepLProvider)
    assert provider.api_key == "key-123"


def test_create_provider_wraps_fallback_when_enabled() -> None:
    provider = create_translation_provider(
        {
            "translation_provider": "openai",
            "translation_api_key": "sk-test",
            "translation_model": "gpt-4o",
            "translation_fallback": True,
        }
    )

    assert isinstance(provider, FallbackProvider)
    assert isinstance(provider.primary, OpenAIProvider)
    assert provider.primary.model == "gpt-4o"
    assert isinstance(provider.fallback, GoogleFreeProvider)


def test_create_provider_without_key_falls_back_to_google() -> None:
    provider = create_translation_provider(
        {"translation_provider": "openai", "translation_api_key": ""}
    )

    assert isinstance(provider, GoogleFreeProvider)


def test_create_provider_uses_default_model_when_blank() -> None:
    provider = create_translation_provider(
        {"translation_provider": "openai", "translation_api_key": "sk-test", "translation_model": ""}
    )

    assert isinstance(provider, OpenAIProvider)
    assert provider.model == "gpt-4o-mini"


def test_fallback_provider_uses_fallback_on_failure() -> None:
    provider = FallbackProvider(primary=_FailingProvider(), fallback=_UpperProvider())

    assert provider.name == "failing+upper"
    assert provider.translate("halo", "id", "en") == "HALO"
    assert provider.translate_batch(["a", "b"], "id", "en") == ["A", "B"]


def test_default_batch_translates_one_by_one() -> None:
    assert _UpperProvider().translate_batch(["pantai", "gunung"], "id", "en") == [
        "PANTAI",
        "GUNUNG",
    ]


class TestGoogleFreeProvider:
    """Test GoogleFreeProvider batching."""

    def test_batch_splits_combined_result(self) -> None:
        translator = MagicMock()
        translator.translate.return_value = "Beach ||| Mountain"

        with patch("deep_translator.GoogleTranslator", return_value=translator) as cls:
            results = GoogleFreeProvider().translate_batch(["Pantai", "Gunung"], "id", "zh")

        assert results == ["Beach", "Mountain"]
        cls.assert_called_once_with(source="id", target="zh-CN")
        translator.translate.assert_called_once_with("Pantai ||| Gunung")

    def test_batch_retries_per_text_when_separator_lost(self) -> None:
        translator = MagicMock()
        translator.translate.side_effect = ["Beach Mountain", "Beach", "Mountain"]

        with patch("deep_translator.GoogleTranslator", return_value=translator):
            results = GoogleFreeProvider().translate_batch(["Pantai", "Gunung"], "id", "en")

        assert results == ["Beach", "Mountain"]
        assert translator.translate.call_count == 3

    def test_empty_batch(self) -> None:
        assert GoogleFreeProvider().translate_batch([], "id", "en") == []

    def test_blank_text_is_returned_unchanged(self) -> None:
        assert GoogleFreeProvider().translate("   ", "id", "en") == "   "

    def test_long_text_is_translated_in_full(self) -> None:
        translator = MagicMock()
        translator.translate.side_effect = lambda text: text
        long_text = "kata " * 1500

        with patch("deep_translator.GoogleTranslator", return_value=translator):
            results = GoogleFreeProvider().translate_batch(["Judul", long_text], "id", "en")

        assert results[0] == "Judul"
        assert results[1] == long_text
        sent = [call.args[0] for call in translator.translate.call_args_list]
        assert all(len(text) <= 4500 for text in sent)

    def test_long_text_keeps_paragraph_breaks(self) -> None:
        translator = MagicMock()
        translator.translate.side_effect = lambda text: text.upper()
        paragraph = "Pantai di Bali sangat indah. " * 100
        long_text = paragraph.rstrip() + "\n\n" + paragraph.rstrip()

        with patch("deep_translator.GoogleTranslator", return_value=translator):
            result = GoogleFreeProvider().translate(long_text, "id", "de")

        assert result == long_text.upper()
        assert translator.translate.call_count > 1


class TestSplitLongText:
    """Test split_long_text."""

    def test_short_text_is_one_chunk(self) -> None:
        assert split_long_text("Halo dunia.", 100) == ["Halo dunia."]

    def test_breaks_at_sentences(self) -> None:
        text = "Satu dua. Tiga empat. Lima enam."

        chunks = split_long_text(text, 20)

        assert chunks == ["Satu dua. ", "Tiga empat. ", "Lima enam."]

    def test_chunks_rejoin_to_original(self) -> None:
        text = ("kalimat panjang tanpa titik " * 40) + "x" * 120 + "\nAkhir."

        chunks = split_long_text(text, 50)

        assert "".join(chunks) == text
        assert all(len(chunk) <= 50 for chunk in chunks)


class TestDeepLProvider:
    """Test DeepL language code mapping."""

    @pytest.mark.parametrize(
        ("lang", "expected"),
        [("zh", "ZH-HANS"), ("en", "EN-US"), ("de", "DE"), ("nl", "NL")],
    )
    def test_target_codes(self, lang: str, expected: str) -> None:
        assert DeepLProvider("key")._map_lang(lang) == expected

    def test_source_code_has_no_region(self) -> None:
        assert DeepLProvider("key")._map_lang("id", is_source=True) == "ID"


class TestParseNumberedLines:
    """Test parse_numbered_lines."""

    def test_parses_in_index_order(self) -> None:
        raw = "[2] Mountain\n[1] Beach\n"
        assert parse_numbered_lines(raw, 2) == ["Beach", "Mountain"]

    def test_ignores_noise_and_keeps_gaps(self) -> None:
        raw = "Here you go:\n[1] Beach\n[x] nope\n[9] out of range"
        assert parse_numbered_lines(raw, 3) == ["Beach", "", ""]
