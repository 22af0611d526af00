"""
Translation provider abstraction.

Supports Google Translate (free), DeepL, and OpenAI as configurable
translation backends. The provider and its API key come from system
settings or environment; no key falls back to Google free.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from voyage_core import get_logger

logger = get_logger(__name__)

# Google Translate has a ~5000 character limit per request
_CHUNK_SIZE = 4500
_SEPARATOR = " ||| "

_SENTENCE_BREAK_RE = re.compile(r"((?<=[.!?])\s+|\n+)")
_WORD_BREAK_RE = re.compile(r"(\s+)")


def _pieces(text: str, pattern: re.Pattern[str]) -> list[str]:
    """Split ``text`` keeping each separator attached to the piece before it."""
    parts = pattern.split(text)
    return [
        parts[i] + (parts[i + 1] if i + 1 < len(parts) else "")
        for i in range(0, len(parts), 2)
        if parts[i] or (i + 1 < len(parts) and parts[i + 1])
    ]


def split_long_text(text: str, limit: int = _CHUNK_SIZE) -> list[str]:
    """
    Split text into chunks of at most ``limit`` characters.

    Chunks break at sentence boundaries, then at whitespace, and only cut
    inside a word longer than ``limit``. Joining the chunks gives back
    ``text`` unchanged.
    """
    if len(text) <= limit:
        return [text]

    pieces: list[str] = []
    for sentence in _pieces(text, _SENTENCE_BREAK_RE):
        if len(sentence) <= limit:
            pieces.append(sentence)
            continue
        for word in _pieces(sentence, _WORD_BREAK_RE):
            pieces.extend(word[i : i + limit] for i in range(0, len(word), limit))

    chunks: list[str] = []
    current = ""
    for piece in pieces:
        if current and len(current) + len(piece) > limit:
            chunks.append(current)
            current = piece
        else:
            current += piece
    if current:
        chunks.append(current)
    return chunks


def translate_in_chunks(
    text: str, translate: Callable[[str], str], limit: int = _CHUNK_SIZE
) -> str:
    """
    Translate text of any length through a per-request-limited ``translate``.

    Each chunk's trailing whitespace (paragraph breaks) is carried over to
    the translated result.
    """
    if len(text) <= limit:
        result: str = translate(text)
        return result

    translated: list[str] = []
    for chunk in split_long_text(text, limit):
        body = chunk.rstrip()
        if not body:
            translated.append(chunk)
            continue
        translated.append(translate(body).rstrip() + chunk[len(body) :])
    return "".join(translated)


class TranslationProvider(ABC):
    """Base class for translation providers."""

    name: str = "base"

    @abstractmethod
    def translate(self, text: str, source: str, target: str) -> str:
        """Translate a single text string."""

    def translate_batch(self, texts: list[str], source: str, target: str) -> list[str]:
        """Translate a list of texts. Default: translate one by one."""
        return [self.translate(t, source, target) for t in texts]


class FallbackProvider(TranslationProvider):
    """Provider wrapper that falls back to another provider on failures."""

    def __init__(self, primary: TranslationProvider, fallback: TranslationProvider) -> None:
        self.primary = primary
        self.fallback = fallback
        self.name = f"{primary.name}+{fallback.name}"

    def translate(self, text: str, source: str, target: str) -> str:
        try:
            return self.primary.translate(text, source, target)
        except Exception:
            logger.exception("Primary translation provider failed; using fallback")
            return self.fallback.translate(text, source, target)

    def translate_batch(self, texts: list[str], source: str, target: str) -> list[str]:
        try:
            return self.primary.translate_batch(texts, source, target)
        except Exception:
            logger.exception("Primary batch translation failed; using fallback")
            return self.fallback.translate_batch(texts, source, target)


class GoogleFreeProvider(TranslationProvider):
    """Free Google Translate via deep-translator."""

    name = "google"

    # Google needs a script variant for Chinese
    _LANG_MAP: dict[str, str] = {"zh": "zh-CN"}

    def _map_lang(self, lang: str) -> str:
        return self._LANG_MAP.get(lang, lang)

    def translate(self, text: str, source: str, target: str) -> str:
        from deep_translator import GoogleTranslator

        if not text or not text.strip():
            return text
        translator = GoogleTranslator(source=self._map_lang(source), target=self._map_lang(target))
        return translate_in_chunks(text, translator.translate)

    def translate_batch(self, texts: list[str], source: str, target: str) -> list[str]:
        """Batch translate using ||| separator for efficiency."""
        from deep_translator import GoogleTranslator

        if not texts:
            return []

        translator = GoogleTranslator(source=self._map_lang(source), target=self._map_lang(target))
        results: list[str] = [""] * len(texts)

        batch_start = 0
        while batch_start < len(texts):
            batch_texts: list[str] = []
            batch_indices: list[int] = []
            current_length = 0

            for i in range(batch_start, len(texts)):
                text = texts[i]
                needed = len(text) + len(_SEPARATOR)
                if current_length + needed > _CHUNK_SIZE and batch_texts:
                    break
                batch_texts.append(text)
                batch_indices.append(i)
                current_length += needed

            if not batch_texts:
                break

            combined = _SEPARATOR.join(batch_texts)

            translated_parts: list[str] = []
            if len(combined) <= _CHUNK_SIZE:
                translated_combined: str = translator.translate(combined)
                translated_parts = translated_combined.split("|||")

            if len(translated_parts) == len(batch_texts):
                for j, idx in enumerate(batch_indices):
                    results[idx] = translated_parts[j].strip()
            else:
                # Separator was mangled or text too long: one request (or chunk set) per text
                for j, idx in enumerate(batch_indices):
                    results[idx] = translate_in_chunks(batch_texts[j], translator.translate)

            batch_start += len(batch_texts)

        return results


class DeepLProvider(TranslationProvider):
    """DeepL translation provider."""

    name = "deepl"

    # DeepL uses different language codes than standard
    _LANG_MAP: dict[str, str] = {
        "zh": "ZH-HANS",
        "en": "EN-US",
        "pt": "PT-BR",
    }

    def __init__(self, api_key: str) -> None:
        self.api_key = api_key

    def _map_lang(self, lang: str, *, is_source: bool = False) -> str:
        if is_source:
            # Source codes never carry a regional variant
            return lang.split("-")[0].upper()
        return self._LANG_MAP.get(lang, lang.upper())

    def translate(self, text: str, source: str, target: str) -> str:
        import deepl

        if not text or not text.strip():
            return text

        translator = deepl.Translator(self.api_key)
        result = translator.translate_text(
            text,
            source_lang=self._map_lang(source, is_source=True),
            target_lang=self._map_lang(target),
        )
        return str(result)

    def translate_batch(self, texts: list[str], source: str, target: str) -> list[str]:
        import deepl

        if not texts:
            return []

        translator = deepl.Translator(self.api_key)
        results = translator.translate_text(
            texts,
            source_lang=self._map_lang(source, is_source=True),
            target_lang=self._map_lang(target),
        )
        if isinstance(results, list):
            return [str(r) for r in results]
        return [str(results)]


class OpenAIProvider(TranslationProvider):
    """OpenAI translation provider."""

    name = "openai"

    def __init__(self, api_key: str, model: str = "gpt-4o-mini") -> None:
        self.api_key = api_key
        self.model = model

    def translate(self, text: str, source: str, target: str) -> str:
        from openai import OpenAI

        if not text or not text.strip():
            return text

        client = OpenAI(api_key=self.api_key)
        response = client.chat.completions.create(
            model=self.model,
            messages=[
                {
                    "role": "system",
                    "content": (
                        f"You are a translator for a travel agency website. Translate the "
                        f"following text from {source} to {target}. Keep place names as "
                        f"they are. Output only the translation, nothing else."
                    ),
                },
                {"role": "user", "content": text},
            ],
            temperature=0.3,
        )
        return response.choices[0].message.content or ""

    def translate_batch(self, texts: list[str], source: str, target: str) -> list[str]:
        from openai import OpenAI

        if not texts:
            return []

        client = OpenAI(api_key=self.api_key)
        numbered = "\n".join(f"[{i + 1}] {t}" for i, t in enumerate(texts))
        response = client.chat.completions.create(
            model=self.model,
            messages=[
                {
                    "role": "system",
                    "content": (
                        f"You are a translator for a travel agency website. Translate each "
                        f"numbered line from {source} to {target}. Keep the [N] numbering "
                        f"format. Output only the translations, one per line."
                    ),
                },
                {"role": "user", "content": numbered},
            ],
            temperature=0.3,
        )
        raw = response.choices[0].message.content or ""
        return parse_numbered_lines(raw, len(texts))


def parse_numbered_lines(raw: str, expected_count: int) -> list[str]:
    """
    Parse ``[N] text`` lines into a list of ``expected_count`` strings.

    Lines without a valid ``[N]`` prefix are ignored; missing numbers stay "".
    """
    results: list[str] = [""] * expected_count
    for line in raw.strip().split("\n"):
        line = line.strip()
        if not line or not line.startswith("["):
            continue
        bracket_end = line.find("]")
        if bracket_end <= 0:
            continue
        try:
            idx = int(line[1:bracket_end]) - 1
        except ValueError:
            continue
        if 0 <= idx < expected_count:
            results[idx] = line[bracket_end + 1 :].strip()
    return results


def create_translation_provider(settings: dict[str, Any] | None) -> TranslationProvider:
    """
    Create a translation provider from settings.

    Settings keys:
        - translation_provider: "google" | "deepl" | "openai"
        - translation_api_key: API key for non-Google providers
        - translation_model: Model name for OpenAI (default: "gpt-4o-mini")
        - translation_fallback: Wrap the provider with a Google fallback

    Falls back to GoogleFreeProvider when provider is google, no key is
    provided for non-google providers, or settings are empty.
    """
    if not settings:
        return GoogleFreeProvider()

    provider = settings.get("translation_provider", "google")
    api_key = settings.get("translation_api_key", "")
    raw_model = settings.get("translation_model")
    model = raw_model if isinstance(raw_model, str) and raw_model else "gpt-4o-mini"
    use_fallback = bool(settings.get("translation_fallback", False))

    primary: TranslationProvider | None = None
    if provider == "deepl" and api_key:
        logger.info("Using DeepL translation provider")
        primary = DeepLProvider(api_key)
    elif provider == "openai" and api_key:
        logger.info("Using OpenAI translation provider", extra={"model": model})
        primary = OpenAIProvider(api_key, model)
    elif provider in ("deepl", "openai"):
        logger.warning(
            "No API key configured; falling back to Google Translate",
            extra={"provider": provider},
        )

    if primary is None:
        return GoogleFreeProvider()
    if use_fallback:
        return FallbackProvider(primary=primary, fallback=GoogleFreeProvider())
    return primary
