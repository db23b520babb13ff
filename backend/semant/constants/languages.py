"""Language identifiers understood by the Bitext sentiment service."""

from __future__ import annotations


class UnsupportedLanguageError(ValueError):
    pass


# Bitext expects ISO 639-2/B style three-letter upper-case codes.
BITEXT_LANGUAGES: dict[str, str] = {
    "en": "ENG",
    "es": "SPA",
    "pt": "POR",
    "fr": "FRA",
    "it": "ITA",
    "de": "DEU",
    "nl": "NLD",
    "ca": "CAT",
}

_LANGUAGE_ALIASES: dict[str, str] = {
    "english": "en",
    "spanish": "es",
    "portuguese": "pt",
    "french": "fr",
    "italian": "it",
    "german": "de",
    "dutch": "nl",
    "catalan": "ca",
}


def normalize_language(language: str) -> str:
    """Reduce ``en-US``, ``en_GB``, ``English`` and friends to a two-letter code."""
    value = (language or "").strip().lower().replace("_", "-")
    if not value:
        raise UnsupportedLanguageError("LANGUAGE_REQUIRED")
    if value in _LANGUAGE_ALIASES:
        return _LANGUAGE_ALIASES[value]
    return value.split("-", 1)[0]


def to_bitext_language(language: str) -> str:
    code = normalize_language(language)
    # Already a Bitext code, e.g. "ENG".
    if code.upper() in BITEXT_LANGUAGES.values():
        return code.upper()
    try:
        return BITEXT_LANGUAGES[code]
    except KeyError:
        raise UnsupportedLanguageError(f"UNSUPPORTED_LANGUAGE:{language}") from None
