"""Bilingual text fields — plain strings or Hindi/English pairs.

Catalog fields arrive in one of two shapes:
  - a plain string, shown as-is in every language
  - an object with optional "hi" and "en" strings

Both are parsed into a small tagged variant so display code never has to
inspect raw JSON.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Language(StrEnum):
    """Display languages offered by the language toggle."""

    hi = "hi"
    en = "en"


@dataclass(frozen=True)
class PlainText:
    """A field given as a single string."""

    value: str


@dataclass(frozen=True)
class BilingualText:
    """A field given per language. Either side may be missing."""

    hi: str | None = None
    en: str | None = None

    def get(self, language: Language) -> str | None:
        return self.hi if language == Language.hi else self.en


LocalizedText = PlainText | BilingualText

EMPTY_TEXT = PlainText("")


def parse_text(raw: object) -> LocalizedText:
    """Convert a JSON value into a LocalizedText.

    Raises:
        ValueError: If the value is neither a string nor a hi/en object.
    """
    if isinstance(raw, str):
        return PlainText(raw)

    if isinstance(raw, dict):
        values: dict[str, str | None] = {}
        for lang in Language:
            value = raw.get(lang.value)
            if value is not None and not isinstance(value, str):
                raise ValueError(
                    f"Bilingual value for '{lang.value}' must be a string, "
                    f"got {type(value).__name__}"
                )
            values[lang.value] = value
        return BilingualText(**values)

    raise ValueError(f"Expected a string or a hi/en object, got {type(raw).__name__}")


def resolve(field: LocalizedText | str, language: Language | str) -> str:
    """Resolve a text field to one display string.

    Plain strings pass through unchanged. Bilingual fields try the requested
    language, then English, then Hindi, and finally fall back to "".
    """
    if isinstance(field, str):
        return field
    if isinstance(field, PlainText):
        return field.value

    lang = Language(language)
    for candidate in (lang, Language.en, Language.hi):
        value = field.get(candidate)
        if value:
            return value
    return ""
