"""Lookup request and validation of its text."""

from dataclasses import dataclass, replace
from typing import Self

from ydictionary.errors import ValidationError
from ydictionary.flags import Flags, format_flags

ENGLISH_TO_RUSSIAN: str = "en-ru"
RUSSIAN_TO_ENGLISH: str = "ru-en"


def validate_word(text: str) -> str:
    """Check that the text is a word and return it without surrounding spaces.

    A word may contain only letters of any script and hyphens, e.g.
    `fixed-price` or `привет`.

    :param text: raw user input
    :return: trimmed text
    :raises ValidationError: if the text is empty or contains anything else
    """
    text = text.strip()

    if not text:
        raise ValidationError("Text is empty.")

    if not all(character.isalpha() or character == "-" for character in text):
        raise ValidationError("Text contains non-alphabetic characters.")

    return text


def validate_language_pair(lang: str) -> str:
    """Check that the translation direction looks like `en-ru`."""

    lang = lang.strip()
    source, separator, target = lang.partition("-")
    if not separator or not source or not target:
        raise ValidationError(
            f"Translation direction `{lang}` should be `<from>-<to>`."
        )
    return lang


@dataclass(frozen=True)
class LookupRequest:
    """Searches for a word or phrase in the dictionary.

    The service returns an automatically generated dictionary entry.
    """

    lang: str
    """Translation direction, e.g. `en-ru` to translate from English to
    Russian."""

    text: str
    """The word or phrase to find in the dictionary."""

    ui: str | None = None
    """The language of the user's interface for displaying names of parts of
    speech in the dictionary entry."""

    flags: Flags | None = None
    """Search options."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "lang", validate_language_pair(self.lang))
        object.__setattr__(self, "text", validate_word(self.text))

    @classmethod
    def en_ru(cls, text: str) -> Self:
        """Request an English to Russian translation."""
        return cls(ENGLISH_TO_RUSSIAN, text)

    @classmethod
    def ru_en(cls, text: str) -> Self:
        """Request a Russian to English translation."""
        return cls(RUSSIAN_TO_ENGLISH, text)

    @property
    def source_language(self) -> str:
        """Code of the language of the text."""
        return self.lang.split("-", 1)[0]

    def with_text(self, text: str) -> Self:
        """Get the same request for another text."""
        return replace(self, text=text)

    def to_form(self) -> dict[str, str]:
        """Get request parameters as they are sent to the service."""

        form: dict[str, str] = {"lang": self.lang, "text": self.text}

        if self.ui is not None:
            form["ui"] = self.ui
        if self.flags is not None:
            form["flags"] = format_flags(self.flags)

        return form
