"""Dictionary entry returned by the lookup method.

Entry tree:
  - Dictionary entries (`def`): the search word.
      - Translations (`tr`).
          - Synonyms (`syn`): other translations.
          - Meanings (`mean`): meanings in the source language.
          - Examples (`ex`): usage examples.
              - Translations (`tr`) of examples.

All nodes have the same shape, so the tree is built from one `Entry` type.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

ATTRIBUTE_KEYS: tuple[str, ...] = (
    "text",
    "pos",
    "asp",
    "ts",
    "gen",
    "num",
    "fr",
)
"""Keys of the node attributes in the response."""


class Attributes(BaseModel):
    """Attributes used in `def`, `tr`, `syn`, `mean`, and `ex`."""

    model_config = ConfigDict(frozen=True)

    text: str
    """Text of the entry, translation, or synonym (mandatory)."""

    pos: str | None = None
    """Part of speech (may be omitted)."""

    asp: str | None = None
    """Aspect (if applicable)."""

    ts: str | None = None
    """Transcription of the search word."""

    gen: str | None = None
    """Gender (for nouns)."""

    num: str | None = None
    """Number (for nouns)."""

    fr: int | None = None
    """Frequency of the translation."""


class Entry(BaseModel):
    """Node of the dictionary entry tree."""

    model_config = ConfigDict(frozen=True)

    attributes: Attributes

    tr: tuple["Entry", ...] | None = None
    """Translations."""

    syn: tuple["Entry", ...] | None = None
    """Synonyms."""

    mean: tuple["Entry", ...] | None = None
    """Meanings."""

    ex: tuple["Entry", ...] | None = None
    """Examples."""

    @model_validator(mode="before")
    @classmethod
    def collect_attributes(cls, data: Any) -> Any:
        """Move node attributes, written inline in the response, to
        `attributes`."""

        if not isinstance(data, dict) or "attributes" in data:
            return data

        attributes: dict[str, Any] = {
            key: data[key] for key in ATTRIBUTE_KEYS if key in data
        }
        children: dict[str, Any] = {
            key: value for key, value in data.items() if key not in attributes
        }
        return {"attributes": attributes, **children}

    @property
    def text(self) -> str:
        """Text of the node."""
        return self.attributes.text

    def get_translations(self) -> tuple["Entry", ...]:
        """Get translations or an empty tuple."""
        return self.tr or ()

    def get_synonyms(self) -> tuple["Entry", ...]:
        """Get synonyms or an empty tuple."""
        return self.syn or ()

    def get_meanings(self) -> tuple["Entry", ...]:
        """Get meanings or an empty tuple."""
        return self.mean or ()

    def get_examples(self) -> tuple["Entry", ...]:
        """Get examples or an empty tuple."""
        return self.ex or ()


class LookupResult(BaseModel):
    """Result of the lookup method."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    definitions: tuple[Entry, ...] = Field(alias="def")
    """Dictionary entries.  A transcription of the search word may be provided
    in the `ts` attribute."""

    def first(self) -> Entry | None:
        """Get the first dictionary entry, if any."""
        return self.definitions[0] if self.definitions else None


GetLangsResult = list[str]
"""Supported translation directions, e.g. `["en-ru", "ru-en"]`."""
