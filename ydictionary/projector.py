"""Representation of dictionary entries for the terminal."""

from enum import Enum

from ydictionary.errors import NotFound
from ydictionary.result import Entry, LookupResult
from ydictionary.ui import GRAY, Colorized, Formatted, Text

INDENT: str = "  "


class DisplayStyle(Enum):
    """How much of the dictionary entry to show."""

    SIMPLE = "simple"
    """Display one word translation."""

    LIST = "list"
    """List all translations."""

    VERBOSE = "verbose"
    """List all translations with meanings and examples."""


def render_simple(result: LookupResult) -> str:
    """Get the first translation of the first entry.

    :return: string `<word> - <translation>`
    :raises NotFound: if there is no entry or the entry has no translations
    """
    if (entry := result.first()) is None:
        raise NotFound()

    if not (translations := entry.get_translations()):
        raise NotFound(entry.text)

    return f"{entry.text} - {translations[0].text}"


def get_header(entry: Entry) -> Text:
    """Get the line with the word, its transcription and part of speech."""

    text: Text = Text(Formatted(entry.text, "bold"))
    if entry.attributes.ts:
        text.add(Colorized(f" [{entry.attributes.ts}]", GRAY))
    if entry.attributes.pos:
        text.add(Colorized(f" {entry.attributes.pos}", GRAY))
    return text


def get_translation_line(index: int, translation: Entry) -> Text:
    """Get the numbered line with the translation and its synonyms."""

    words: list[str] = [translation.text] + [
        synonym.text for synonym in translation.get_synonyms()
    ]
    return Text(f"{INDENT}{index}. ").add(", ".join(words))


def get_details(translation: Entry) -> list[Text]:
    """Get lines with meanings and examples of the translation."""

    lines: list[Text] = []
    padding: str = INDENT * 2

    if meanings := translation.get_meanings():
        lines.append(
            Text(padding).add(
                Colorized(
                    "(" + ", ".join(x.text for x in meanings) + ")", GRAY
                )
            )
        )

    for example in translation.get_examples():
        line: Text = Text(padding).add(Formatted(example.text, "italic"))
        if example_translations := example.get_translations():
            line.add(" - " + ", ".join(x.text for x in example_translations))
        lines.append(line)

    return lines


def render_entries(result: LookupResult, show_details: bool) -> Text:
    """Get all entries with all their translations.

    :param result: lookup result
    :param show_details: show meanings and examples for every translation
    :raises NotFound: if no entry has translations
    """
    lines: list[Text] = []

    for entry in result.definitions:
        if not (translations := entry.get_translations()):
            continue
        if lines:
            lines.append(Text())
        lines.append(get_header(entry))
        for index, translation in enumerate(translations, start=1):
            lines.append(get_translation_line(index, translation))
            if show_details:
                lines.extend(get_details(translation))

    if not lines:
        first: Entry | None = result.first()
        raise NotFound(first.text if first else None)

    text: Text = Text()
    for index, line in enumerate(lines):
        text.add(line)
        if index < len(lines) - 1:
            text.add("\n")
    return text


def render_list(result: LookupResult) -> Text:
    """List all translations of all entries."""
    return render_entries(result, show_details=False)


def render_verbose(result: LookupResult) -> Text:
    """List all translations with meanings and examples."""
    return render_entries(result, show_details=True)


def render(result: LookupResult, style: DisplayStyle) -> str | Text:
    """Get representation of the lookup result in the display style."""

    match style:
        case DisplayStyle.SIMPLE:
            return render_simple(result)
        case DisplayStyle.LIST:
            return render_list(result)
        case DisplayStyle.VERBOSE:
            return render_verbose(result)

    raise ValueError(f"Unknown display style `{style}`.")
