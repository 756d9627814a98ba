"""Test representation of dictionary entries."""

import pytest

from ydictionary.errors import NotFound
from ydictionary.projector import (
    DisplayStyle,
    render,
    render_list,
    render_simple,
    render_verbose,
)
from ydictionary.result import LookupResult
from ydictionary.ui import TerminalInterface

TIME: LookupResult = LookupResult.model_validate(
    {
        "def": [
            {
                "text": "time",
                "pos": "noun",
                "ts": "taɪm",
                "tr": [
                    {
                        "text": "время",
                        "syn": [{"text": "раз"}, {"text": "срок"}],
                        "mean": [{"text": "period"}, {"text": "occasion"}],
                        "ex": [
                            {
                                "text": "prehistoric time",
                                "tr": [{"text": "доисторическое время"}],
                            }
                        ],
                    },
                    {"text": "момент"},
                ],
            },
            {
                "text": "time",
                "pos": "verb",
                "ts": "taɪm",
                "tr": [{"text": "приурочивать"}],
            },
        ]
    }
)


def construct(text) -> str:
    """Get plain text representation."""
    return TerminalInterface().construct(text)


def test_simple() -> None:
    """Check that the first translation of the first entry is shown."""
    assert render_simple(TIME) == "time - время"


def test_simple_ignores_other_entries() -> None:
    """Check that simple style uses only the first entry."""

    result: LookupResult = LookupResult.model_validate(
        {"def": [{"text": "a", "tr": [{"text": "b"}]}, {"text": "c"}]}
    )
    assert render_simple(result) == "a - b"


def test_simple_empty() -> None:
    """Check that empty result has no translation."""

    with pytest.raises(NotFound):
        render_simple(LookupResult.model_validate({"def": []}))


@pytest.mark.parametrize(
    "entry", [{"text": "time"}, {"text": "time", "tr": []}]
)
def test_simple_no_translations(entry: dict) -> None:
    """Check that entry without translations has no translation."""

    with pytest.raises(NotFound):
        render_simple(LookupResult.model_validate({"def": [entry]}))


def test_list() -> None:
    """Check that all translations with synonyms are listed."""

    assert construct(render_list(TIME)) == (
        "time [taɪm] noun\n"
        "  1. время, раз, срок\n"
        "  2. момент\n"
        "\n"
        "time [taɪm] verb\n"
        "  1. приурочивать"
    )


def test_verbose() -> None:
    """Check that meanings and examples are listed."""

    assert construct(render_verbose(TIME)) == (
        "time [taɪm] noun\n"
        "  1. время, раз, срок\n"
        "    (period, occasion)\n"
        "    prehistoric time - доисторическое время\n"
        "  2. момент\n"
        "\n"
        "time [taɪm] verb\n"
        "  1. приурочивать"
    )


def test_list_not_found() -> None:
    """Check that result without translations is not found."""

    with pytest.raises(NotFound):
        render_list(LookupResult.model_validate({"def": [{"text": "time"}]}))


def test_render() -> None:
    """Check dispatching by display style."""

    assert render(TIME, DisplayStyle.SIMPLE) == "time - время"
    assert construct(render(TIME, DisplayStyle.LIST)) == construct(
        render_list(TIME)
    )
