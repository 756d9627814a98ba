"""Reduction of inflected words to their dictionary form.

Dictionary lookups for Russian work much better with normal forms: `ищу` is
not in the dictionary, but `искать` is.
"""

import logging
from typing import Protocol

from ydictionary.errors import ValidationError
from ydictionary.request import LookupRequest

RUSSIAN: str = "ru"
"""Source language for which words are normalized."""


class Analyzer(Protocol):
    """Morphological analyzer."""

    def analyze(self, word: str) -> str | None:
        """Get the normal form (lemma) of the most probable parse.

        :param word: word in any form
        :return: normal form or `None` if the word can't be parsed
        """


class PymorphyAnalyzer:
    """Russian morphological analyzer based on `pymorphy3`.

    Dictionaries are loaded on the first call, since loading takes noticeable
    time and is not needed for other translation directions.
    """

    def __init__(self) -> None:
        self._morph = None

    def analyze(self, word: str) -> str | None:
        if self._morph is None:
            import pymorphy3

            self._morph = pymorphy3.MorphAnalyzer(lang=RUSSIAN)
            logging.debug("Russian morphological dictionaries loaded.")

        if parses := self._morph.parse(word):
            return parses[0].normal_form
        return None


_default_analyzer: PymorphyAnalyzer = PymorphyAnalyzer()


def get_default_analyzer() -> Analyzer:
    """Get the shared analyzer for Russian."""
    return _default_analyzer


def normalize(
    text: str, source_language: str, analyzer: Analyzer | None = None
) -> str:
    """Get the normal form of a word if the translation is from Russian.

    Never fails: if the analyzer fails or doesn't know the word, the text is
    returned as is.

    :param text: word to normalize
    :param source_language: code of the language of the text, e.g. `ru`
    :param analyzer: morphological analyzer, `pymorphy3` by default
    """
    if source_language != RUSSIAN:
        return text

    if analyzer is None:
        analyzer = get_default_analyzer()

    try:
        normal_form: str | None = analyzer.analyze(text)
    except Exception as error:  # Analyzer failure keeps the text as is.
        logging.warning("Couldn't analyze `%s`: %s.", text, error)
        return text

    if not normal_form:
        return text

    if normal_form != text:
        logging.info("Using normal form `%s` for `%s`.", normal_form, text)

    return normal_form


def normalize_request(
    request: LookupRequest, analyzer: Analyzer | None = None
) -> LookupRequest:
    """Replace the text of the request with its normal form if needed."""

    text: str = normalize(request.text, request.source_language, analyzer)
    if text == request.text:
        return request

    try:
        return request.with_text(text)
    except ValidationError:
        logging.warning("Normal form `%s` is not a valid word.", text)
        return request
