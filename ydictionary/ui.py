"""Console output of dictionary entries."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Self, override

from rich.console import Console
from rich.text import Text as RichElementText

GRAY: str = "#AAAAAA"


class Element:
    """Interface element."""


class InlineElement(Element):
    """Inline element.

    Inline elements may be concatenated into one string.
    """


class Text(InlineElement):
    """Text element."""

    def __init__(self, text: str | InlineElement | None = None):
        self.elements: list[InlineElement | str] = (
            [] if text is None else [text]
        )

    def add(self, element: InlineElement | str) -> Self:
        """Chainable method to add element to the text."""
        self.elements.append(element)
        return self


@dataclass
class Formatted(InlineElement):
    """Formatted text element."""

    text: InlineElement | str
    format_: str

    def __post_init__(self) -> None:
        assert self.format_ in ["bold", "italic"]


@dataclass
class Colorized(InlineElement):
    """Colorized text element."""

    text: InlineElement | str
    color: str


class Interface(ABC):
    """User output interface."""

    @abstractmethod
    def print(self, text: Element | str) -> None:
        """Simply print text message."""
        raise NotImplementedError()


class TerminalInterface(Interface):
    """Simple terminal interface without colors."""

    @override
    def print(self, text: Element | str) -> None:
        print(self.construct(text))

    def construct(self, element: Element | str) -> str:
        """Construct string from element."""

        if isinstance(element, str):
            return element

        if isinstance(element, Text):
            return "".join(
                self.construct(sub_element) for sub_element in element.elements
            )

        # Ignore colors and formatting in terminal interface.
        if isinstance(element, (Formatted, Colorized)):
            return self.construct(element.text)

        raise ValueError(
            f"Unsupported text type in terminal interface `{type(element)}`."
        )


class RichInterface(TerminalInterface):
    """Terminal interface with colors."""

    def __init__(self) -> None:
        self.console: Console = Console(highlight=False)

    @override
    def print(self, text: Element | str) -> None:
        self.console.print(self.construct_rich(text))

    def construct_rich(self, element: Element | str) -> RichElementText:
        """Construct rich element from text."""

        if isinstance(element, str):
            return RichElementText(element)

        if isinstance(element, Text):
            result: RichElementText = RichElementText()
            for sub_element in element.elements:
                result.append(self.construct_rich(sub_element))
            return result

        if isinstance(element, Formatted):
            wrapped: RichElementText = self.construct_rich(element.text)
            match element.format_:
                case "bold":
                    wrapped.stylize("bold")
                case "italic":
                    wrapped.stylize("italic")
            return wrapped

        if isinstance(element, Colorized):
            colorized: RichElementText = self.construct_rich(element.text)
            colorized.stylize(element.color)
            return colorized

        raise ValueError(
            f"Unsupported text type in rich interface `{type(element)}`."
        )


def get_interface(interface: str) -> Interface:
    """Get interface by its identifier."""

    match interface:
        case "terminal":
            return TerminalInterface()
        case "rich":
            return RichInterface()
        case _:
            raise ValueError(f"Unsupported interface: `{interface}`.")
