"""Dictionary client entry point.

Powered by Yandex.Dictionary, https://tech.yandex.com/dictionary.
"""

import logging
import os
import sys
from argparse import ArgumentParser, Namespace
from pathlib import Path

import coloredlogs

from ydictionary.client import Client
from ydictionary.config import Config, read_config
from ydictionary.errors import DictionaryError
from ydictionary.flags import Flags, encode, flag_names, parse_flag
from ydictionary.morphology import normalize_request
from ydictionary.paths import SERVICE_URL, get_default_config_path
from ydictionary.projector import DisplayStyle, render
from ydictionary.request import LookupRequest
from ydictionary.ui import Interface, Text, get_interface

KEY_VARIABLE: str = "YDICTIONARY_KEY"
"""Environment variable with the API key."""

COMMANDS: set[str] = {"langs", "lookup"}
OPTIONS_WITH_VALUES: set[str] = {"--config", "--interface"}

LOG_FORMAT: str = "%(levelname)s %(message)s"


def get_parser() -> ArgumentParser:
    """Construct command-line argument parser."""

    parser: ArgumentParser = ArgumentParser(
        "ydictionary",
        description="Look up a word in Yandex Dictionary.",
        epilog="The API key may be given before the command, e.g. "
        "`ydictionary <key> lookup en-ru hello`.",
    )
    parser.add_argument("--config", help="path to the configuration file")
    parser.add_argument(
        "--interface",
        help="interface type",
        choices=["terminal", "rich"],
        default="rich",
    )
    parser.add_argument(
        "--verbose", help="print debug messages", action="store_true"
    )

    subparser = parser.add_subparsers(dest="command", required=True)

    # Command `langs`.
    subparser.add_parser("langs", help="get all supported languages")

    # Command `lookup`.
    lookup_parser: ArgumentParser = subparser.add_parser(
        "lookup", help="look up a word"
    )
    lookup_parser.add_argument(
        "lang", help='translation direction, e.g. "en-ru"'
    )
    lookup_parser.add_argument(
        "text", help="the word or phrase to find in the dictionary"
    )
    lookup_parser.add_argument(
        "-d",
        "--display",
        help="display style",
        choices=[style.value for style in DisplayStyle],
        default=DisplayStyle.SIMPLE.value,
    )
    lookup_parser.add_argument(
        "--ui",
        help="language of the user's interface for names of parts of speech",
    )
    lookup_parser.add_argument(
        "--flags",
        help="search option, may be repeated",
        choices=flag_names(),
        action="append",
    )
    lookup_parser.add_argument(
        "--no-morph",
        help="don't replace Russian words with their normal forms",
        action="store_true",
        dest="no_morph",
    )

    return parser


def extract_key(arguments: list[str]) -> tuple[str | None, list[str]]:
    """Take the API key from the command line.

    The key is the first positional argument if it is followed by a command
    name.  Otherwise arguments are left as is, so that a mistyped command is
    reported as such.

    :return: the key or `None` and the rest of the arguments
    """
    positions: list[int] = get_positional_indices(arguments)

    if (
        len(positions) >= 2
        and arguments[positions[0]] not in COMMANDS
        and arguments[positions[1]] in COMMANDS
    ):
        index: int = positions[0]
        return arguments[index], arguments[:index] + arguments[index + 1 :]

    return None, arguments


def get_positional_indices(arguments: list[str]) -> list[int]:
    """Get indices of top-level positional arguments up to the command."""

    result: list[int] = []
    skip_next: bool = False

    for index, argument in enumerate(arguments):
        if skip_next:
            skip_next = False
            continue
        if argument.startswith("-"):
            skip_next = argument in OPTIONS_WITH_VALUES
            continue
        result.append(index)
        if argument in COMMANDS or len(result) == 2:
            break

    return result


def get_key(key: str | None, config: Config) -> str | None:
    """Get API key from the command line, the environment, or the config."""
    return key or os.environ.get(KEY_VARIABLE) or config.key


def get_flags(names: list[str] | None) -> Flags | None:
    """Combine search options from the command line."""
    if not names:
        return None
    return Flags(encode(parse_flag(name) for name in names))


def run(arguments: Namespace, key: str | None, interface: Interface) -> None:
    """Run the command.

    :raises DictionaryError: on any failure
    """
    config_path: Path = (
        Path(arguments.config)
        if arguments.config
        else get_default_config_path()
    )
    config: Config = read_config(config_path)

    if (key := get_key(key, config)) is None:
        raise DictionaryError("No API key provided.")

    client: Client = Client(config.url or SERVICE_URL, key)

    match arguments.command:
        case "langs":
            interface.print(Text("\n".join(client.get_languages())))

        case "lookup":
            request: LookupRequest = LookupRequest(
                arguments.lang,
                arguments.text,
                arguments.ui or config.ui,
                get_flags(arguments.flags),
            )
            if not arguments.no_morph:
                request = normalize_request(request)
            interface.print(
                render(
                    client.lookup(request), DisplayStyle(arguments.display)
                )
            )


def main(argv: list[str] | None = None) -> None:
    """Entry point."""

    key, argv = extract_key(sys.argv[1:] if argv is None else argv)
    arguments: Namespace = get_parser().parse_args(argv)

    coloredlogs.install(
        level=logging.DEBUG if arguments.verbose else logging.INFO,
        fmt=LOG_FORMAT,
    )

    try:
        run(arguments, key, get_interface(arguments.interface))
    except DictionaryError as error:
        logging.error("%s", error)
        sys.exit(1)


if __name__ == "__main__":
    main()
