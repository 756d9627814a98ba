"""Test dictionary service client."""

import json
from typing import Any
from unittest.mock import MagicMock, patch

import pytest
import urllib3
from urllib3 import PoolManager

from ydictionary.client import Client
from ydictionary.errors import (
    DailyReqLimit,
    KeyBlocked,
    KeyInvalid,
    LangNotSupported,
    ServiceError,
    TextTooLong,
    TransportError,
)
from ydictionary.request import LookupRequest
from ydictionary.result import LookupResult

URL: str = "https://dictionary.test/api/v1/dicservice.json"
KEY: str = "secret"

FRIEND: dict = {
    "head": {},
    "def": [{"text": "friend", "pos": "noun", "tr": [{"text": "друг"}]}],
}


def get_response(status: int, data: Any) -> MagicMock:
    """Construct fake HTTP response."""

    response: MagicMock = MagicMock()
    response.status = status
    response.data = (
        data if isinstance(data, bytes) else json.dumps(data).encode("utf-8")
    )
    return response


def test_url() -> None:
    """Check that base URL is trimmed."""
    assert Client(f"  {URL}// ", KEY).url == URL


def test_get_languages() -> None:
    """Check getting supported translation directions."""

    with patch.object(
        PoolManager,
        "request",
        return_value=get_response(200, ["en-ru", "ru-en"]),
    ) as request:
        assert Client(URL, KEY).get_languages() == ["en-ru", "ru-en"]

    request.assert_called_once()
    assert request.call_args.args == ("GET", f"{URL}/getLangs")
    assert request.call_args.kwargs["fields"] == {"key": KEY}


def test_lookup() -> None:
    """Check lookup request parameters and result."""

    with patch.object(
        PoolManager, "request", return_value=get_response(200, FRIEND)
    ) as request:
        result: LookupResult = Client(URL, KEY).lookup(
            LookupRequest.en_ru("friend")
        )

    assert result.definitions[0].get_translations()[0].text == "друг"
    assert request.call_args.args == ("POST", f"{URL}/lookup")
    assert request.call_args.kwargs["fields"] == {
        "key": KEY,
        "lang": "en-ru",
        "text": "friend",
    }
    assert request.call_args.kwargs["encode_multipart"] is False


def test_lookup_empty() -> None:
    """Check that no entries is a successful result."""

    with patch.object(
        PoolManager,
        "request",
        return_value=get_response(200, {"head": {}, "def": []}),
    ):
        result: LookupResult = Client(URL, KEY).lookup(
            LookupRequest.en_ru("qwerty")
        )

    assert result.definitions == ()


@pytest.mark.parametrize(
    "code, error_class",
    [
        (401, KeyInvalid),
        (402, KeyBlocked),
        (403, DailyReqLimit),
        (413, TextTooLong),
        (501, LangNotSupported),
    ],
)
def test_service_errors(code: int, error_class: type[ServiceError]) -> None:
    """Check that known error codes have their own errors."""

    response: MagicMock = get_response(
        code, {"code": code, "message": "Service error"}
    )
    with patch.object(PoolManager, "request", return_value=response):
        with pytest.raises(error_class) as error_info:
            Client(URL, KEY).lookup(LookupRequest.en_ru("friend"))

    assert error_info.value.code == code
    assert error_info.value.message == "Service error"


def test_service_error_without_body() -> None:
    """Check that known status is recognized without error payload."""

    with patch.object(
        PoolManager, "request", return_value=get_response(401, b"Unauthorized")
    ):
        with pytest.raises(KeyInvalid):
            Client(URL, KEY).get_languages()


def test_unknown_status() -> None:
    """Check that unknown error status is a transport error."""

    with patch.object(
        PoolManager,
        "request",
        return_value=get_response(500, {"code": 500, "message": "Oops"}),
    ):
        with pytest.raises(TransportError):
            Client(URL, KEY).lookup(LookupRequest.en_ru("friend"))


def test_malformed_json() -> None:
    """Check that malformed body is a transport error."""

    with patch.object(
        PoolManager, "request", return_value=get_response(200, b"{def: ")
    ):
        with pytest.raises(TransportError):
            Client(URL, KEY).lookup(LookupRequest.en_ru("friend"))


def test_malformed_schema() -> None:
    """Check that body of unexpected structure is a transport error."""

    with patch.object(
        PoolManager,
        "request",
        return_value=get_response(200, {"def": [{"pos": "noun"}]}),
    ):
        with pytest.raises(TransportError) as error_info:
            Client(URL, KEY).lookup(LookupRequest.en_ru("friend"))

    assert error_info.value.cause is not None


def test_malformed_languages() -> None:
    """Check that list of languages should be a list of strings."""

    with patch.object(
        PoolManager, "request", return_value=get_response(200, {"en": "ru"})
    ):
        with pytest.raises(TransportError):
            Client(URL, KEY).get_languages()


def test_connection_error() -> None:
    """Check that network failure is a transport error with the cause."""

    cause: urllib3.exceptions.HTTPError = urllib3.exceptions.NewConnectionError(
        MagicMock(), "Connection refused"
    )
    with patch.object(PoolManager, "request", side_effect=cause):
        with pytest.raises(TransportError) as error_info:
            Client(URL, KEY).get_languages()

    assert error_info.value.cause is cause


def test_service_error_null_message() -> None:
    """Check that missing service message is an empty string."""

    with patch.object(
        PoolManager,
        "request",
        return_value=get_response(402, {"code": 402, "message": None}),
    ):
        with pytest.raises(KeyBlocked) as error_info:
            Client(URL, KEY).get_languages()

    assert error_info.value.message == ""
