"""Gate for Yandex Dictionary service.

See https://yandex.com/dev/dictionary/doc/dg/concepts/api-overview.html.
"""

import json
import logging
from typing import Any

import urllib3
from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaError
from urllib3 import BaseHTTPResponse, PoolManager, Timeout

from ydictionary.errors import ServiceError, TransportError
from ydictionary.request import LookupRequest
from ydictionary.result import GetLangsResult, LookupResult

GET_LANGS_ADAPTER: TypeAdapter[GetLangsResult] = TypeAdapter(GetLangsResult)


class Client:
    """Client of the dictionary service.

    Every method performs exactly one request and releases the connection
    before returning.  Requests are never retried.
    """

    def __init__(
        self, url: str, key: str, timeout: Timeout | None = None
    ) -> None:
        """
        :param url: base URL, e.g.
            `https://dictionary.yandex.net/api/v1/dicservice.json`
        :param key: API key, see https://yandex.com/dev/keys/
        :param timeout: connection and read timeouts, urllib3 defaults if
            `None`
        """
        self.url: str = url.strip().rstrip("/")
        self.key: str = key
        self.timeout: Timeout | None = timeout

    def __repr__(self) -> str:
        return f"Client({self.url!r})"

    def get_languages(self) -> GetLangsResult:
        """Get supported translation directions."""

        data: Any = self.request("GET", "getLangs", {"key": self.key})
        try:
            return GET_LANGS_ADAPTER.validate_python(data)
        except SchemaError as error:
            raise TransportError(
                "Malformed list of languages", error
            ) from error

    def lookup(self, request: LookupRequest) -> LookupResult:
        """Search for a word or phrase in the dictionary.

        :param request: lookup request with already validated text
        :return: dictionary entries, possibly none
        """
        fields: dict[str, str] = {"key": self.key} | request.to_form()

        data: Any = self.request("POST", "lookup", fields)
        try:
            return LookupResult.model_validate(data)
        except SchemaError as error:
            raise TransportError("Malformed dictionary entry", error) from error

    def request(self, method: str, name: str, fields: dict[str, str]) -> Any:
        """Call a service method and get the decoded JSON body.

        :param method: HTTP method
        :param name: name of the service method, e.g. `lookup`
        :param fields: query parameters for `GET`, form for `POST`
        :raises ServiceError: if the service reported a known error
        :raises TransportError: on network failure, unexpected status, or
            malformed JSON
        """
        address: str = f"{self.url}/{name}"
        logging.debug(
            "%s `%s` with %s.",
            method,
            address,
            ", ".join(sorted(key for key in fields if key != "key")) or "key",
        )

        options: dict[str, Any] = {"fields": fields, "retries": False}
        if method == "POST":
            options["encode_multipart"] = False
        if self.timeout is not None:
            options["timeout"] = self.timeout

        response: BaseHTTPResponse
        with PoolManager() as pool_manager:
            try:
                response = pool_manager.request(method, address, **options)
            except urllib3.exceptions.HTTPError as error:
                raise TransportError(
                    f"Couldn't connect to `{self.url}`", error
                ) from error

        logging.debug("Response status %d.", response.status)
        return parse_response(response.status, response.data)


def parse_response(status: int, body: bytes) -> Any:
    """Decode the response body and check it for service errors.

    :param status: HTTP status code
    :param body: raw response body
    :return: decoded JSON
    """
    data: Any
    try:
        data = json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as error:
        if (service_error := ServiceError.from_code(status)) is not None:
            raise service_error from error
        if not 200 <= status < 300:
            raise TransportError(f"Unexpected status {status}") from error
        raise TransportError("Malformed response", error) from error

    if isinstance(data, dict) and "code" in data:
        code: Any = data["code"]
        message: str = str(data.get("message") or "")
        if isinstance(code, int) and (
            service_error := ServiceError.from_code(code, message)
        ):
            raise service_error
        if code != 200 and not 200 <= status < 300:
            raise TransportError(
                f"Unexpected status {status}, code {code}: {message}"
            )

    if not 200 <= status < 300:
        if (service_error := ServiceError.from_code(status)) is not None:
            raise service_error
        raise TransportError(f"Unexpected status {status}")

    return data
