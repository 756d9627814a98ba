"""Errors reported by the dictionary client."""

from dataclasses import dataclass
from typing import ClassVar, Self


class DictionaryError(Exception):
    """Any error that terminates a dictionary request."""


@dataclass
class ValidationError(DictionaryError, ValueError):
    """Request data is malformed and cannot be sent."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass
class ServiceError(DictionaryError):
    """Error reported by the dictionary service in a well-formed payload."""

    code: int
    """Numeric error code from the response."""

    message: str = ""
    """Error message from the response."""

    CODE: ClassVar[int | None] = None
    DESCRIPTION: ClassVar[str] = "Dictionary service error."

    @classmethod
    def from_code(cls, code: int, message: str = "") -> Self | None:
        """Get the error for a service error code.

        :param code: code from the error payload or HTTP status
        :param message: message from the error payload
        :return: error of the matching kind or `None` if the code is unknown
        """
        for error_class in cls.__subclasses__():
            if error_class.CODE == code:
                return error_class(code, message)
        return None

    def __str__(self) -> str:
        return self.DESCRIPTION


class KeyInvalid(ServiceError):
    """Invalid API key."""

    CODE = 401
    DESCRIPTION = "Invalid API key."


class KeyBlocked(ServiceError):
    """Blocked API key."""

    CODE = 402
    DESCRIPTION = "This API key has been blocked."


class DailyReqLimit(ServiceError):
    """Daily request limit is exceeded."""

    CODE = 403
    DESCRIPTION = "Exceeded the daily limit on the number of requests."


class TextTooLong(ServiceError):
    """Text of the request is too long."""

    CODE = 413
    DESCRIPTION = "The text size exceeds the maximum."


class LangNotSupported(ServiceError):
    """Translation direction is not supported."""

    CODE = 501
    DESCRIPTION = "The specified translation direction is not supported."


@dataclass
class TransportError(DictionaryError):
    """Request failed on the way to the service or back."""

    message: str

    cause: Exception | None = None
    """Underlying exception, if any."""

    def __str__(self) -> str:
        if self.cause is not None:
            return f"{self.message}: {self.cause}"
        return self.message


@dataclass
class NotFound(DictionaryError):
    """Result has no translation to display."""

    text: str | None = None
    """Requested text, if known."""

    def __str__(self) -> str:
        if self.text:
            return f"Translation of `{self.text}` not found."
        return "Translation not found."


@dataclass
class ConfigError(DictionaryError):
    """Configuration file is malformed."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"Couldn't read config `{self.path}`: {self.message}"
