"""Typed HTTP request headers."""

from dataclasses import dataclass
from enum import Enum

from fetchkit.errors import InvalidHeaderError
from fetchkit.http.authorization import AuthorizationValue
from fetchkit.http.content_encoding import ContentEncodingValue
from fetchkit.http.content_type import ContentTypeValue


class HeaderName(str, Enum):
    """Canonical names of the headers with dedicated constructors."""

    ACCEPT = "Accept"
    ACCEPT_ENCODING = "Accept-Encoding"
    ACCEPT_LANGUAGE = "Accept-Language"
    ACCEPT_CHARSET = "Accept-Charset"
    AUTHORIZATION = "Authorization"
    COOKIE = "Cookie"
    CONTENT_ENCODING = "Content-Encoding"
    CONTENT_LANGUAGE = "Content-Language"
    CONTENT_LENGTH = "Content-Length"
    CONTENT_TYPE = "Content-Type"
    REFERER = "Referer"
    USER_AGENT = "User-Agent"


@dataclass(frozen=True)
class Credentials:
    """Authorization scheme paired with its credentials."""

    scheme: AuthorizationValue
    credentials: str

    @property
    def type_string(self) -> str:
        """Wire representation, ``<scheme> <credentials>``."""
        return f"{self.scheme.type_string} {self.credentials}"


HeaderValue = ContentTypeValue | ContentEncodingValue | Credentials | str | int


@dataclass(frozen=True)
class HTTPHeader:
    """A single request header.

    Build headers through the named constructors, for example::

        HTTPHeader.accept(HTTPContentType.JSON)
        HTTPHeader.authorization(HTTPAuthorization.BEARER, token)
        HTTPHeader.custom("X-Request-Id", request_id)
    """

    name: str
    value: HeaderValue

    def __post_init__(self) -> None:
        if not self.name:
            msg = "Header name must not be empty"
            raise InvalidHeaderError(msg)

    def create_header(self) -> tuple[str, str]:
        """Render the header as a ``(name, value)`` pair of strings."""
        return self.name, _render_value(self.value)

    @classmethod
    def accept(cls, value: ContentTypeValue) -> "HTTPHeader":
        """Media types the client is able to understand."""
        return cls(HeaderName.ACCEPT.value, value)

    @classmethod
    def accept_encoding(cls, value: ContentEncodingValue) -> "HTTPHeader":
        """Content encodings the client is able to understand."""
        return cls(HeaderName.ACCEPT_ENCODING.value, value)

    @classmethod
    def accept_language(cls, value: str) -> "HTTPHeader":
        """Languages the client understands, e.g. ``en-US,en;q=0.5``."""
        return cls(HeaderName.ACCEPT_LANGUAGE.value, value)

    @classmethod
    def accept_charset(cls, value: str) -> "HTTPHeader":
        """Character encodings the client understands, e.g. ``utf-8``."""
        return cls(HeaderName.ACCEPT_CHARSET.value, value)

    @classmethod
    def authorization(
        cls, scheme: AuthorizationValue, credentials: str
    ) -> "HTTPHeader":
        """Credentials to authenticate the user agent with the server."""
        return cls(HeaderName.AUTHORIZATION.value, Credentials(scheme, credentials))

    @classmethod
    def cookie(cls, value: str) -> "HTTPHeader":
        """Stored HTTP cookies, e.g. ``name=value; other=value``."""
        return cls(HeaderName.COOKIE.value, value)

    @classmethod
    def content_encoding(cls, value: ContentEncodingValue) -> "HTTPHeader":
        """Encoding applied to the request body."""
        return cls(HeaderName.CONTENT_ENCODING.value, value)

    @classmethod
    def content_language(cls, value: str) -> "HTTPHeader":
        """Language(s) intended for the audience of the body."""
        return cls(HeaderName.CONTENT_LANGUAGE.value, value)

    @classmethod
    def content_length(cls, value: int) -> "HTTPHeader":
        """Size of the body in bytes."""
        return cls(HeaderName.CONTENT_LENGTH.value, value)

    @classmethod
    def content_type(cls, value: ContentTypeValue) -> "HTTPHeader":
        """Media type of the request body."""
        return cls(HeaderName.CONTENT_TYPE.value, value)

    @classmethod
    def referer(cls, value: str) -> "HTTPHeader":
        """Address of the page the request originated from."""
        return cls(HeaderName.REFERER.value, value)

    @classmethod
    def user_agent(cls, value: str) -> "HTTPHeader":
        """Identification of the requesting user agent."""
        return cls(HeaderName.USER_AGENT.value, value)

    @classmethod
    def custom(cls, name: str, value: str) -> "HTTPHeader":
        """Any other header, sent as given."""
        return cls(name, value)


def _render_value(value: HeaderValue) -> str:
    # str enums are also str instances, so typed values are checked first
    if hasattr(value, "type_string"):
        return str(value.type_string)
    return str(value)
