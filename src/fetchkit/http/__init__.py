"""Typed HTTP vocabulary: methods, headers, and header values."""

from fetchkit.http.authorization import (
    AuthorizationValue,
    CustomAuthorization,
    HTTPAuthorization,
)
from fetchkit.http.content_encoding import (
    ContentEncodingValue,
    CustomContentEncoding,
    HTTPContentEncoding,
)
from fetchkit.http.content_type import (
    ContentTypeValue,
    CustomContentType,
    HTTPContentType,
)
from fetchkit.http.header import Credentials, HeaderName, HeaderValue, HTTPHeader
from fetchkit.http.method import HTTPMethod


__all__ = [
    # Method
    "HTTPMethod",
    # Header values
    "HTTPContentType",
    "CustomContentType",
    "ContentTypeValue",
    "HTTPContentEncoding",
    "CustomContentEncoding",
    "ContentEncodingValue",
    "HTTPAuthorization",
    "CustomAuthorization",
    "AuthorizationValue",
    # Headers
    "HTTPHeader",
    "HeaderName",
    "HeaderValue",
    "Credentials",
]
