"""Encodings for the Accept-Encoding and Content-Encoding headers."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class CustomContentEncoding:
    """Free-form encoding list, e.g. ``deflate, gzip;q=1.0, *;q=0.5``."""

    type_string: str


class HTTPContentEncoding(str, Enum):
    """Content codings.

    - GZIP: Lempel-Ziv coding (LZ77) with a 32-bit CRC
    - DEFLATE: zlib structure (RFC 1950) with deflate compression (RFC 1951)
    - IDENTITY: No compression or modification
    - BR: Brotli
    - ANY: Any encoding (``*``)
    """

    GZIP = "gzip"
    DEFLATE = "deflate"
    IDENTITY = "identity"
    BR = "br"
    ANY = "*"

    @property
    def type_string(self) -> str:
        """Wire representation of the encoding."""
        return self.value

    @staticmethod
    def custom(type_string: str) -> CustomContentEncoding:
        """Use ``type_string`` verbatim as the encoding."""
        return CustomContentEncoding(type_string)


ContentEncodingValue = HTTPContentEncoding | CustomContentEncoding
