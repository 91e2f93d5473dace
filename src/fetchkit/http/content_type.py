"""Media types for the Accept and Content-Type headers."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class CustomContentType:
    """A media type outside the predefined set.

    The string is sent as given; it is neither validated nor escaped.
    """

    type_string: str


class HTTPContentType(str, Enum):
    """Most common media types for the Accept and Content-Type headers.

    Use the family helpers for anything not listed, e.g.
    ``HTTPContentType.application("x")`` renders ``application/x``.
    """

    AAC = "audio/aac"
    BIN = "application/octet-stream"
    BMP = "image/bmp"
    GIF = "image/gif"
    JPG = "image/jpeg"
    PNG = "image/png"
    TIF = "image/tiff"
    WEBP = "image/webp"
    BZ = "application/x-bzip"
    BZ2 = "application/x-bzip2"
    GZ = "application/gzip"
    ZIP = "application/zip"
    CSS = "text/css"
    HTML = "text/html"
    JAVASCRIPT = "text/javascript"
    XHTML = "application/xhtml+xml"
    CSV = "text/csv"
    JSON = "application/json"
    PLAIN = "text/plain"
    XML = "application/xml"
    ICO = "image/vnd.microsoft.icon"
    MP3 = "audio/mpeg"
    OGA = "audio/ogg"
    OPUS = "audio/opus"
    WEBA = "audio/webm"
    OGV = "video/ogg"
    TS = "video/mp2t"
    WEBM = "video/webm"
    PDF = "application/pdf"
    TTF = "font/ttf"
    WOFF = "font/woff"
    WOFF2 = "font/woff2"

    @property
    def type_string(self) -> str:
        """Wire representation of the media type."""
        return self.value

    @staticmethod
    def application(subtype: str) -> CustomContentType:
        """Build an ``application/<subtype>`` media type."""
        return CustomContentType(f"application/{subtype}")

    @staticmethod
    def audio(subtype: str) -> CustomContentType:
        """Build an ``audio/<subtype>`` media type."""
        return CustomContentType(f"audio/{subtype}")

    @staticmethod
    def image(subtype: str) -> CustomContentType:
        """Build an ``image/<subtype>`` media type."""
        return CustomContentType(f"image/{subtype}")

    @staticmethod
    def text(subtype: str) -> CustomContentType:
        """Build a ``text/<subtype>`` media type."""
        return CustomContentType(f"text/{subtype}")

    @staticmethod
    def video(subtype: str) -> CustomContentType:
        """Build a ``video/<subtype>`` media type."""
        return CustomContentType(f"video/{subtype}")

    @staticmethod
    def custom(type_string: str) -> CustomContentType:
        """Use ``type_string`` verbatim as the media type."""
        return CustomContentType(type_string)


ContentTypeValue = HTTPContentType | CustomContentType
