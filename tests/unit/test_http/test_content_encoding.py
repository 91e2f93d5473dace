"""Unit tests for content encodings."""

import pytest

from fetchkit.http.content_encoding import CustomContentEncoding, HTTPContentEncoding


class TestHTTPContentEncoding:
    """Tests for HTTPContentEncoding."""

    @pytest.mark.parametrize(
        ("encoding", "expected"),
        [
            (HTTPContentEncoding.GZIP, "gzip"),
            (HTTPContentEncoding.DEFLATE, "deflate"),
            (HTTPContentEncoding.IDENTITY, "identity"),
            (HTTPContentEncoding.BR, "br"),
            (HTTPContentEncoding.ANY, "*"),
        ],
    )
    def test_type_string(self, encoding: HTTPContentEncoding, expected: str) -> None:
        """Test wire strings of predefined encodings."""
        assert encoding.type_string == expected

    def test_custom_echoes_verbatim(self) -> None:
        """Test that custom encoding lists are echoed exactly."""
        value = "deflate, gzip;q=1.0, *;q=0.5"
        result = HTTPContentEncoding.custom(value)

        assert isinstance(result, CustomContentEncoding)
        assert result.type_string == value

    def test_custom_empty_string(self) -> None:
        """Test that an empty custom encoding is echoed as empty."""
        assert HTTPContentEncoding.custom("").type_string == ""
