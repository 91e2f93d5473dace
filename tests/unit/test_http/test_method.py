"""Unit tests for HTTP methods."""

import pytest

from fetchkit.http.method import HTTPMethod


class TestHTTPMethod:
    """Tests for HTTPMethod enum."""

    @pytest.mark.parametrize(
        ("method", "verb"),
        [
            (HTTPMethod.GET, "GET"),
            (HTTPMethod.POST, "POST"),
            (HTTPMethod.PUT, "PUT"),
            (HTTPMethod.PATCH, "PATCH"),
            (HTTPMethod.DELETE, "DELETE"),
            (HTTPMethod.OPTIONS, "OPTIONS"),
            (HTTPMethod.HEAD, "HEAD"),
        ],
    )
    def test_value_is_wire_verb(self, method: HTTPMethod, verb: str) -> None:
        """Test that each member carries the literal verb."""
        assert method.value == verb
        assert method == verb

    def test_closed_set(self) -> None:
        """Test that exactly seven methods exist."""
        assert len(HTTPMethod) == 7

    def test_lookup_by_verb(self) -> None:
        """Test that a verb string maps back to its member."""
        assert HTTPMethod("PATCH") is HTTPMethod.PATCH

    def test_unknown_verb_rejected(self) -> None:
        """Test that verbs outside the set are rejected."""
        with pytest.raises(ValueError):
            HTTPMethod("TRACE")
