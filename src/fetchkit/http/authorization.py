"""Schemes for the Authorization header."""

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class CustomAuthorization:
    """Authorization scheme outside the predefined set."""

    type_string: str


class HTTPAuthorization(str, Enum):
    """Authorization schemes.

    - BASIC: base64-encoded credentials (RFC 7617)
    - BEARER: token access to OAuth 2.0 protected resources (RFC 6750)
    - DIGEST: digest access authentication (RFC 7616)
    """

    BASIC = "Basic"
    BEARER = "Bearer"
    DIGEST = "Digest"

    @property
    def type_string(self) -> str:
        """Wire representation of the scheme."""
        return self.value

    @staticmethod
    def custom(type_string: str) -> CustomAuthorization:
        """Use ``type_string`` verbatim as the scheme."""
        return CustomAuthorization(type_string)


AuthorizationValue = HTTPAuthorization | CustomAuthorization
