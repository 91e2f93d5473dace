"""HTTP request methods."""

from enum import Enum


class HTTPMethod(str, Enum):
    """HTTP request method.

    The value of each member is the literal verb sent on the wire.

    - GET: Retrieve a representation of the resource
    - POST: Send data to the server
    - PUT: Create or replace the target resource
    - PATCH: Apply partial modifications to a resource
    - DELETE: Delete the specified resource
    - OPTIONS: Describe the communication options for the resource
    - HEAD: Like GET, but only the headers are returned
    """

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"
