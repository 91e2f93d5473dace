"""Network reachability check consulted before each fetch."""

import socket
from collections.abc import Callable

from fetchkit.fetch.constants import CONNECTIVITY_PROBE_HOST, CONNECTIVITY_PROBE_PORT


ConnectivityCheck = Callable[[], bool]


def is_connected_to_network(
    host: str = CONNECTIVITY_PROBE_HOST,
    port: int = CONNECTIVITY_PROBE_PORT,
) -> bool:
    """Check whether the host has a route to the network.

    Connects a UDP socket to the probe address. Connecting a datagram socket
    only asks the OS to pick a route, so no packet leaves the machine.

    Args:
        host: Probe address.
        port: Probe port.

    Returns:
        True if the OS reports a usable route.
    """
    try:
        with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
            sock.connect((host, port))
    except OSError:
        return False
    return True
