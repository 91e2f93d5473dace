"""Unit tests for the connectivity probe."""

import socket
from unittest.mock import MagicMock, patch

from fetchkit.fetch.connectivity import is_connected_to_network


class TestIsConnectedToNetwork:
    """Tests for is_connected_to_network."""

    def test_route_available(self) -> None:
        """Test that a successful connect reports connectivity."""
        with patch.object(socket, "socket") as mock_socket:
            assert is_connected_to_network() is True

        mock_socket.assert_called_once_with(socket.AF_INET, socket.SOCK_DGRAM)
        sock = mock_socket.return_value.__enter__.return_value
        sock.connect.assert_called_once_with(("8.8.8.8", 53))

    def test_no_route(self) -> None:
        """Test that an unreachable network reports no connectivity."""
        mock_socket = MagicMock()
        sock = mock_socket.return_value.__enter__.return_value
        sock.connect.side_effect = OSError("Network is unreachable")

        with patch.object(socket, "socket", mock_socket):
            assert is_connected_to_network() is False

    def test_custom_probe(self) -> None:
        """Test that the probe address can be changed."""
        with patch.object(socket, "socket") as mock_socket:
            is_connected_to_network("10.0.0.1", 80)

        sock = mock_socket.return_value.__enter__.return_value
        sock.connect.assert_called_once_with(("10.0.0.1", 80))
