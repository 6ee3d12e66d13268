"""TCP endpoint that accepts one actuator and sends it commands."""

from __future__ import annotations

import logging
import socket

ACTUATOR_PORT = 9002

log = logging.getLogger(__name__)


class ActuatorCommunicator:
    """Listens for a single actuator connection and forwards messages to it."""

    def __init__(self, port: int = ACTUATOR_PORT, host: str = "0.0.0.0") -> None:
        self._server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            self._server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self._server.bind((host, port))
        except OSError:
            self._server.close()
            raise
        self.address = self._server.getsockname()
        self._peer: socket.socket | None = None
        self._closed = False

    def connect(self) -> None:
        """Listen and block until an actuator connects."""
        if self._closed:
            raise RuntimeError("communicator is closed")
        self._server.listen(5)
        log.info("Listening for actuator")
        self._peer, _ = self._server.accept()
        log.info("Connected to actuator!")

    def send(self, message: str | bytes) -> None:
        """Send a message to the connected actuator."""
        if self._closed:
            raise RuntimeError("communicator is closed")
        if self._peer is None:
            raise RuntimeError("actuator is not connected")
        data = message.encode() if isinstance(message, str) else bytes(message)
        self._peer.sendall(data)
        log.info("Send: %s", message)

    def close(self) -> None:
        """Close the listening and the actuator sockets."""
        self._closed = True
        if self._peer is not None:
            self._peer.close()
        self._server.close()

    def __enter__(self) -> ActuatorCommunicator:
        return self

    def __exit__(self, *args) -> None:
        self.close()