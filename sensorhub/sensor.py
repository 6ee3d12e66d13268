"""TCP endpoint that accepts one sensor and keeps its latest reading."""

from __future__ import annotations

import logging
import socket
import threading

SENSOR_PORT = 9001
BUFFER_SIZE = 1024

log = logging.getLogger(__name__)


class SensorCommunicator:
    """Listens for a single sensor connection and stores the latest message it sends."""

    def __init__(self, port: int = SENSOR_PORT, host: str = "0.0.0.0") -> None:
        self._server = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
        try:
            self._server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            self._server.bind((host, port))
        except OSError:
            self._server.close()
            raise
        self.address = self._server.getsockname()
        self._peer: socket.socket | None = None
        self._data = ""
        self._lock = threading.Lock()
        self._running = threading.Event()
        self._thread: threading.Thread | None = None
        self._closed = False

    def connect(self) -> None:
        """Listen and block until a sensor connects."""
        if self._closed:
            raise RuntimeError("communicator is closed")
        self._server.listen(5)
        log.info("Listening for sensor")
        self._peer, _ = self._server.accept()
        log.info("Connected to sensor!")
        self._running.set()

    def receive_messages(self) -> None:
        """Start a background thread that keeps the most recent message."""
        if self._peer is None:
            raise RuntimeError("sensor is not connected")
        self._thread = threading.Thread(target=self._listen, args=(self._peer,), daemon=True)
        self._thread.start()

    def _listen(self, peer: socket.socket) -> None:
        while self._running.is_set():
            try:
                chunk = peer.recv(BUFFER_SIZE)
            except OSError:
                break
            if not chunk:
                break
            with self._lock:
                self._data = chunk.decode("utf-8", errors="replace")

    def read(self) -> str:
        """Return the latest message received from the sensor."""
        with self._lock:
            return self._data

    def close(self) -> None:
        """Stop receiving and close both sockets."""
        self._closed = True
        self._running.clear()
        if self._peer is not None:
            try:
                self._peer.shutdown(socket.SHUT_RDWR)
            except OSError:
                pass
            self._peer.close()
        self._server.close()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout=1.0)

    def __enter__(self) -> SensorCommunicator:
        return self

    def __exit__(self, *args) -> None:
        self.close()