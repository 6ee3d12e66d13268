"""HTTP API exposing sensor readings and actuator commands."""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import urlsplit

from sensorhub.actuator import ACTUATOR_PORT
from sensorhub.manager import ControllerManager
from sensorhub.sensor import SENSOR_PORT

HTTP_PORT = 8080
JSON_TYPE = "application/json"

_SENSOR_ROUTE = re.compile(r"/sensor/(\d+)")
_ACTUATOR_ROUTE = re.compile(r"/actuator/(\d+)")

log = logging.getLogger(__name__)


def _dump(value) -> str:
    return json.dumps(value, separators=(",", ":"), sort_keys=True, ensure_ascii=False)


class _Handler(BaseHTTPRequestHandler):
    server: _HubServer

    def _respond(self, status: HTTPStatus, body: str, content_type: str = JSON_TYPE) -> None:
        payload = body.encode("utf-8")
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def _not_found(self) -> None:
        self._respond(HTTPStatus.NOT_FOUND, "", "text/plain")

    def do_GET(self) -> None:
        path = urlsplit(self.path).path
        if path == "/test":
            self._respond(HTTPStatus.OK, _dump({"message": "Hello, World!"}))
            return
        match = _SENSOR_ROUTE.fullmatch(path)
        if match is None:
            self._not_found()
            return
        try:
            reading = self.server.manager.sensor_data(int(match.group(1)))
        except IndexError:
            self._respond(HTTPStatus.OK, "Invalid sensor index")
            return
        except ValueError as exc:
            log.error("Unreadable sensor data: %s", exc)
            self._respond(HTTPStatus.INTERNAL_SERVER_ERROR, "", "text/plain")
            return
        self._respond(HTTPStatus.OK, _dump(reading))

    def do_POST(self) -> None:
        match = _ACTUATOR_ROUTE.fullmatch(urlsplit(self.path).path)
        if match is None:
            self._not_found()
            return
        length = int(self.headers.get("Content-Length") or 0)
        message = self.rfile.read(length).decode("utf-8", errors="replace")
        try:
            self.server.manager.send_actuator_command(int(match.group(1)), message)
        except IndexError as exc:
            log.warning("%s", exc)
        except (OSError, RuntimeError) as exc:
            log.error("Failed to send message: %s", exc)
        self._respond(HTTPStatus.OK, _dump({"message": message}))

    def log_message(self, format: str, *args) -> None:
        log.info("%s - %s", self.address_string(), format % args)


class _HubServer(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self, address: tuple[str, int], manager: ControllerManager) -> None:
        self.manager = manager
        super().__init__(address, _Handler)


def create_server(
    manager: ControllerManager, host: str = "0.0.0.0", port: int = HTTP_PORT
) -> ThreadingHTTPServer:
    """Build an HTTP server bound to ``host:port`` that serves ``manager``."""
    return _HubServer((host, port), manager)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="sensorhub", description="Sensor and actuator API server.")
    parser.add_argument("--host", default="0.0.0.0", help="HTTP interface")
    parser.add_argument("--port", type=int, default=HTTP_PORT, help="HTTP port")
    parser.add_argument("--device-host", default="0.0.0.0", help="interface devices connect to")
    parser.add_argument("--sensor-port", type=int, default=SENSOR_PORT)
    parser.add_argument("--actuator-port", type=int, default=ACTUATOR_PORT)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    manager = ControllerManager(args.sensor_port, args.actuator_port, args.device_host)
    try:
        for add in (manager.add_sensor, manager.add_actuator):
            try:
                add()
            except OSError as exc:
                log.error("Device connection failed: %s", exc)
        server = create_server(manager, args.host, args.port)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
        finally:
            server.server_close()
    finally:
        manager.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())