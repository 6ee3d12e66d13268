"""Stand-in sensor and actuator clients for trying out the hub."""

from __future__ import annotations

import argparse
import random
import socket
import sys
import time

LOCAL_HOST = "127.0.0.1"
SENSOR_PORT = 9001
ACTUATOR_PORT = 9002
BUFFER_SIZE = 4096


def sensor_message(value: int) -> str:
    """Format a reading the way the demo sensor reports it."""
    return f'{{"temperature": {value}, "humidity": {value}}}'


def run_sensor_demo(
    host: str = LOCAL_HOST,
    port: int = SENSOR_PORT,
    interval: float = 1.0,
    limit: int | None = None,
) -> int:
    """Send random readings to the hub; return how many were sent."""
    sent = 0
    with socket.create_connection((host, port)) as conn:
        print(f"Connected to server at {host}:{port}")
        while limit is None or sent < limit:
            message = sensor_message(random.randrange(100))
            print(f"Message: {message}")
            try:
                conn.sendall(message.encode())
            except OSError:
                print("Disconnected from client")
                break
            sent += 1
            if limit is None or sent < limit:
                time.sleep(interval)
    return sent


def run_actuator_demo(host: str = LOCAL_HOST, port: int = ACTUATOR_PORT) -> list[str]:
    """Print every command from the hub until it disconnects; return them."""
    received = []
    with socket.create_connection((host, port)) as conn:
        print(f"Connected to server at {host}:{port}")
        while True:
            try:
                chunk = conn.recv(BUFFER_SIZE)
            except OSError:
                break
            if not chunk:
                break
            text = chunk.decode("utf-8", errors="replace")
            print(f"Message from client: {text}")
            received.append(text)
    return received


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="sensorhub-demo", description="Demo sensor and actuator clients.")
    sub = parser.add_subparsers(dest="role", required=True)

    sensor = sub.add_parser("sensor", help="send random readings")
    sensor.add_argument("--host", default=LOCAL_HOST)
    sensor.add_argument("--port", type=int, default=SENSOR_PORT)
    sensor.add_argument("--interval", type=float, default=1.0)
    sensor.add_argument("--count", type=int, default=None)

    actuator = sub.add_parser("actuator", help="print received commands")
    actuator.add_argument("--host", default=LOCAL_HOST)
    actuator.add_argument("--port", type=int, default=ACTUATOR_PORT)

    args = parser.parse_args(argv)
    try:
        if args.role == "sensor":
            run_sensor_demo(args.host, args.port, args.interval, args.count)
        else:
            run_actuator_demo(args.host, args.port)
    except OSError as exc:
        print(f"Connection failed: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())