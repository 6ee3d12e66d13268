import contextlib
import json
import socket
import threading

from sensorhub.demos import main, run_actuator_demo, run_sensor_demo, sensor_message

HOST = "127.0.0.1"


@contextlib.contextmanager
def _peer(handler):
    """Listen on a free port; handle one connection in the background."""
    with socket.create_server((HOST, 0)) as server:
        server.settimeout(5)
        outcome = {}

        def serve():
            conn, _ = server.accept()
            with conn:
                outcome["value"] = handler(conn)

        worker = threading.Thread(target=serve, daemon=True)
        worker.start()
        yield server.getsockname()[1], outcome
        worker.join(timeout=5)


def _read_all(conn):
    data = b""
    while True:
        chunk = conn.recv(4096)
        if not chunk:
            return data.decode()
        data += chunk


def _send_on(conn):
    conn.sendall(b"ON")


def _split_objects(text):
    decoder = json.JSONDecoder()
    objects = []
    pos = 0
    while pos < len(text):
        obj, pos = decoder.raw_decode(text, pos)
        objects.append(obj)
    return objects


def test_sensor_message_format():
    assert sensor_message(42) == '{"temperature": 42, "humidity": 42}'


def test_sensor_message_is_json():
    assert json.loads(sensor_message(7)) == {"temperature": 7, "humidity": 7}


def test_run_sensor_demo_sends_limit_readings():
    with _peer(_read_all) as (port, outcome):
        sent = run_sensor_demo(HOST, port, 0, 3)
    assert sent == 3
    readings = _split_objects(outcome["value"])
    assert len(readings) == 3
    for reading in readings:
        assert reading["temperature"] == reading["humidity"]
        assert 0 <= reading["temperature"] < 100


def test_run_actuator_demo_collects_commands():
    with _peer(_send_on) as (port, _):
        messages = run_actuator_demo(HOST, port)
    assert "".join(messages) == "ON"


def test_main_sensor_returns_zero():
    with _peer(_read_all) as (port, outcome):
        argv = ["sensor", "--host", HOST, "--port", str(port), "--interval", "0", "--count", "2"]
        code = main(argv)
    assert code == 0
    assert len(_split_objects(outcome["value"])) == 2


def test_main_reports_connection_failure():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as idle:
        idle.bind((HOST, 0))
        port = idle.getsockname()[1]
        assert main(["actuator", "--host", HOST, "--port", str(port)]) == 1