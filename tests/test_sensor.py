import socket
import threading
import time

import pytest

from sensorhub.sensor import SensorCommunicator

HOST = "127.0.0.1"


def _connect_when_listening(port, timeout=5.0):
    deadline = time.monotonic() + timeout
    while True:
        try:
            return socket.create_connection((HOST, port), timeout=2)
        except ConnectionRefusedError:
            if time.monotonic() > deadline:
                raise
            time.sleep(0.01)


def _wait_for(comm, expected, timeout=5.0):
    deadline = time.monotonic() + timeout
    while comm.read() != expected and time.monotonic() < deadline:
        time.sleep(0.01)
    return comm.read()


@pytest.fixture
def comm():
    with SensorCommunicator(port=0, host=HOST) as communicator:
        yield communicator


@pytest.fixture
def client(comm):
    worker = threading.Thread(target=comm.connect)
    worker.start()
    sock = _connect_when_listening(comm.address[1])
    worker.join(timeout=5)
    with sock:
        yield sock


def test_read_is_empty_before_data(comm):
    assert comm.read() == ""


@pytest.mark.parametrize(
    "messages",
    [
        ['{"temperature": 5, "humidity": 5}'],
        ["first", "second"],
    ],
)
def test_keeps_latest_message(comm, client, messages):
    comm.receive_messages()
    for message in messages:
        client.sendall(message.encode())
        assert _wait_for(comm, message) == message


def test_receive_before_connect_raises(comm):
    with pytest.raises(RuntimeError):
        comm.receive_messages()


def test_connect_after_close_raises():
    communicator = SensorCommunicator(port=0, host=HOST)
    communicator.close()
    with pytest.raises(RuntimeError):
        communicator.connect()


def test_bad_host_raises():
    with pytest.raises(OSError):
        SensorCommunicator(port=0, host="256.1.1.1")


def test_binds_requested_host(comm):
    assert comm.address[0] == HOST
    assert comm.address[1] > 0