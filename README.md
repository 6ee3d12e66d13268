# sensorhub

sensorhub is a small controller that sits between networked microcontrollers
and anything that speaks HTTP. Sensors and actuators connect to it over plain
TCP; clients read the latest sensor reading and send actuator commands through
a JSON API. It uses only the Python standard library.

## How it works

- A sensor connects to TCP port **9001** and streams JSON readings, for
  example `{"temperature": 42, "humidity": 42}`. The hub keeps only the most
  recent chunk it received (up to 1024 bytes); there is no message framing, so
  each reading should arrive in one piece.
- An actuator connects to TCP port **9002** and receives raw command strings.
- The HTTP API listens on `0.0.0.0:8080`.

On start-up the hub waits for one sensor and then one actuator to connect
before it begins serving HTTP requests. If accepting a device fails, the error
is logged and the hub carries on without it.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Running the hub

```
sensorhub
```

Options:

| Option            | Default   | Meaning                                  |
|-------------------|-----------|------------------------------------------|
| `--host`          | `0.0.0.0` | interface the HTTP API listens on        |
| `--port`          | `8080`    | HTTP port                                |
| `--device-host`   | `0.0.0.0` | interface sensors and actuators connect to |
| `--sensor-port`   | `9001`    | TCP port for the sensor                  |
| `--actuator-port` | `9002`    | TCP port for the actuator                |

Stop it with Ctrl-C; all sockets are closed on the way out.

## HTTP API

| Method | Path             | Response |
|--------|------------------|----------|
| GET    | `/test`          | `{"message":"Hello, World!"}` |
| GET    | `/sensor/<id>`   | Latest reading from sensor number `<id>`, re-encoded as compact JSON with sorted keys. An unknown `<id>` gives the body `Invalid sensor index` (status 200). If no reading has arrived yet, or the latest one is not valid JSON, the status is 500. |
| POST   | `/actuator/<id>` | Sends the raw request body to actuator `<id>` and echoes it back as `{"message": ...}`. An unknown `<id>` or a failed send is logged; the echo is returned either way. |

Any other path gives 404.

Examples:

```
curl http://localhost:8080/sensor/0
curl -X POST -d ON http://localhost:8080/actuator/0
```

## Demo devices

Two simulated devices are included so the hub can be tried without hardware.
Start the hub first, then, in separate terminals:

```
sensorhub-demo sensor
sensorhub-demo actuator
```

The demo sensor sends a random reading (`{"temperature": N, "humidity": N}`
with N from 0 to 99) once a second; the demo actuator prints every command it
receives until the hub disconnects.

Options for `sensorhub-demo sensor`: `--host` (default `127.0.0.1`),
`--port` (default `9001`), `--interval` in seconds (default `1.0`) and
`--count` to stop after that many readings (default: run until disconnected).
Options for `sensorhub-demo actuator`: `--host` (default `127.0.0.1`) and
`--port` (default `9002`). Both exit with status 1 if they cannot connect.

The same clients are available as `sensorhub.demos.run_sensor_demo()` and
`sensorhub.demos.run_actuator_demo()`; `sensor_message(value)` formats a demo
reading.

## Using it from Python

```python
from sensorhub.manager import ControllerManager
from sensorhub.server import create_server

manager = ControllerManager(9001, 9002, "0.0.0.0")
sensor = manager.add_sensor()      # blocks until a sensor connects
actuator = manager.add_actuator()  # blocks until an actuator connects

print(manager.sensor_data(sensor))
manager.send_actuator_command(actuator, "ON")

server = create_server(manager, "0.0.0.0", 8080)
try:
    server.serve_forever()
finally:
    server.server_close()
    manager.close()
```

`sensor_data` raises `IndexError` for an unknown sensor and `ValueError` when
the latest reading is not valid JSON. `send_actuator_command` raises
`IndexError` for an unknown actuator.

The lower-level `SensorCommunicator` (`connect`, `receive_messages`, `read`,
`close`) and `ActuatorCommunicator` (`connect`, `send`, `close`) classes in
`sensorhub.sensor` and `sensorhub.actuator` can also be used on their own;
both work as context managers and close their sockets on exit.

## Limitations

- Each device gets its own listening socket on the configured port, so in
  practice one sensor and one actuator are served at a time.
- Only the latest sensor reading is kept; there is no history or storage.
- The HTTP API has no authentication and no TLS.