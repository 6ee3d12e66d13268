"""Registry of connected sensors and actuators addressed by index."""

from __future__ import annotations

import json
import logging
from typing import Any

from sensorhub.actuator import ACTUATOR_PORT, ActuatorCommunicator
from sensorhub.sensor import SENSOR_PORT, SensorCommunicator

log = logging.getLogger(__name__)


class ControllerManager:
    """Coordinates sensor and actuator connections.

    Every sensor is accepted on ``sensor_port`` and every actuator on
    ``actuator_port``; devices are addressed by the order they were added in.
    """

    def __init__(
        self,
        sensor_port: int = SENSOR_PORT,
        actuator_port: int = ACTUATOR_PORT,
        host: str = "0.0.0.0",
    ) -> None:
        self.sensor_port = sensor_port
        self.actuator_port = actuator_port
        self.host = host
        self._sensors: list[SensorCommunicator] = []
        self._actuators: list[ActuatorCommunicator] = []

    def add_sensor(self) -> int:
        """Wait for a sensor, start receiving from it and return its index."""
        sensor = SensorCommunicator(self.sensor_port, self.host)
        try:
            sensor.connect()
            sensor.receive_messages()
        except BaseException:
            log.error("Failed to connect to the sensor")
            sensor.close()
            raise
        self._sensors.append(sensor)
        return len(self._sensors) - 1

    def add_actuator(self) -> int:
        """Wait for an actuator to connect and return its index."""
        actuator = ActuatorCommunicator(self.actuator_port, self.host)
        try:
            actuator.connect()
        except BaseException:
            log.error("Failed to connect to actuator")
            actuator.close()
            raise
        self._actuators.append(actuator)
        return len(self._actuators) - 1

    def sensor_data(self, index: int) -> Any:
        """Return the latest reading of a sensor, decoded from JSON.

        Raises IndexError for an unknown sensor and ValueError when the
        latest message is not valid JSON (including when none has arrived).
        """
        if not 0 <= index < len(self._sensors):
            raise IndexError("Invalid sensor index")
        return json.loads(self._sensors[index].read())

    def send_actuator_command(self, index: int, message: str | bytes) -> None:
        """Send a command to an actuator; raises IndexError for an unknown one."""
        if not 0 <= index < len(self._actuators):
            raise IndexError("Invalid actuator index")
        self._actuators[index].send(message)

    def close(self) -> None:
        """Close every device connection and forget the devices."""
        for device in [*self._sensors, *self._actuators]:
            device.close()
        self._sensors.clear()
        self._actuators.clear()