"""Relay sensor readings and actuator commands between TCP devices and an HTTP API."""

__version__ = "0.1.0"