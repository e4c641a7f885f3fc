"""Event-driven, command-oriented building blocks for IoT sensors, actuators and devices on simulated pins."""

__version__ = "0.1.0"