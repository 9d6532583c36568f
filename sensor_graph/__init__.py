"""Sensor graph server: a rolling window of readings served over HTTP"""

__version__ = "1.0.0"
