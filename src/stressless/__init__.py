"""StressLess — personal stress tracking from a short survey plus sensor data."""

__version__ = "0.1.0"
