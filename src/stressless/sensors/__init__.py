from stressless.sensors.base import BaseSensor
from stressless.sensors.simulated import SimulatedSensor

__all__ = ["BaseSensor", "SimulatedSensor"]
