"""GUI package for BeakerLab."""

from beakerlab.gui.monitor import MonitorSession, PourInputs, PourLog

__all__ = ["MonitorSession", "PourInputs", "PourLog"]
