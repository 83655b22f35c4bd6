# Notifications Package
from .simulated_dispatcher import SimulatedEmailDispatcher

__all__ = ["SimulatedEmailDispatcher"]
