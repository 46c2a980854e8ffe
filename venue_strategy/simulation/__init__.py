"""In-process fund and venue used to exercise strategies without a chain."""
from .fund import SimulatedFund
from .venue import SimulatedVenue

__all__ = ["SimulatedFund", "SimulatedVenue"]
