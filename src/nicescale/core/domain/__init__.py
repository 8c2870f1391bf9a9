"""
Domain models and value objects.

Contains the tick request model and its dispatch to the tick algorithms.
"""

from nicescale.core.domain.ticks import TickMode, TickRequest, compute_ticks

__all__ = [
    "TickMode",
    "TickRequest",
    "compute_ticks",
]
