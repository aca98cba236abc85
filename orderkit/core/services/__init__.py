"""
Core services for reordering sequences of items.
"""

from .ordering import OrderingService

__all__ = [
    "OrderingService",
]
