"""
Port interfaces for floodwatch.

This module defines the port interfaces (Protocols) that define
the contracts between the core engine and external collaborators.
"""

from .routing import RoutingPort
from .feed import FeedPort

__all__ = ["RoutingPort", "FeedPort"]
