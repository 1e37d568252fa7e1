"""
Routing adapters for floodwatch.
"""

from .osrm_client import OsrmClient

__all__ = ["OsrmClient"]
