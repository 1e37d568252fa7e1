"""
Adapters for floodwatch.

This module contains the concrete implementations of port interfaces
and loaders that handle external I/O.
"""

from .routing import OsrmClient
from .gazetteer import load_regions

__all__ = ["OsrmClient", "load_regions"]
