"""
Gazetteer reference-data loaders for floodwatch.
"""

from .loader import load_regions

__all__ = ["load_regions"]
