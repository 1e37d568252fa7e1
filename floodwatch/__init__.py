"""
floodwatch - geospatial alert & evacuation route engine
for flood-emergency situational-awareness dashboards.
"""

__version__ = "0.2.0"
