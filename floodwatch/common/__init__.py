"""
Shared helpers for floodwatch (geometry, retry).
"""
