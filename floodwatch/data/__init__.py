"""
Built-in reference data for floodwatch.
"""
