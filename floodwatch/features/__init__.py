"""
Features built on top of the floodwatch core: the demo feed,
the refresh coordinator and route path requests.
"""
