"""
Observability for floodwatch: loguru logging, Prometheus metrics
and the HTTP surface (health, metrics and query endpoints).
"""
