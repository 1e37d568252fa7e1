"""
Core domain models and pure query logic for floodwatch.

This module contains the domain models, catalogs and query logic
that are independent of external I/O and infrastructure concerns.
"""

from .models import (
    Alert, Region, Route, RouteStyle, Viewport, IngestReport, InvalidRecord,
    Selection, FocusRequest, DashboardView, Severity, RouteStatus,
)
from .filters import ALL_DISTRICTS, ALL_LOCALITIES
from .gazetteer import Gazetteer
from .alerts import AlertCatalog, AlertQuery
from .routes import RouteRegistry, RouteQuery, classify, midpoint
from .viewport import ViewportResolver
from .query import QueryFacade

__all__ = [
    "Alert", "Region", "Route", "RouteStyle", "Viewport", "IngestReport", "InvalidRecord",
    "Selection", "FocusRequest", "DashboardView", "Severity", "RouteStatus",
    "ALL_DISTRICTS", "ALL_LOCALITIES",
    "Gazetteer", "AlertCatalog", "AlertQuery", "RouteRegistry", "RouteQuery",
    "classify", "midpoint", "ViewportResolver", "QueryFacade",
]
