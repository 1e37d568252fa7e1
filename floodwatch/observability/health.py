"""
HTTP endpoints for floodwatch.

This module implements health, readiness, metrics and info endpoints
for operational visibility, plus the query endpoints the dashboard
front end calls (search, focus, region lookups, route styling/paths).
"""

from typing import List, Optional
from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse, Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from pydantic import BaseModel
import time
from floodwatch.settings import Settings
from floodwatch.core.alerts import marker_style
from floodwatch.core.models import Alert, DashboardView, FocusRequest, LatLng, Route, RoutePath, RouteStyle, Selection, Viewport
from floodwatch.core.query import QueryFacade
from floodwatch.features.refresh import Refresher, RefreshResult
from floodwatch.features.route_paths import RoutePathService
from floodwatch.observability.logging_setup import get_logger

log = get_logger("floodwatch.http")


class CustomPathRequest(BaseModel):
    start: LatLng
    end: LatLng


def create_app(settings: Settings,
               facade: QueryFacade,
               refresher: Optional[Refresher] = None,
               paths: Optional[RoutePathService] = None) -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    app = FastAPI(
        title=settings.observability.service_name,
        version=settings.observability.build_version,
        description="Flood alert & evacuation route query service"
    )

    start_time = time.time()
    service = settings.observability.service_name

    def _stamp(status: str, **extra) -> dict:
        return {"status": status, "service": service, "timestamp": time.time(), **extra}

    @app.get("/health")
    async def health():
        """프로세스 생존 확인"""
        return _stamp("ok")

    @app.get("/ready")
    async def ready():
        """레디니스 체크 (가제티어가 비어 있으면 503)"""
        if len(facade.gazetteer) == 0:
            return JSONResponse(_stamp("not_ready", reason="gazetteer empty"), status_code=503)
        return _stamp("ready", regions=len(facade.gazetteer))

    @app.get("/metrics")
    async def metrics():
        """Prometheus 텍스트 포맷 노출"""
        if not settings.observability.metrics_enabled:
            raise HTTPException(status_code=503, detail="Metrics disabled")
        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.get("/info")
    async def info():
        obs = settings.observability
        return {
            "service": service,
            "version": obs.build_version,
            "build_date": obs.build_date,
            "uptime_seconds": int(time.time() - start_time),
            "metrics_enabled": obs.metrics_enabled,
            "log_level": obs.log_level,
            "regions": len(facade.gazetteer),
            "alerts": len(facade.alerts),
            "routes": len(facade.routes),
        }

    @app.get("/regions", response_model=List[str])
    async def regions():
        return facade.regions()

    @app.get("/regions/{name}/localities", response_model=List[str])
    async def localities(name: str):
        """구역 로컬리티 (알 수 없는 구역은 빈 목록)"""
        return facade.localities(name)

    @app.get("/alerts", response_model=List[Alert])
    async def search_alerts(text: str = "",
                            region: Optional[str] = None,
                            severity: Optional[List[str]] = Query(default=None)):
        return facade.search(text, region, severity)

    @app.get("/alerts/{alert_id}/marker")
    async def alert_marker(alert_id: str):
        alert = facade.alerts.get(alert_id)
        if alert is None:
            raise HTTPException(status_code=404, detail=f"alert not found: {alert_id}")
        return marker_style(alert)

    @app.get("/routes", response_model=List[Route])
    async def search_routes(text: str = "", region: Optional[str] = None):
        return facade.search_routes(text, region)

    @app.get("/routes/stats")
    async def route_stats():
        return facade.routes.status_counts()

    @app.get("/routes/{route_id}/style", response_model=RouteStyle)
    async def route_style(route_id: str):
        style = facade.route_style(route_id)
        if style is None:
            raise HTTPException(status_code=404, detail=f"route not found: {route_id}")
        return style

    @app.post("/routes/{route_id}/path", response_model=RoutePath)
    async def route_path(route_id: str):
        """등록된 경로의 실제 경로선을 라우팅 협력자에게 요청합니다."""
        if paths is None:
            raise HTTPException(status_code=503, detail="routing disabled")
        if facade.routes.get(route_id) is None:
            raise HTTPException(status_code=404, detail=f"route not found: {route_id}")
        result = await paths.path_for(route_id)
        if result is None:
            raise HTTPException(status_code=502, detail="routing collaborator returned no path")
        return result

    @app.post("/paths", response_model=RoutePath)
    async def custom_path(payload: CustomPathRequest):
        """지도에서 고른 시작/끝 지점 사이의 경로선"""
        if paths is None:
            raise HTTPException(status_code=503, detail="routing disabled")
        result = await paths.custom_path(payload.start, payload.end)
        if result is None:
            raise HTTPException(status_code=502, detail="routing collaborator returned no path")
        return result

    @app.post("/focus", response_model=Viewport)
    async def focus(request: FocusRequest):
        return facade.focus(request.kind, request.target, navigate=request.navigate, zoom=request.zoom)

    @app.post("/view", response_model=DashboardView)
    async def view(selection: Optional[Selection] = None):
        return facade.view(selection or Selection())

    @app.post("/refresh", response_model=RefreshResult)
    async def refresh():
        """피드에서 카탈로그를 즉시 갱신합니다."""
        if refresher is None:
            raise HTTPException(status_code=400, detail="no feed configured")
        try:
            return await refresher.refresh_once()
        except Exception as e:
            log.error(f"수동 갱신 실패 error:{str(e)}")
            raise HTTPException(status_code=502, detail=f"Refresh failed: {str(e)}")

    @app.get("/")
    async def root():
        return {
            "service": service,
            "version": settings.observability.build_version,
            "endpoints": {name: f"/{name}" for name in (
                "health", "ready", "metrics", "info", "regions",
                "alerts", "routes", "focus", "view", "refresh", "paths",
            )},
        }

    return app
