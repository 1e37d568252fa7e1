"""
Route path requests for floodwatch.

Hands (start, end, style hint) to the routing collaborator for a
registered route or for an ad-hoc start/end pair picked on the map,
and passes back whatever path it returns without interpreting it.
"""

from typing import Optional

from floodwatch.core.models import LatLng, PathRequest, RoutePath
from floodwatch.core.routes import RouteRegistry, path_request
from floodwatch.ports.routing import RoutingPort
from floodwatch.observability import metrics
from floodwatch.observability.logging_setup import get_logger

log = get_logger("floodwatch.route_paths")

# 사용자 지정 경로 색상
CUSTOM_ROUTE_STYLE = "blue"


class RoutePathService:
    """경로 경로선 요청 서비스"""

    def __init__(self, registry: RouteRegistry, router: RoutingPort):
        self.registry = registry
        self.router = router

    async def _request(self, request: PathRequest, route_id: Optional[str] = None) -> Optional[RoutePath]:
        path = await self.router.compute_path(request.start, request.end, request.style_hint)
        if not path:
            metrics.routing_requests.labels(outcome="empty").inc()
            log.warning(f"라우팅 결과 없음 route:{route_id} start:{request.start} end:{request.end}")
            return None
        metrics.routing_requests.labels(outcome="ok").inc()
        return RoutePath(route_id=route_id, request=request, path=path)

    async def path_for(self, route_id: str) -> Optional[RoutePath]:
        """
        등록된 경로의 실제 경로선을 요청합니다.

        Args:
            route_id: 경로 id

        Returns:
            RoutePath, 경로가 없거나 라우팅 실패 시 None
        """
        route = self.registry.get(route_id)
        if route is None:
            return None
        return await self._request(path_request(route), route.id)

    async def custom_path(self, start: LatLng, end: LatLng) -> Optional[RoutePath]:
        """지도에서 고른 두 지점 사이의 경로선을 요청합니다."""
        request = PathRequest(start=start, end=end, style_hint=CUSTOM_ROUTE_STYLE)
        return await self._request(request)
