"""
Query facade for floodwatch.

The single entry point the presentation layer calls. It owns no state:
every call is a pure function of its arguments plus the current
gazetteer, alert catalog and route registry contents.
"""

from typing import Iterable, List, Optional, Sequence, Union

from .alerts import AlertCatalog, AlertQuery
from .gazetteer import Gazetteer
from .models import Alert, DashboardView, LatLng, Route, RouteStyle, Selection, Viewport
from .routes import RouteQuery, RouteRegistry, classify
from .viewport import ViewportResolver
from floodwatch.settings import SearchSettings
from floodwatch.observability.logging_setup import get_logger

log = get_logger("floodwatch.query")


class QueryFacade:
    """검색 + 뷰포트 질의 파사드"""

    def __init__(self,
                 gazetteer: Gazetteer,
                 alerts: AlertCatalog,
                 routes: RouteRegistry,
                 resolver: Optional[ViewportResolver] = None,
                 search_settings: Optional[SearchSettings] = None):
        """
        초기화합니다.

        Args:
            gazetteer: 구역 참조 테이블
            alerts: 경보 카탈로그
            routes: 경로 레지스트리
            resolver: 뷰포트 변환기
            search_settings: 검색 기본값 (심각도 미지정 시 적용할 집합)
        """
        self.gazetteer = gazetteer
        self.alerts = alerts
        self.routes = routes
        self.resolver = resolver or ViewportResolver()
        self.search_settings = search_settings or SearchSettings()

    def search(self,
               text: str = "",
               region: Optional[str] = None,
               severities: Optional[Iterable[str]] = None) -> List[Alert]:
        """
        경보를 검색합니다.

        Args:
            text: 위치/구역/유형 대상 검색어
            region: 구역 이름 또는 "All Districts"
            severities: 포함할 심각도. None 이면 설정 기본값, 빈 목록이면 결과 없음

        Returns:
            삽입 순서를 유지한 경보 목록
        """
        if severities is None:
            severities = self.search_settings.default_severities
        query = AlertQuery(text=text or "", region=region, severities=frozenset(severities))
        return self.alerts.search(query)

    def search_routes(self, text: str = "", region: Optional[str] = None) -> List[Route]:
        return self.routes.search(RouteQuery(text=text or "", region=region))

    def focus(self,
              kind: str,
              target: Union[LatLng, Sequence[float], str, None] = None,
              *,
              navigate: bool = False,
              zoom: Optional[int] = None) -> Viewport:
        """
        선택 대상을 뷰포트로 변환합니다. 알 수 없는 대상은 기본 뷰.

        Args:
            kind: "region" | "alert" | "route" | "point"
            target: 구역 이름, 경보/경로 id 또는 좌표
            navigate: 길안내 줌 사용 여부 (alert, route)
            zoom: point 에 대한 명시 줌
        """
        resolver = self.resolver

        if kind == "region":
            region_name = target if isinstance(target, str) else None
            return resolver.focus_on_region(self.gazetteer.find_region(region_name))

        if kind == "alert":
            alert = self.alerts.get(target) if isinstance(target, str) else None
            if alert is None:
                return resolver.default()
            return resolver.focus_on_alert(alert, navigate=navigate)

        if kind == "route":
            route = self.routes.get(target) if isinstance(target, str) else None
            if route is None:
                return resolver.default()
            if navigate:
                return resolver.focus_on_route_start(route)
            return resolver.focus_on_route(route)

        if kind == "point":
            if isinstance(target, str):
                return resolver.default()
            try:
                lat, lng = float(target[0]), float(target[1])
            except (TypeError, ValueError, IndexError):
                log.debug(f"잘못된 좌표 포커스 요청 target:{target!r}")
                return resolver.default()
            if zoom is not None:
                return resolver.focus_on_point((lat, lng), zoom)
            return resolver.focus_on_user((lat, lng))

        log.debug(f"알 수 없는 포커스 종류 kind:{kind}")
        return resolver.default()

    def view(self, selection: Selection) -> DashboardView:
        """선택 상태 전체를 한 번에 평가합니다."""
        alerts = self.search(selection.text, selection.region, selection.severities)
        routes = self.search_routes(selection.text, selection.region)

        if selection.focus is not None:
            f = selection.focus
            viewport = self.focus(f.kind, f.target, navigate=f.navigate, zoom=f.zoom)
        else:
            viewport = self.focus("region", selection.region)

        return DashboardView(alerts=alerts, routes=routes, viewport=viewport)

    def regions(self) -> List[str]:
        return self.gazetteer.all_region_names()

    def localities(self, region: Optional[str] = None) -> List[str]:
        return self.gazetteer.localities_of(region)

    def route_style(self, route_id: str) -> Optional[RouteStyle]:
        route = self.routes.get(route_id)
        return classify(route) if route is not None else None
