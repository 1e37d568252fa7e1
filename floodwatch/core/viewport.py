"""
Viewport resolution for floodwatch.

Translates a selection (region, alert, route, point) into the map
center and zoom level consumed by the map-rendering collaborator.
Every function is total: unknown or sentinel input falls back to the
configured country-wide view.
"""

from typing import Optional

from .filters import is_sentinel
from .models import Alert, LatLng, Region, Route, Viewport
from .routes import midpoint
from floodwatch.common.geo import validate_coordinates
from floodwatch.settings import ViewportSettings


class ViewportResolver:
    """선택 → 지도 뷰포트 변환기"""

    def __init__(self, settings: Optional[ViewportSettings] = None):
        self.settings = settings or ViewportSettings()

    def default(self) -> Viewport:
        """국가(주) 전체 뷰"""
        return Viewport(center=self.settings.country_center, zoom=self.settings.country_zoom)

    def focus_on_region(self, region: Optional[Region]) -> Viewport:
        if region is None or is_sentinel(region.name):
            return self.default()
        return Viewport(center=region.coordinates, zoom=self.settings.region_zoom)

    def focus_on_point(self, coordinates: LatLng, zoom: int) -> Viewport:
        if not validate_coordinates(*coordinates) or zoom <= 0:
            return self.default()
        return Viewport(center=coordinates, zoom=zoom)

    def focus_on_alert(self, alert: Alert, navigate: bool = False) -> Viewport:
        """경보 상세 보기(detail) 또는 길안내(navigate) 줌"""
        zoom = self.settings.navigate_zoom if navigate else self.settings.detail_zoom
        return self.focus_on_point(alert.coordinates, zoom)

    def focus_on_user(self, coordinates: LatLng, locate: bool = True) -> Viewport:
        """
        사용자 위치로 이동합니다.

        Args:
            coordinates: 사용자 좌표
            locate: True 면 '내 위치' 버튼 줌, False 면 최초 위치 수신 시 자동 센터링 줌
        """
        zoom = self.settings.user_locate_zoom if locate else self.settings.user_center_zoom
        return self.focus_on_point(coordinates, zoom)

    def focus_on_route(self, route: Route) -> Viewport:
        return Viewport(center=midpoint(route), zoom=self.settings.route_zoom)

    def focus_on_route_start(self, route: Route) -> Viewport:
        return Viewport(center=route.start_point, zoom=self.settings.route_start_zoom)
