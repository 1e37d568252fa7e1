"""
Evacuation route registry for floodwatch.

Holds route records keyed by id, filters them by text and district,
and derives the presentation fields that are never stored: status
style, midpoint and the request handed to the routing collaborator.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from .filters import matches_region, matches_text
from .models import InvalidRecord, LatLng, PathRequest, Route, RouteStyle, ROUTE_STATUSES
from .normalize import to_route
from .snapshot import SnapshotStore
from floodwatch.common import geo
from floodwatch.observability import metrics

# 상태별 스타일 테이블
STATUS_STYLES: Dict[str, RouteStyle] = {
    "Open": RouteStyle(color="green", dash=None, opacity=1.0),
    "Warning": RouteStyle(color="orange", dash="10, 10", opacity=1.0),
    "Closed": RouteStyle(color="red", dash=None, opacity=0.5),
}


@dataclass(frozen=True)
class RouteQuery:
    """경로 검색 조건"""
    text: str = ""
    region: Optional[str] = None

    def matches(self, route: Route) -> bool:
        return (
            matches_text(self.text, route.name, route.district)
            and matches_region(self.region, route.district)
        )


def classify(route: Route) -> RouteStyle:
    """상태에 따른 색상/대시/투명도 (순수 함수)"""
    return STATUS_STYLES[route.status]


def midpoint(route: Route) -> LatLng:
    """시작점과 끝점의 산술 평균"""
    return geo.midpoint(route.start_point, route.end_point)


def path_request(route: Route) -> PathRequest:
    """라우팅 협력자에게 넘길 (시작, 끝, 스타일 힌트)"""
    return PathRequest(start=route.start_point, end=route.end_point, style_hint=classify(route).color)


class RouteRegistry(SnapshotStore[Route]):
    """대피 경로 레지스트리"""

    kind = "route"

    def _coerce(self, record: Any) -> Route:
        if isinstance(record, Route):
            return record
        if isinstance(record, Mapping):
            return to_route(record)
        raise InvalidRecord(f"unsupported record type {type(record).__name__}", kind=self.kind)

    def search(self, query: RouteQuery) -> List[Route]:
        """조건에 맞는 경로를 삽입 순서대로 반환합니다."""
        snapshot = self._snapshot
        with metrics.search_seconds.labels(kind=self.kind).time():
            return [route for route in snapshot.values() if query.matches(route)]

    def status_counts(self) -> Dict[str, int]:
        """상태별 경로 수 (모든 상태 키 포함)"""
        counts = Counter(route.status for route in self._snapshot.values())
        return {status: counts.get(status, 0) for status in ROUTE_STATUSES}

    classify = staticmethod(classify)
    midpoint = staticmethod(midpoint)
    path_request = staticmethod(path_request)
