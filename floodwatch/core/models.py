"""
Core domain models for floodwatch.

This module defines the core domain models using Pydantic v2
for type safety and validation. Records are frozen: catalogs
replace them, they never mutate them.
"""

from typing import Annotated, Any, List, Literal, Optional, Tuple, Union
from pydantic import AfterValidator, BaseModel, ConfigDict, Field

from floodwatch.common.geo import validate_coordinates

# 심각도 타입 정의 (긴급도 오름차순)
Severity = Literal["Low", "Medium", "High", "Critical"]
SEVERITIES: Tuple[str, ...] = ("Low", "Medium", "High", "Critical")
SEVERITY_ORDER = {name: rank for rank, name in enumerate(SEVERITIES)}

# 경로 운행 상태
RouteStatus = Literal["Open", "Warning", "Closed"]
ROUTE_STATUSES: Tuple[str, ...] = ("Open", "Warning", "Closed")

FocusKind = Literal["region", "alert", "route", "point"]

LatLng = Tuple[float, float]

UNKNOWN_DISTRICT = "Unknown"


class InvalidRecord(ValueError):
    """수집 단계에서 거부된 레코드"""

    def __init__(self, reason: str, record_id: Optional[str] = None, kind: str = "record"):
        self.reason = reason
        self.record_id = record_id
        self.kind = kind
        label = f"{kind} {record_id!r}" if record_id else kind
        super().__init__(f"invalid {label}: {reason}")


def _checked_coordinates(value: LatLng) -> LatLng:
    lat, lng = value
    if not validate_coordinates(lat, lng):
        raise ValueError(f"coordinates out of range or not finite: ({lat}, {lng})")
    return value


Coordinates = Annotated[LatLng, AfterValidator(_checked_coordinates)]


class Region(BaseModel):
    """행정 구역 (가제티어 항목)"""
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    coordinates: Coordinates
    localities: Tuple[str, ...] = ()


class Alert(BaseModel):
    """위치 기반 재난 경보"""
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    type: str
    location: str
    district: str = UNKNOWN_DISTRICT
    severity: Severity
    time: str = ""
    coordinates: Coordinates
    description: str = ""


class Route(BaseModel):
    """대피 경로"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(min_length=1)
    name: str
    status: RouteStatus
    updated: str = ""
    start_point: Coordinates = Field(alias="startPoint")
    end_point: Coordinates = Field(alias="endPoint")
    district: str = UNKNOWN_DISTRICT


class RouteStyle(BaseModel):
    """경로 상태별 렌더링 힌트"""
    model_config = ConfigDict(frozen=True)

    color: str
    dash: Optional[str] = None
    opacity: float = 1.0


class AlertMarker(BaseModel):
    """경보 마커 렌더링 힌트"""
    model_config = ConfigDict(frozen=True)

    color: str
    radius_m: int


class PathRequest(BaseModel):
    """라우팅 협력자에게 넘기는 요청 (시작점, 끝점, 스타일 힌트)"""
    model_config = ConfigDict(frozen=True)

    start: LatLng
    end: LatLng
    style_hint: str


class RoutePath(BaseModel):
    """라우팅 협력자가 돌려준 경로. path 는 해석하지 않는다."""
    route_id: Optional[str] = None
    request: PathRequest
    path: Any


class Viewport(BaseModel):
    """지도 중심 + 줌 레벨"""
    model_config = ConfigDict(frozen=True)

    center: LatLng
    zoom: int = Field(gt=0)


class RejectedRecord(BaseModel):
    index: int
    record_id: Optional[str] = None
    reason: str


class IngestReport(BaseModel):
    """일괄 수집 결과"""
    kind: str
    accepted: int = 0
    rejected: int = 0
    errors: List[RejectedRecord] = Field(default_factory=list)


class FocusRequest(BaseModel):
    """뷰포트 이동 요청"""
    kind: FocusKind
    target: Union[LatLng, str, None] = None
    navigate: bool = False
    zoom: Optional[int] = Field(default=None, gt=0)


class Selection(BaseModel):
    """프레젠테이션 계층의 현재 선택 상태"""
    text: str = ""
    region: Optional[str] = None
    severities: Optional[List[str]] = None
    focus: Optional[FocusRequest] = None


class DashboardView(BaseModel):
    """질의 파사드의 단일 결과 객체"""
    alerts: List[Alert]
    routes: List[Route]
    viewport: Viewport
