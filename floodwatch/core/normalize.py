"""
Normalization functions for floodwatch.

This module contains pure functions for converting raw feed payloads
(manual entry, partner feeds, the demo producer) into validated
domain models. Anything that does not validate raises InvalidRecord;
values are never coerced into a different enum member.
"""

from datetime import datetime
from typing import Any, Mapping, Optional, TYPE_CHECKING

from pydantic import ValidationError

from .models import Alert, InvalidRecord, LatLng, Region, Route, UNKNOWN_DISTRICT
from floodwatch.observability.logging_setup import get_logger

if TYPE_CHECKING:
    from .gazetteer import Gazetteer

log = get_logger("floodwatch.normalize")


def _first(raw: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return value
    return None


def _coordinates(raw: Mapping[str, Any], *keys: str) -> Optional[LatLng]:
    # [lat, lng] 배열 우선, 없으면 lat/lng 개별 필드
    value = _first(raw, *keys)
    if value is not None:
        return value
    lat = _first(raw, "lat", "latitude")
    lng = _first(raw, "lng", "lon", "longitude")
    if lat is None or lng is None:
        return None
    return (lat, lng)


def _reason(e: ValidationError) -> str:
    err = e.errors()[0]
    loc = ".".join(str(p) for p in err.get("loc", ()))
    return f"{loc}: {err.get('msg')}" if loc else str(err.get("msg"))


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def to_alert(raw: Mapping[str, Any], gazetteer: Optional["Gazetteer"] = None) -> Alert:
    """
    원시 경보 페이로드를 Alert 로 변환합니다.

    Args:
        raw: 원시 딕셔너리
        gazetteer: 지정되면 district 가 없는 경보를 가장 가까운 구역으로 해석

    Returns:
        검증된 Alert

    Raises:
        InvalidRecord: 심각도/좌표 등 검증 실패
    """
    alert_id = _first(raw, "id", "alertId", "alert_id")
    alert_id = str(alert_id) if alert_id is not None else None

    coords = _coordinates(raw, "coordinates", "coords")
    if coords is None:
        raise InvalidRecord("missing coordinates", alert_id, kind="alert")

    district = _first(raw, "district")

    try:
        alert = Alert(
            id=alert_id or "",
            type=_text(_first(raw, "type", "alertType")),
            location=_text(_first(raw, "location", "name")),
            district=district or UNKNOWN_DISTRICT,
            severity=raw.get("severity"),
            time=_text(_first(raw, "time", "issuedAt", "issued_at")),
            coordinates=coords,
            description=_text(raw.get("description")),
        )
    except ValidationError as e:
        raise InvalidRecord(_reason(e), alert_id, kind="alert") from e

    # district 가 없으면 검증된 좌표로 가장 가까운 구역을 추정
    if not district and gazetteer is not None:
        nearest = gazetteer.nearest_region(alert.coordinates)
        if nearest is not None:
            log.debug(f"district 추정됨 id:{alert_id} district:{nearest.name}")
            alert = alert.model_copy(update={"district": nearest.name})
    return alert


def to_route(raw: Mapping[str, Any]) -> Route:
    """
    원시 경로 페이로드를 Route 로 변환합니다.

    Raises:
        InvalidRecord: 상태값이나 끝점이 잘못된 경우
    """
    route_id = _first(raw, "id", "routeId", "route_id")
    route_id = str(route_id) if route_id is not None else None

    start = _first(raw, "startPoint", "start_point", "start")
    end = _first(raw, "endPoint", "end_point", "end")
    if start is None or end is None:
        raise InvalidRecord("missing start or end point", route_id, kind="route")

    try:
        return Route(
            id=route_id or "",
            name=_text(raw.get("name")),
            status=raw.get("status"),
            updated=_text(raw.get("updated")),
            start_point=start,
            end_point=end,
            district=_text(raw.get("district")) or UNKNOWN_DISTRICT,
        )
    except ValidationError as e:
        raise InvalidRecord(_reason(e), route_id, kind="route") from e


def to_region(raw: Mapping[str, Any]) -> Region:
    """원시 구역 레코드를 Region 으로 변환합니다."""
    name = raw.get("name")
    coords = _coordinates(raw, "coordinates", "coords")
    if coords is None:
        raise InvalidRecord("missing coordinates", name, kind="region")

    localities = raw.get("localities") or ()
    if isinstance(localities, str):
        localities = [part.strip() for part in localities.split(";") if part.strip()]
    elif not isinstance(localities, (list, tuple)):
        raise InvalidRecord("localities must be a list or ';'-separated string", name, kind="region")

    try:
        return Region(name=name, coordinates=coords, localities=tuple(localities))
    except ValidationError as e:
        raise InvalidRecord(_reason(e), name, kind="region") from e
