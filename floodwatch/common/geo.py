"""
Geographic utilities for floodwatch.

Coordinates are (lat, lng) tuples in degrees throughout the engine.
This module holds the little geometry it needs: validation,
great-circle distance and endpoint midpoints.
"""

import math
from typing import Tuple

LatLng = Tuple[float, float]

# 지구 평균 반지름 (킬로미터)
EARTH_RADIUS_KM = 6371.0

def validate_coordinates(lat: float, lng: float) -> bool:
    """
    좌표가 유한하고 범위 안에 있는지 확인합니다.

    Args:
        lat: 위도 [-90, 90]
        lng: 경도 [-180, 180]

    Returns:
        유효하면 True (NaN/무한대는 False)
    """
    if not (math.isfinite(lat) and math.isfinite(lng)):
        return False
    return abs(lat) <= 90 and abs(lng) <= 180

def haversine_distance(a: LatLng, b: LatLng) -> float:
    """
    두 좌표 간의 대원 거리를 계산합니다 (킬로미터).

    Args:
        a: 첫 번째 좌표 (위도, 경도)
        b: 두 번째 좌표 (위도, 경도)

    Returns:
        거리 (킬로미터)
    """
    phi1, phi2 = math.radians(a[0]), math.radians(b[0])
    dphi = phi2 - phi1
    dlmb = math.radians(b[1] - a[1])

    h = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlmb / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h)))

def midpoint(start: LatLng, end: LatLng) -> LatLng:
    """두 끝점의 산술 평균 좌표 (경로 표시용, 대원 중점이 아님)"""
    return ((start[0] + end[0]) / 2, (start[1] + end[1]) / 2)
