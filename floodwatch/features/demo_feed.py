"""
Demo feed for floodwatch.

A stand-alone producer of synthetic alerts and evacuation routes around
the built-in Tamil Nadu flood-prone areas. It emits plain raw records
through the same feed port and normalization path as a real feed; the
engine never depends on its randomness.
"""

import random
from typing import Any, Dict, List, Optional

from floodwatch.data.tamil_nadu import ALERT_TYPES, DISTRICTS, FLOOD_PRONE_AREAS
from floodwatch.observability.logging_setup import get_logger

log = get_logger("floodwatch.demo_feed")

ROUTE_STATUS_CYCLE = ["Open", "Warning", "Closed", "Open", "Open", "Warning", "Open", "Closed"]
ROUTE_UPDATED_CYCLE = ["2 mins ago", "5 mins ago", "12 mins ago", "15 mins ago",
                       "20 mins ago", "25 mins ago", "30 mins ago", "35 mins ago"]


class DemoFeed:
    """합성 경보/경로 생성기 (FeedPort 구현)"""

    def __init__(self, seed: Optional[int] = None, route_count: int = 8):
        """
        초기화합니다.

        Args:
            seed: 난수 시드 (테스트 재현용)
            route_count: 생성할 경로 수 (구역 목록 앞에서부터)
        """
        self.rng = random.Random(seed)
        self.route_count = route_count

    def generate_alerts(self) -> List[Dict[str, Any]]:
        """침수 위험 지역 중 절반 정도에 대해 경보를 만듭니다."""
        selected = [area for area in FLOOD_PRONE_AREAS if self.rng.random() > 0.5]
        alerts = []
        for index, area in enumerate(selected):
            minutes = self.rng.randint(5, 64)
            alert_type = self.rng.choice(ALERT_TYPES)
            alerts.append({
                "id": f"alert-{index}",
                "type": alert_type,
                "location": area["name"],
                "district": area["district"],
                "severity": area["risk"],
                "time": f"{minutes} mins ago",
                "coordinates": list(area["coordinates"]),
                "description": (f"{alert_type} issued for {area['name']} in {area['district']} district. "
                                "Take necessary precautions."),
            })
        return alerts

    def generate_routes(self) -> List[Dict[str, Any]]:
        """구역 중심에서 근처 임의 지점까지의 대피 경로를 만듭니다."""
        routes = []
        for index, (name, (lat, lng)) in enumerate(DISTRICTS[:self.route_count]):
            end_lat = lat + self.rng.uniform(-0.05, 0.05)
            end_lng = lng + self.rng.uniform(-0.05, 0.05)
            routes.append({
                "id": f"route{index + 1}",
                "name": f"{name} Evacuation Route",
                "status": ROUTE_STATUS_CYCLE[index % len(ROUTE_STATUS_CYCLE)],
                "updated": ROUTE_UPDATED_CYCLE[index % len(ROUTE_UPDATED_CYCLE)],
                "startPoint": [lat, lng],
                "endPoint": [end_lat, end_lng],
                "district": name,
            })
        return routes

    async def fetch_alerts(self) -> List[Dict[str, Any]]:
        alerts = self.generate_alerts()
        log.debug(f"데모 경보 생성됨 count:{len(alerts)}")
        return alerts

    async def fetch_routes(self) -> List[Dict[str, Any]]:
        routes = self.generate_routes()
        log.debug(f"데모 경로 생성됨 count:{len(routes)}")
        return routes
