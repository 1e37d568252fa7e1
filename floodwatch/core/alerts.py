"""
Alert catalog for floodwatch.

Holds location-tagged hazard reports keyed by id and answers the
multi-predicate search the map view runs: free text, district and
severity, combined with AND, in insertion order.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, FrozenSet, List, Mapping, Optional

from .filters import matches_region, matches_text
from .models import Alert, AlertMarker, InvalidRecord, SEVERITIES
from .normalize import to_alert
from .snapshot import SnapshotStore
from floodwatch.observability import metrics

if TYPE_CHECKING:
    from .gazetteer import Gazetteer

# 심각도별 마커 색상과 반경(미터)
SEVERITY_MARKERS = {
    "Critical": AlertMarker(color="red", radius_m=2000),
    "High": AlertMarker(color="orange", radius_m=1500),
    "Medium": AlertMarker(color="yellow", radius_m=1000),
    "Low": AlertMarker(color="blue", radius_m=500),
}

ALL_SEVERITIES: FrozenSet[str] = frozenset(SEVERITIES)


@dataclass(frozen=True)
class AlertQuery:
    """
    경보 검색 조건.

    severities 가 빈 집합이면 아무 것도 매칭하지 않는다.
    """
    text: str = ""
    region: Optional[str] = None
    severities: FrozenSet[str] = ALL_SEVERITIES

    def matches(self, alert: Alert) -> bool:
        return (
            matches_text(self.text, alert.location, alert.district, alert.type)
            and matches_region(self.region, alert.district)
            and alert.severity in self.severities
        )


def marker_style(alert: Alert) -> AlertMarker:
    return SEVERITY_MARKERS[alert.severity]


class AlertCatalog(SnapshotStore[Alert]):
    """경보 카탈로그"""

    kind = "alert"

    def __init__(self, gazetteer: Optional["Gazetteer"] = None):
        """
        초기화합니다.

        Args:
            gazetteer: district 가 없는 원시 경보를 해석할 때 사용
        """
        super().__init__()
        self.gazetteer = gazetteer

    def _coerce(self, record: Any) -> Alert:
        if isinstance(record, Alert):
            return record
        if isinstance(record, Mapping):
            return to_alert(record, self.gazetteer)
        raise InvalidRecord(f"unsupported record type {type(record).__name__}", kind=self.kind)

    def search(self, query: AlertQuery) -> List[Alert]:
        """
        조건에 맞는 경보를 삽입 순서대로 반환합니다.

        Args:
            query: 검색 조건

        Returns:
            매칭된 경보 목록 (카탈로그의 부분집합)
        """
        snapshot = self._snapshot
        with metrics.search_seconds.labels(kind=self.kind).time():
            return [alert for alert in snapshot.values() if query.matches(alert)]
