"""
Gazetteer for floodwatch.

Immutable reference table of administrative regions (districts),
their canonical coordinates and named localities. Built once at
startup; every lookup afterwards is a pure read. Unknown names are
a normal outcome of partial selections and yield empty results.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from .filters import is_all_region, is_sentinel
from .models import InvalidRecord, LatLng, Region
from .normalize import to_region
from floodwatch.common.geo import haversine_distance
from floodwatch.observability import metrics
from floodwatch.observability.logging_setup import get_logger

log = get_logger("floodwatch.gazetteer")


class Gazetteer:
    """행정 구역 참조 테이블"""

    def __init__(self, regions: Sequence[Region] = ()):
        """
        초기화합니다.

        Args:
            regions: 구역 목록 (이름 중복 시 첫 항목 유지)
        """
        by_name: Dict[str, Region] = {}
        for region in regions:
            if is_sentinel(region.name):
                log.warning(f"센티널 이름의 구역은 무시됨 name:{region.name}")
                continue
            if region.name in by_name:
                log.warning(f"중복 구역 무시됨 name:{region.name}")
                continue
            by_name[region.name] = region

        self._regions: Dict[str, Region] = by_name
        self._localities: Dict[str, Tuple[str, ...]] = {
            name: tuple(loc for loc in region.localities if not is_sentinel(loc))
            for name, region in by_name.items()
        }

        # 전체 구역 로컬리티의 중복 제거 합집합 (최초 등장 순서)
        union: Dict[str, None] = {}
        for localities in self._localities.values():
            for locality in localities:
                union.setdefault(locality, None)
        self._all_localities: Tuple[str, ...] = tuple(union)

        metrics.gazetteer_regions.set(len(by_name))
        log.info(f"가제티어 로드됨 regions:{len(by_name)} localities:{len(self._all_localities)}")

    @classmethod
    def from_regions(cls, records: Iterable[Any]) -> "Gazetteer":
        """
        Region 또는 원시 매핑 목록으로 가제티어를 만듭니다.

        잘못된 레코드는 경고 로그 후 건너뜁니다.
        """
        regions: List[Region] = []
        for record in records:
            if isinstance(record, Region):
                regions.append(record)
                continue
            if not isinstance(record, Mapping):
                log.warning(f"지원하지 않는 구역 레코드 건너뜀 type:{type(record).__name__}")
                continue
            try:
                regions.append(to_region(record))
            except InvalidRecord as e:
                log.warning(f"구역 레코드 건너뜀 {e}")
        return cls(regions)

    def find_region(self, name: Optional[str]) -> Optional[Region]:
        if name is None:
            return None
        return self._regions.get(name)

    def all_region_names(self) -> List[str]:
        """선택 목록용 구역 이름 (삽입 순서)"""
        return list(self._regions)

    def regions(self) -> List[Region]:
        return list(self._regions.values())

    def localities_of(self, region_name: Optional[str]) -> List[str]:
        """
        구역의 로컬리티 목록을 반환합니다.

        Args:
            region_name: 구역 이름. 비어 있거나 "All Districts" 이면 전체 합집합

        Returns:
            로컬리티 이름 목록 (알 수 없는 구역이면 빈 목록)
        """
        if is_all_region(region_name):
            return list(self._all_localities)
        return list(self._localities.get(region_name, ()))

    def nearest_region(self, coordinates: LatLng) -> Optional[Region]:
        """좌표에서 대표 좌표가 가장 가까운 구역을 찾습니다."""
        best: Optional[Tuple[Region, float]] = None
        for region in self._regions.values():
            d = haversine_distance(coordinates, region.coordinates)
            if best is None or d < best[1]:
                best = (region, d)
        return best[0] if best else None

    def __len__(self) -> int:
        return len(self._regions)

    def __contains__(self, name: object) -> bool:
        return name in self._regions
