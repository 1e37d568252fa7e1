"""
Copy-on-write record store for floodwatch.

Each store publishes an immutable snapshot (an id-indexed mapping in
insertion order) through a single reference. Writers build a new
snapshot and swap the reference; readers grab the reference once per
query, so they never observe a half-applied batch.
"""

import threading
from types import MappingProxyType
from typing import Any, Generic, Iterable, List, Mapping, Optional, TypeVar

from floodwatch.core.models import IngestReport, InvalidRecord, RejectedRecord
from floodwatch.observability import metrics
from floodwatch.observability.logging_setup import get_logger

log = get_logger("floodwatch.snapshot")

R = TypeVar("R")


class SnapshotStore(Generic[R]):
    """단일 작성자 / 다중 독자 레코드 저장소"""

    kind = "record"

    def __init__(self):
        self._snapshot: Mapping[str, R] = MappingProxyType({})
        self._write_lock = threading.Lock()

    def _coerce(self, record: Any) -> R:
        """원시 입력을 검증된 레코드로 변환합니다. 실패 시 InvalidRecord."""
        raise NotImplementedError

    def _publish(self, snapshot: dict) -> None:
        self._snapshot = MappingProxyType(snapshot)
        metrics.catalog_size.labels(kind=self.kind).set(len(snapshot))

    def ingest(self, record: Any) -> R:
        """
        레코드 하나를 검증 후 추가합니다 (같은 id 는 덮어씀, 위치 유지).

        Args:
            record: 모델 인스턴스 또는 원시 매핑

        Returns:
            저장된 레코드

        Raises:
            InvalidRecord: 검증 실패
        """
        try:
            item = self._coerce(record)
        except InvalidRecord:
            metrics.records_rejected.labels(kind=self.kind).inc()
            raise

        with self._write_lock:
            snapshot = dict(self._snapshot)
            snapshot[item.id] = item
            self._publish(snapshot)

        metrics.records_ingested.labels(kind=self.kind).inc()
        return item

    def replace(self, records: Iterable[Any]) -> IngestReport:
        """
        컬렉션 전체를 원자적으로 교체합니다.

        잘못된 레코드는 개별적으로 거부되고 나머지는 계속 처리됩니다.

        Args:
            records: 새 레코드 목록

        Returns:
            수락/거부 건수 보고서
        """
        report = IngestReport(kind=self.kind)
        snapshot: dict = {}

        for index, record in enumerate(records):
            try:
                item = self._coerce(record)
            except InvalidRecord as e:
                report.rejected += 1
                report.errors.append(RejectedRecord(index=index, record_id=e.record_id, reason=e.reason))
                log.warning(f"{self.kind} 레코드 거부됨 index:{index} id:{e.record_id} reason:{e.reason}")
                continue

            if item.id in snapshot:
                log.debug(f"배치 내 중복 id 덮어씀 kind:{self.kind} id:{item.id}")
            snapshot[item.id] = item
            report.accepted += 1

        with self._write_lock:
            self._publish(snapshot)

        metrics.records_ingested.labels(kind=self.kind).inc(report.accepted)
        metrics.records_rejected.labels(kind=self.kind).inc(report.rejected)
        log.info(f"{self.kind} 컬렉션 교체 완료 accepted:{report.accepted} rejected:{report.rejected} size:{len(snapshot)}")
        return report

    def remove(self, record_id: str) -> bool:
        """id 로 레코드를 제거합니다. 없으면 False."""
        with self._write_lock:
            if record_id not in self._snapshot:
                return False
            snapshot = dict(self._snapshot)
            del snapshot[record_id]
            self._publish(snapshot)
        return True

    def clear(self) -> None:
        with self._write_lock:
            self._publish({})

    def get(self, record_id: Optional[str]) -> Optional[R]:
        if record_id is None:
            return None
        return self._snapshot.get(record_id)

    def all(self) -> List[R]:
        """현재 스냅샷의 레코드를 삽입 순서대로 반환합니다."""
        return list(self._snapshot.values())

    def __len__(self) -> int:
        return len(self._snapshot)

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._snapshot
