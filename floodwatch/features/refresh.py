"""
Refresh coordinator for floodwatch.

The single writer of the alert catalog and route registry. Each cycle
fetches everything from the feed first and only then swaps both
collections; a cycle cancelled or failed before the swap leaves the
previous contents visible to readers.
"""

import asyncio
from typing import Optional

from pydantic import BaseModel

from floodwatch.core.alerts import AlertCatalog
from floodwatch.core.models import IngestReport
from floodwatch.core.routes import RouteRegistry
from floodwatch.ports.feed import FeedPort
from floodwatch.observability import metrics
from floodwatch.observability.logging_setup import get_logger, with_context

log = get_logger("floodwatch.refresh")


class RefreshResult(BaseModel):
    alerts: IngestReport
    routes: IngestReport


class Refresher:
    """주기적 카탈로그 갱신기"""

    def __init__(self, feed: FeedPort, alerts: AlertCatalog, routes: RouteRegistry):
        self.feed = feed
        self.alerts = alerts
        self.routes = routes
        self._lock = asyncio.Lock()
        self.last_result: Optional[RefreshResult] = None
        self.cycle = 0

    async def refresh_once(self) -> RefreshResult:
        """
        피드에서 전체 데이터를 가져와 카탈로그를 교체합니다.

        Returns:
            경보/경로 수집 보고서

        Raises:
            피드 조회 중 발생한 예외 (이 경우 교체는 일어나지 않음)
        """
        async with self._lock:
            self.cycle += 1
            with with_context(cycle=self.cycle):
                raw_alerts = await self.feed.fetch_alerts()
                raw_routes = await self.feed.fetch_routes()

                # 여기서부터는 await 없음: 교체 도중 취소되지 않음
                result = RefreshResult(
                    alerts=self.alerts.replace(raw_alerts),
                    routes=self.routes.replace(raw_routes),
                )

        self.last_result = result
        metrics.refreshes.inc()
        log.info(f"갱신 완료 cycle:{self.cycle} "
                 f"alerts:{result.alerts.accepted}/{result.alerts.rejected} "
                 f"routes:{result.routes.accepted}/{result.routes.rejected}")
        return result

    async def run(self, interval_sec: float) -> None:
        """취소될 때까지 주기적으로 갱신합니다."""
        log.info(f"주기적 갱신 시작 interval:{interval_sec}s")
        while True:
            try:
                await self.refresh_once()
            except asyncio.CancelledError:
                raise
            except Exception as e:
                metrics.refresh_failures.inc()
                log.error(f"갱신 실패, 이전 데이터 유지 error:{str(e)}")
            await asyncio.sleep(interval_sec)
