"""
Features 단위 테스트

데모 피드, 주기적 갱신기, 경로선 요청 서비스를 테스트합니다.
"""

import asyncio
from unittest.mock import AsyncMock, patch

import pytest

from floodwatch.core.alerts import AlertCatalog
from floodwatch.core.models import LatLng, RoutePath
from floodwatch.core.routes import RouteRegistry
from floodwatch.data.tamil_nadu import DISTRICTS, FLOOD_PRONE_AREAS
from floodwatch.features.demo_feed import DemoFeed, ROUTE_STATUS_CYCLE
from floodwatch.features.refresh import Refresher
from floodwatch.features.route_paths import CUSTOM_ROUTE_STYLE, RoutePathService
from floodwatch.observability import metrics


class FakeFeed:
    """테스트용 피드 (호출마다 준비된 결과를 차례로 반환)"""

    def __init__(self, alert_batches, route_batches):
        self.alert_batches = list(alert_batches)
        self.route_batches = list(route_batches)

    async def fetch_alerts(self):
        batch = self.alert_batches.pop(0)
        if isinstance(batch, Exception):
            raise batch
        return batch

    async def fetch_routes(self):
        batch = self.route_batches.pop(0)
        if isinstance(batch, Exception):
            raise batch
        return batch


def _alert(alert_id, severity="High"):
    return {"id": alert_id, "type": "Flash Flood Warning", "location": "Adyar River Basin",
            "district": "Chennai", "severity": severity, "coordinates": [13.0067, 80.2565]}


def _route(route_id, status="Open"):
    return {"id": route_id, "name": "Chennai Evacuation Route", "status": status,
            "startPoint": [13.0827, 80.2707], "endPoint": [13.1, 80.3], "district": "Chennai"}


class TestDemoFeed:
    """데모 피드 테스트"""

    def test_same_seed_same_output(self):
        assert DemoFeed(seed=7).generate_alerts() == DemoFeed(seed=7).generate_alerts()
        assert DemoFeed(seed=7).generate_routes() == DemoFeed(seed=7).generate_routes()

    def test_alerts_come_from_flood_prone_areas(self):
        names = {area["name"]: area for area in FLOOD_PRONE_AREAS}
        for alert in DemoFeed(seed=3).generate_alerts():
            area = names[alert["location"]]
            assert alert["severity"] == area["risk"]
            assert alert["district"] == area["district"]
            assert alert["id"].startswith("alert-")

    def test_routes_start_at_district_centres(self):
        routes = DemoFeed(seed=1, route_count=8).generate_routes()
        assert [r["id"] for r in routes] == [f"route{i}" for i in range(1, 9)]
        assert [r["status"] for r in routes] == ROUTE_STATUS_CYCLE
        for route, (name, (lat, lng)) in zip(routes, DISTRICTS):
            assert route["startPoint"] == [lat, lng]
            assert abs(route["endPoint"][0] - lat) <= 0.05
            assert abs(route["endPoint"][1] - lng) <= 0.05
            assert route["district"] == name

    def test_generated_records_pass_validation(self):
        feed = DemoFeed(seed=11)
        alerts_report = AlertCatalog().replace(feed.generate_alerts())
        routes_report = RouteRegistry().replace(feed.generate_routes())
        assert alerts_report.rejected == 0
        assert routes_report.rejected == 0
        assert routes_report.accepted == 8

    async def test_feed_port_methods(self):
        feed = DemoFeed(seed=5)
        assert isinstance(await feed.fetch_alerts(), list)
        assert len(await feed.fetch_routes()) == 8


class TestRefresher:
    """주기적 갱신기 테스트"""

    async def test_refresh_once_replaces_both(self):
        alerts, routes = AlertCatalog(), RouteRegistry()
        feed = FakeFeed([[_alert("a1"), _alert("bad", severity="Unknown")]], [[_route("r1")]])
        refresher = Refresher(feed, alerts, routes)

        result = await refresher.refresh_once()

        assert (result.alerts.accepted, result.alerts.rejected) == (1, 1)
        assert result.routes.accepted == 1
        assert refresher.last_result == result
        assert refresher.cycle == 1
        assert [a.id for a in alerts.all()] == ["a1"]
        assert [r.id for r in routes.all()] == ["r1"]

    async def test_failed_fetch_keeps_previous_data(self):
        alerts, routes = AlertCatalog(), RouteRegistry()
        feed = FakeFeed(
            [[_alert("a1")], [_alert("a2")]],
            [[_route("r1")], ConnectionError("feed down")],
        )
        refresher = Refresher(feed, alerts, routes)
        await refresher.refresh_once()

        with pytest.raises(ConnectionError):
            await refresher.refresh_once()

        # 경보도 교체되지 않아야 함 (경로 조회 실패 전에 가져왔더라도)
        assert [a.id for a in alerts.all()] == ["a1"]
        assert [r.id for r in routes.all()] == ["r1"]

    async def test_run_survives_failures(self):
        alerts, routes = AlertCatalog(), RouteRegistry()
        feed = FakeFeed(
            [RuntimeError("boom"), [_alert("a1")]],
            [[_route("r1")]],
        )
        refresher = Refresher(feed, alerts, routes)
        failures_before = metrics.refresh_failures._value.get()

        sleeps = []

        async def fake_sleep(delay):
            sleeps.append(delay)
            if len(sleeps) >= 2:
                raise asyncio.CancelledError()

        with patch("floodwatch.features.refresh.asyncio.sleep", side_effect=fake_sleep):
            with pytest.raises(asyncio.CancelledError):
                await refresher.run(30)

        assert sleeps == [30, 30]
        assert metrics.refresh_failures._value.get() == failures_before + 1
        assert [a.id for a in alerts.all()] == ["a1"]


class TestRoutePathService:
    """경로선 요청 서비스 테스트"""

    @pytest.fixture
    def router(self):
        router = AsyncMock()
        router.compute_path.return_value = {"style": "green", "routes": [{"distance": 1200.0}]}
        return router

    async def test_path_for_registered_route(self, route_registry, router):
        service = RoutePathService(route_registry, router)
        result = await service.path_for("r2")

        assert isinstance(result, RoutePath)
        assert result.route_id == "r2"
        assert result.request.style_hint == "orange"
        router.compute_path.assert_awaited_once_with((9.9252, 78.1198), (9.95, 78.15), "orange")
        # 경로 데이터는 해석 없이 그대로 전달
        assert result.path == {"style": "green", "routes": [{"distance": 1200.0}]}

    async def test_unknown_route(self, route_registry, router):
        service = RoutePathService(route_registry, router)
        assert await service.path_for("r99") is None
        router.compute_path.assert_not_awaited()

    async def test_empty_path_is_none(self, route_registry, router):
        router.compute_path.return_value = None
        service = RoutePathService(route_registry, router)
        assert await service.path_for("r1") is None

    async def test_custom_path(self, route_registry, router):
        service = RoutePathService(route_registry, router)
        start: LatLng = (13.0, 80.2)
        end: LatLng = (13.05, 80.25)
        result = await service.custom_path(start, end)

        assert result.route_id is None
        assert result.request.style_hint == CUSTOM_ROUTE_STYLE
        router.compute_path.assert_awaited_once_with(start, end, "blue")
