"""
Port 모듈 단위 테스트

이 모듈은 포트 인터페이스와 그 구현체의 호환성을 테스트합니다.
"""

import pytest

from floodwatch.adapters.routing.osrm_client import OsrmClient
from floodwatch.features.demo_feed import DemoFeed
from floodwatch.ports import FeedPort, RoutingPort


class TestFeedPort:
    """피드 포트 인터페이스 테스트"""

    @pytest.fixture
    def static_feed(self):
        class StaticFeed:
            async def fetch_alerts(self):
                return [{"id": "a1"}]

            async def fetch_routes(self):
                return []

        return StaticFeed()

    async def test_feed_port_implementation(self, static_feed):
        feed: FeedPort = static_feed
        assert await feed.fetch_alerts() == [{"id": "a1"}]
        assert await feed.fetch_routes() == []

    def test_demo_feed_provides_port_methods(self):
        feed = DemoFeed(seed=0)
        for name in ("fetch_alerts", "fetch_routes"):
            assert callable(getattr(feed, name))


class TestRoutingPort:
    """라우팅 포트 인터페이스 테스트"""

    async def test_routing_port_implementation(self):
        class StraightLineRouter:
            async def compute_path(self, start, end, style_hint):
                return {"style": style_hint, "line": [start, end]}

        router: RoutingPort = StraightLineRouter()
        path = await router.compute_path((0.0, 0.0), (1.0, 1.0), "green")
        assert path == {"style": "green", "line": [(0.0, 0.0), (1.0, 1.0)]}

    def test_osrm_client_provides_port_method(self):
        assert callable(getattr(OsrmClient("http://localhost:5000"), "compute_path"))
