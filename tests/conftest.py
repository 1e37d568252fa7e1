"""
테스트 설정 및 픽스처

이 모듈은 pytest 설정과 공통 픽스처를 제공합니다.
"""

import pytest
import asyncio
from floodwatch.settings import Settings
from floodwatch.core.alerts import AlertCatalog
from floodwatch.core.gazetteer import Gazetteer
from floodwatch.core.models import Alert, Region, Route
from floodwatch.core.query import QueryFacade
from floodwatch.core.routes import RouteRegistry
from floodwatch.core.viewport import ViewportResolver
from floodwatch.data.tamil_nadu import tamil_nadu_regions


@pytest.fixture
def sample_settings():
    """테스트용 설정"""
    settings = Settings()
    settings.observability.service_name = "test-service"
    settings.observability.build_version = "1.0.0"
    settings.observability.log_level = "INFO"
    return settings


@pytest.fixture
def sample_regions():
    """테스트용 구역"""
    return [
        Region(name="Chennai", coordinates=(13.0827, 80.2707),
               localities=("Adyar", "Velachery", "Guindy")),
        Region(name="Madurai", coordinates=(9.9252, 78.1198),
               localities=("Anaiyur", "Adyar")),
        Region(name="Erode", coordinates=(11.341, 77.7172)),
    ]


@pytest.fixture
def gazetteer(sample_regions):
    return Gazetteer(sample_regions)


@pytest.fixture
def tamil_nadu_gazetteer():
    return Gazetteer(tamil_nadu_regions())


@pytest.fixture
def sample_alerts():
    """근접 오답(near-miss)을 포함한 테스트용 경보"""
    return [
        Alert(id="a1", type="Flash Flood Warning", location="Adyar River Basin", district="Chennai",
              severity="High", time="10 mins ago", coordinates=(13.0067, 80.2565)),
        Alert(id="a2", type="Water Level Rising", location="Vaigai River Basin", district="Madurai",
              severity="Medium", time="20 mins ago", coordinates=(9.9252, 78.1198)),
        Alert(id="a3", type="Heavy Rainfall Alert", location="Mudichur", district="Chennai",
              severity="Critical", time="5 mins ago", coordinates=(12.9107, 80.0689)),
        Alert(id="a4", type="Dam Release Warning", location="Bhavani River", district="Erode",
              severity="Low", time="45 mins ago", coordinates=(11.341, 77.7172)),
        Alert(id="a5", type="Water Level Rising", location="Cooum River Area", district="Chennai",
              severity="Critical", time="1 min ago", coordinates=(13.0756, 80.261)),
    ]


@pytest.fixture
def sample_routes():
    return [
        Route(id="r1", name="Chennai Evacuation Route", status="Open", updated="2 mins ago",
              start_point=(13.0827, 80.2707), end_point=(13.1, 80.3), district="Chennai"),
        Route(id="r2", name="Madurai Evacuation Route", status="Warning", updated="5 mins ago",
              start_point=(9.9252, 78.1198), end_point=(9.95, 78.15), district="Madurai"),
        Route(id="r3", name="Erode Bypass", status="Closed", updated="12 mins ago",
              start_point=(11.341, 77.7172), end_point=(11.36, 77.74), district="Erode"),
    ]


@pytest.fixture
def alert_catalog(gazetteer, sample_alerts):
    catalog = AlertCatalog(gazetteer)
    catalog.replace(sample_alerts)
    return catalog


@pytest.fixture
def route_registry(sample_routes):
    registry = RouteRegistry()
    registry.replace(sample_routes)
    return registry


@pytest.fixture
def facade(gazetteer, alert_catalog, route_registry, sample_settings):
    return QueryFacade(
        gazetteer, alert_catalog, route_registry,
        ViewportResolver(sample_settings.viewport), sample_settings.search
    )


# pytest 설정
def pytest_configure(config):
    """pytest 설정"""
    config.addinivalue_line(
        "markers", "asyncio: 비동기 테스트 마커"
    )
    config.addinivalue_line(
        "markers", "integration: 통합 테스트 마커"
    )


def pytest_collection_modifyitems(config, items):
    """테스트 아이템 수정"""
    for item in items:
        # 비동기 테스트에 asyncio 마커 추가
        if asyncio.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)

        # 통합 테스트 마커 추가
        if "integration" in item.name:
            item.add_marker(pytest.mark.integration)
