# floodwatch/main.py
import os, asyncio, signal
from contextlib import suppress
from typing import Optional, Tuple
import uvicorn
from floodwatch.settings import Settings
from floodwatch.core.alerts import AlertCatalog
from floodwatch.core.gazetteer import Gazetteer
from floodwatch.core.query import QueryFacade
from floodwatch.core.routes import RouteRegistry
from floodwatch.core.viewport import ViewportResolver
from floodwatch.adapters.gazetteer.loader import load_regions
from floodwatch.adapters.routing.osrm_client import OsrmClient
from floodwatch.data.tamil_nadu import tamil_nadu_regions
from floodwatch.features.demo_feed import DemoFeed
from floodwatch.features.refresh import Refresher
from floodwatch.features.route_paths import RoutePathService
from floodwatch.observability.health import create_app
from floodwatch.observability.logging_setup import setup_logging, get_logger

def _b(name, default=False): return os.getenv(name, str(default)).lower() in ("1","true","yes","on")

def build_settings() -> Settings:
    s = Settings()

    # 뷰포트
    v = s.viewport
    v.region_zoom = int(os.getenv("REGION_ZOOM", v.region_zoom))
    v.country_zoom = int(os.getenv("COUNTRY_ZOOM", v.country_zoom))
    v.country_center = (
        float(os.getenv("COUNTRY_CENTER_LAT", v.country_center[0])),
        float(os.getenv("COUNTRY_CENTER_LNG", v.country_center[1])),
    )
    v.route_zoom = int(os.getenv("ROUTE_ZOOM", v.route_zoom))
    v.route_start_zoom = int(os.getenv("ROUTE_START_ZOOM", v.route_start_zoom))
    v.detail_zoom = int(os.getenv("DETAIL_ZOOM", v.detail_zoom))
    v.navigate_zoom = int(os.getenv("NAVIGATE_ZOOM", v.navigate_zoom))
    v.user_locate_zoom = int(os.getenv("USER_LOCATE_ZOOM", v.user_locate_zoom))
    v.user_center_zoom = int(os.getenv("USER_CENTER_ZOOM", v.user_center_zoom))

    # 검색 기본값
    default_sev = os.getenv("DEFAULT_SEVERITIES")
    if default_sev is not None:
        s.search.default_severities = [p.strip() for p in default_sev.split(",") if p.strip()]

    # 가제티어
    s.gazetteer.file_path = os.getenv("GAZETTEER_PATH", s.gazetteer.file_path)

    # 라우팅
    s.routing.enabled = _b("ROUTING_ENABLED", s.routing.enabled)
    s.routing.base_url = os.getenv("OSRM_BASE_URL", s.routing.base_url)
    s.routing.profile = os.getenv("OSRM_PROFILE", s.routing.profile)
    s.routing.timeout_sec = int(os.getenv("OSRM_TIMEOUT_SEC", s.routing.timeout_sec))
    s.routing.max_retries = int(os.getenv("OSRM_MAX_RETRIES", s.routing.max_retries))

    # 데모 피드
    s.demo_feed.enabled = _b("DEMO_FEED_ENABLED", s.demo_feed.enabled)
    seed = os.getenv("DEMO_FEED_SEED")
    if seed:
        s.demo_feed.seed = int(seed)
    s.demo_feed.refresh_interval_sec = float(os.getenv("REFRESH_INTERVAL_SEC", s.demo_feed.refresh_interval_sec))

    # 관측성
    s.observability.metrics_enabled = _b("METRICS_ENABLED", s.observability.metrics_enabled)
    s.observability.http_port = int(os.getenv("HTTP_PORT", s.observability.http_port))
    s.observability.log_level = os.getenv("LOG_LEVEL", s.observability.log_level)
    s.observability.log_json = _b("LOG_JSON", s.observability.log_json)

    return s

def build_gazetteer(settings: Settings) -> Gazetteer:
    path = settings.gazetteer.file_path
    if path:
        return Gazetteer(load_regions(path))
    return Gazetteer(tamil_nadu_regions())

def start_http(settings: Settings, facade: QueryFacade,
               refresher: Optional[Refresher], paths: Optional[RoutePathService]) -> Tuple[uvicorn.Server, asyncio.Task]:
    app = create_app(settings, facade, refresher=refresher, paths=paths)
    server = uvicorn.Server(
        uvicorn.Config(app, host="0.0.0.0", port=settings.observability.http_port, log_level="info")
    )
    return server, asyncio.create_task(server.serve())

async def serve(s: Settings, facade: QueryFacade,
                refresher: Optional[Refresher], paths: Optional[RoutePathService]):
    log = get_logger("floodwatch.main")
    server, http_task = start_http(s, facade, refresher, paths)
    log.info(f"HTTP 서버 시작됨 port:{s.observability.http_port}")

    refresh_task: Optional[asyncio.Task] = None
    if refresher is not None:
        refresh_task = asyncio.create_task(refresher.run(s.demo_feed.refresh_interval_sec))

    stop = asyncio.Future()
    try:
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGTERM, signal.SIGINT):
            try: loop.add_signal_handler(sig, lambda: (not stop.done()) and stop.set_result(True))
            except NotImplementedError: pass
    except RuntimeError: pass

    await asyncio.wait([stop, http_task], return_when=asyncio.FIRST_COMPLETED)
    log.info("종료 중")
    if refresh_task: refresh_task.cancel()
    server.should_exit = True
    await http_task
    if refresh_task:
        with suppress(asyncio.CancelledError):
            await refresh_task

async def main():
    s = build_settings()
    setup_logging(s.observability.log_level, json=s.observability.log_json)
    log = get_logger("floodwatch.main")
    log.info("설정 로드 완료")

    gazetteer = build_gazetteer(s)
    alerts = AlertCatalog(gazetteer)
    routes = RouteRegistry()
    facade = QueryFacade(gazetteer, alerts, routes, ViewportResolver(s.viewport), s.search)
    log.info("질의 파사드 생성 완료")

    refresher: Optional[Refresher] = None
    if s.demo_feed.enabled:
        refresher = Refresher(DemoFeed(seed=s.demo_feed.seed), alerts, routes)
        log.info("데모 피드 사용")

    if not s.routing.enabled:
        log.info("라우팅 비활성화됨")
        await serve(s, facade, refresher, None)
        return

    async with OsrmClient(
        s.routing.base_url,
        profile=s.routing.profile,
        timeout=s.routing.timeout_sec,
        max_retries=s.routing.max_retries,
    ) as router:
        await serve(s, facade, refresher, RoutePathService(routes, router))

def run():
    asyncio.run(main())

if __name__ == "__main__":
    run()
