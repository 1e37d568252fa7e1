# floodwatch/settings.py
from __future__ import annotations
from typing import List, Tuple
from pydantic import BaseModel, Field

class ViewportSettings(BaseModel):
    region_zoom: int = 11
    country_zoom: int = 7
    country_center: Tuple[float, float] = (11.1271, 78.6569)   # Tamil Nadu
    route_zoom: int = 12
    route_start_zoom: int = 14
    detail_zoom: int = 15
    navigate_zoom: int = 16
    user_locate_zoom: int = 15
    user_center_zoom: int = 12

class SearchSettings(BaseModel):
    # 아무 것도 지정하지 않았을 때 적용할 심각도 (UI 기본값)
    default_severities: List[str] = Field(default_factory=lambda: ["High", "Critical"])

class GazetteerSettings(BaseModel):
    file_path: str = ""                       # 비어 있으면 내장 타밀나두 데이터 사용

class RoutingSettings(BaseModel):
    enabled: bool = True
    base_url: str = "https://router.project-osrm.org"
    profile: str = "driving"
    timeout_sec: int = 10
    max_retries: int = 2

class DemoFeedSettings(BaseModel):
    enabled: bool = True
    seed: int | None = None
    refresh_interval_sec: float = 60.0

class Observability(BaseModel):
    http_port: int = 8099
    metrics_enabled: bool = True
    service_name: str = "floodwatch"
    build_version: str = "0.2.0"
    build_date: str = "2026-10-01"
    log_level: str = "INFO"
    log_json: bool = False

class Settings(BaseModel):
    viewport: ViewportSettings = Field(default_factory=ViewportSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)
    gazetteer: GazetteerSettings = Field(default_factory=GazetteerSettings)
    routing: RoutingSettings = Field(default_factory=RoutingSettings)
    demo_feed: DemoFeedSettings = Field(default_factory=DemoFeedSettings)
    observability: Observability = Field(default_factory=Observability)
