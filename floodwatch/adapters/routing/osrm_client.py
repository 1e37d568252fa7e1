"""
OSRM routing client for floodwatch.

This module implements the routing port against an OSRM HTTP
service. The engine never interprets the returned geometry; it only
checks that a path came back.
"""

import asyncio
import aiohttp
from typing import Any, Dict, Optional
from floodwatch.core.models import LatLng
from floodwatch.common.retry import retry_with_backoff
from floodwatch.observability.logging_setup import get_logger

log = get_logger("floodwatch.routing")

class OsrmClient:
    """OSRM 라우팅 클라이언트"""

    def __init__(self,
                 base_url: str,
                 profile: str = "driving",
                 timeout: int = 10,
                 max_retries: int = 2):
        """
        초기화합니다.

        Args:
            base_url: OSRM 서버 기본 URL
            profile: 라우팅 프로파일 (driving, walking, ...)
            timeout: 요청 타임아웃 (초)
            max_retries: 최대 재시도 횟수
        """
        self.base_url = base_url.rstrip('/')
        self.profile = profile
        self.timeout = timeout
        self.max_retries = max_retries
        self.session: Optional[aiohttp.ClientSession] = None

        log.info(f"OSRM 클라이언트 초기화됨 base_url:{self.base_url} profile:{profile}")

    async def __aenter__(self):
        """비동기 컨텍스트 매니저 진입"""
        self.session = aiohttp.ClientSession(
            timeout=aiohttp.ClientTimeout(total=self.timeout)
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """비동기 컨텍스트 매니저 종료"""
        if self.session:
            await self.session.close()
            self.session = None

    async def _make_request(self, endpoint: str, **kwargs) -> Dict:
        """
        API 요청을 수행합니다.

        Args:
            endpoint: API 엔드포인트
            **kwargs: 추가 요청 매개변수

        Returns:
            응답 데이터
        """
        if not self.session:
            raise RuntimeError("세션이 초기화되지 않았습니다. async with를 사용하세요.")

        url = f"{self.base_url}{endpoint}"

        async def _request():
            async with self.session.get(url, **kwargs) as response:
                response.raise_for_status()
                return await response.json()

        return await retry_with_backoff(
            _request,
            max_retries=self.max_retries,
            base_delay=0.5,
            retry_on=(aiohttp.ClientError, asyncio.TimeoutError),
        )

    def build_endpoint(self, start: LatLng, end: LatLng) -> str:
        # OSRM 좌표는 경도,위도 순서
        coords = f"{start[1]:.6f},{start[0]:.6f};{end[1]:.6f},{end[0]:.6f}"
        return f"/route/v1/{self.profile}/{coords}"

    async def compute_path(self, start: LatLng, end: LatLng, style_hint: str) -> Optional[Any]:
        """
        두 지점 사이의 경로(대안 포함)를 가져옵니다.

        Args:
            start: 시작점 (위도, 경도)
            end: 끝점 (위도, 경도)
            style_hint: 렌더링 색상 힌트 (응답에 그대로 실어 보냄)

        Returns:
            {"style": ..., "routes": [...]} 또는 None
        """
        try:
            data = await self._make_request(
                self.build_endpoint(start, end),
                params={"overview": "full", "geometries": "geojson", "alternatives": "true"},
            )
        except Exception as e:
            log.error(f"경로 계산 요청 실패 start:{start} end:{end} error:{str(e)}")
            return None

        if data.get("code") != "Ok" or not data.get("routes"):
            log.warning(f"경로를 찾을 수 없음 code:{data.get('code')} start:{start} end:{end}")
            return None

        log.info(f"경로 계산됨 routes:{len(data['routes'])} style:{style_hint}")
        return {"style": style_hint, "routes": data["routes"]}
