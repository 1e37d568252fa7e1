"""
Routing collaborator port interface.

This module defines the protocol for turn-by-turn path computation,
which the engine delegates to an external routing service.
"""

from typing import Any, Optional, Protocol
from floodwatch.core.models import LatLng

class RoutingPort(Protocol):
    """라우팅 협력자 포트 인터페이스"""

    async def compute_path(self, start: LatLng, end: LatLng, style_hint: str) -> Optional[Any]:
        """
        두 지점 사이의 경로를 계산합니다.

        Args:
            start: 시작점 (위도, 경도)
            end: 끝점 (위도, 경도)
            style_hint: 렌더링 색상 힌트

        Returns:
            해석하지 않는 경로 객체, 실패 시 None
        """
        ...
