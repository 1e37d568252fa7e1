"""
Feed port interface.

This module defines the protocol for producers that supply raw alert
and route records to the refresh cycle (partner feeds, manual entry,
the demo producer).
"""

from typing import Any, Dict, List, Protocol

class FeedPort(Protocol):
    """원시 레코드 공급 포트 인터페이스"""

    async def fetch_alerts(self) -> List[Dict[str, Any]]:
        """
        현재 경보 전체를 원시 딕셔너리로 가져옵니다.

        Returns:
            원시 경보 목록
        """
        ...

    async def fetch_routes(self) -> List[Dict[str, Any]]:
        """
        현재 대피 경로 전체를 원시 딕셔너리로 가져옵니다.

        Returns:
            원시 경로 목록
        """
        ...
