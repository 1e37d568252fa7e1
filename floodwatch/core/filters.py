"""
Shared filter predicates for floodwatch catalogs.

Free-text and region predicates used by both the alert catalog
and the route registry, plus the "no filter" sentinels the
presentation layer sends.
"""

from typing import Optional

# "필터 없음" 센티널
ALL_DISTRICTS = "All Districts"
ALL_LOCALITIES = "All Localities"
ALL_SENTINELS = frozenset({ALL_DISTRICTS, ALL_LOCALITIES})


def is_all_region(region: Optional[str]) -> bool:
    """지역 값이 비어 있거나 전체 센티널이면 True"""
    return not region or region == ALL_DISTRICTS


def is_sentinel(value: Optional[str]) -> bool:
    return value in ALL_SENTINELS


def matches_text(text: Optional[str], *fields: Optional[str]) -> bool:
    """
    대소문자 무시 부분 문자열 매칭.

    Args:
        text: 검색어 (비어 있으면 모두 매칭)
        *fields: 검사할 필드 값들

    Returns:
        하나 이상의 필드가 검색어를 포함하면 True
    """
    if not text:
        return True
    needle = text.lower()
    return any(needle in (field or "").lower() for field in fields)


def matches_region(region: Optional[str], district: str) -> bool:
    """지역 필터: 정확히 일치(대소문자 구분)하거나 전체 센티널"""
    return is_all_region(region) or district == region
