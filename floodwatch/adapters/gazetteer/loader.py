"""
Gazetteer file loader for floodwatch.

Loads region reference data from CSV, JSON or Excel files so a
deployment can ship its own districts instead of the built-in table.
"""

import csv
import json
import os
from typing import Any, Dict, List, Optional
import openpyxl
from floodwatch.core.models import InvalidRecord, Region
from floodwatch.core.normalize import to_region
from floodwatch.observability.logging_setup import get_logger

log = get_logger("floodwatch.gazetteer.loader")

# CSV/엑셀 헤더 후보
NAME_COLUMNS = ("District", "name", "Name")
LAT_COLUMNS = ("Latitude", "lat")
LNG_COLUMNS = ("Longitude", "lng", "lon")
LOCALITY_COLUMNS = ("Localities", "localities")


def _pick(idx: Dict[Any, int], candidates) -> Optional[Any]:
    for c in candidates:
        if c in idx:
            return c
    return None


def _append(rows: List[Region], raw: Dict[str, Any], where: str) -> None:
    try:
        rows.append(to_region(raw))
    except InvalidRecord as e:
        log.warning(f"{where} 구역 레코드 건너뜀: {e}")


def _columns(headers: List[Any]):
    """헤더에서 (구역명, 위도, 경도, 로컬리티) 컬럼을 찾습니다."""
    idx = {h: i for i, h in enumerate(headers)}
    name_col = _pick(idx, NAME_COLUMNS)
    lat_col = _pick(idx, LAT_COLUMNS)
    lng_col = _pick(idx, LNG_COLUMNS)

    if name_col is None:
        raise ValueError(f"구역명 컬럼을 찾을 수 없습니다: {NAME_COLUMNS}. 사용 가능한 컬럼: {headers}")
    if lat_col is None or lng_col is None:
        raise ValueError(f"위도/경도 컬럼을 찾을 수 없습니다. 사용 가능한 컬럼: {headers}")
    return name_col, lat_col, lng_col, _pick(idx, LOCALITY_COLUMNS)


def load_regions(path: str) -> List[Region]:
    """
    구역 데이터를 파일에서 로드합니다.

    CSV/엑셀 로컬리티 컬럼은 세미콜론으로 구분합니다.

    Args:
        path: .csv, .json, .xlsx 파일 경로

    Returns:
        Region 목록 (잘못된 행은 건너뜀)

    Raises:
        ValueError: 지원하지 않는 형식, 필수 컬럼 누락 또는 JSON 최상위 구조 오류
    """
    ext = os.path.splitext(path)[1].lower()
    rows: List[Region] = []

    if ext == ".csv":
        with open(path, newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            name_col, lat_col, lng_col, loc_col = _columns(list(reader.fieldnames or []))
            for row_num, r in enumerate(reader, start=2):
                _append(rows, {
                    "name": (r.get(name_col) or "").strip(),
                    "lat": r.get(lat_col),
                    "lng": r.get(lng_col),
                    "localities": (r.get(loc_col) or "") if loc_col is not None else "",
                }, f"행 {row_num}")
    elif ext == ".json":
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if isinstance(data, dict):
            data = data.get("regions", [])
        if not isinstance(data, list):
            raise ValueError(f"JSON 구역 데이터는 목록이어야 합니다: {type(data).__name__}")
        for i, item in enumerate(data):
            if isinstance(item, dict):
                _append(rows, item, f"항목 {i}")
    elif ext in (".xlsx", ".xlsm"):
        wb = openpyxl.load_workbook(path, data_only=True)
        ws = wb.active
        headers = [c.value for c in next(ws.iter_rows(min_row=1, max_row=1))]
        name_col, lat_col, lng_col, loc_col = _columns(headers)
        idx = {h: i for i, h in enumerate(headers)}

        for row_num, row in enumerate(ws.iter_rows(min_row=2, values_only=True), start=2):
            if not row or row[idx[name_col]] is None:
                continue
            _append(rows, {
                "name": str(row[idx[name_col]]).strip(),
                "lat": row[idx[lat_col]],
                "lng": row[idx[lng_col]],
                "localities": (row[idx[loc_col]] or "") if loc_col is not None else "",
            }, f"행 {row_num}")
    else:
        raise ValueError(f"지원하지 않는 파일 형식: {ext}")

    log.info(f"구역 데이터 로드됨 path:{path} count:{len(rows)}")
    return rows
