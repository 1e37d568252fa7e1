"""
도메인 모델 단위 테스트
"""

import pytest
from hypothesis import given, strategies as st
from pydantic import ValidationError

from floodwatch.core.models import (
    Alert, FocusRequest, IngestReport, InvalidRecord, Region, Route, SEVERITY_ORDER, Viewport
)


class TestRecords:
    """레코드 모델 테스트"""

    def test_records_are_frozen(self, sample_alerts):
        with pytest.raises(ValidationError):
            sample_alerts[0].severity = "Low"

    def test_route_accepts_aliases_and_names(self):
        by_alias = Route(id="r", name="n", status="Open", startPoint=(1.0, 1.0), endPoint=(2.0, 2.0))
        by_name = Route(id="r", name="n", status="Open", start_point=(1.0, 1.0), end_point=(2.0, 2.0))
        assert by_alias == by_name

    def test_route_dumps_camel_case_by_alias(self, sample_routes):
        data = sample_routes[0].model_dump(by_alias=True)
        assert data["startPoint"] == (13.0827, 80.2707)

    def test_alert_district_defaults_to_unknown(self):
        alert = Alert(id="a", type="t", location="l", severity="Low", coordinates=(1.0, 1.0))
        assert alert.district == "Unknown"

    def test_region_requires_name(self):
        with pytest.raises(ValidationError):
            Region(name="", coordinates=(1.0, 1.0))

    @given(st.floats(allow_nan=True, allow_infinity=True), st.floats(allow_nan=True, allow_infinity=True))
    def test_coordinates_validator(self, lat, lng):
        valid = -90 <= lat <= 90 and -180 <= lng <= 180
        if valid:
            assert Region(name="R", coordinates=(lat, lng)).coordinates == (lat, lng)
        else:
            with pytest.raises(ValidationError):
                Region(name="R", coordinates=(lat, lng))


class TestSeverityOrder:
    def test_ascending_urgency(self):
        assert SEVERITY_ORDER["Low"] < SEVERITY_ORDER["Medium"] < SEVERITY_ORDER["High"] < SEVERITY_ORDER["Critical"]


class TestMisc:
    def test_viewport_zoom_positive(self):
        with pytest.raises(ValidationError):
            Viewport(center=(0.0, 0.0), zoom=0)

    def test_focus_request_kind(self):
        with pytest.raises(ValidationError):
            FocusRequest(kind="planet")
        assert FocusRequest(kind="point", target=(1.0, 2.0)).target == (1.0, 2.0)

    def test_ingest_report_defaults(self):
        report = IngestReport(kind="alert")
        assert (report.accepted, report.rejected, report.errors) == (0, 0, [])

    def test_invalid_record_message(self):
        err = InvalidRecord("bad severity", "a9", kind="alert")
        assert isinstance(err, ValueError)
        assert str(err) == "invalid alert 'a9': bad severity"
        assert str(InvalidRecord("oops")) == "invalid record: oops"
