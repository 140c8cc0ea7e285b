"""Tests for date helpers."""

from datetime import UTC, datetime, timedelta, timezone

from ces.dates import format_http_date, parse_date


class TestFormatHttpDate:
    def test_formats_gmt(self):
        value = datetime(2026, 10, 16, 10, 0, 0, tzinfo=UTC)
        assert format_http_date(value) == "Fri, 16 Oct 2026 10:00:00 GMT"

    def test_converts_to_utc(self):
        value = datetime(2026, 10, 16, 12, 0, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_http_date(value) == "Fri, 16 Oct 2026 10:00:00 GMT"


class TestParseDate:
    def test_parses_http_date(self):
        parsed = parse_date("Fri, 16 Oct 2026 10:00:00 GMT")
        assert parsed == datetime(2026, 10, 16, 10, 0, 0, tzinfo=UTC)

    def test_parses_iso(self):
        parsed = parse_date("2026-10-16T10:00:00+00:00")
        assert parsed == datetime(2026, 10, 16, 10, 0, 0, tzinfo=UTC)

    def test_parses_iso_zulu(self):
        parsed = parse_date("2026-10-16T10:00:00Z")
        assert parsed == datetime(2026, 10, 16, 10, 0, 0, tzinfo=UTC)

    def test_naive_is_utc(self):
        parsed = parse_date("2026-10-16T10:00:00")
        assert parsed is not None
        assert parsed.tzinfo is not None
        assert parsed.utcoffset() == timedelta(0)

    def test_round_trip_keeps_seconds(self):
        value = datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)
        assert parse_date(format_http_date(value)) == value

    def test_garbage_is_none(self):
        assert parse_date("not a date") is None

    def test_empty_is_none(self):
        assert parse_date("") is None
        assert parse_date("   ") is None
        assert parse_date(None) is None
