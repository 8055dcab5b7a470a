from datetime import UTC, datetime, timedelta, timezone

import pytest

from src.dx_common.datetime_utils import parse_timestamp


class TestParseTimestamp:
    def test_zulu_suffix(self) -> None:
        assert parse_timestamp("2023-01-01T00:00:00Z") == datetime(2023, 1, 1, tzinfo=UTC)

    def test_offset_converted_to_utc(self) -> None:
        dt = parse_timestamp("2023-01-01T02:00:00+02:00")
        assert dt == datetime(2023, 1, 1, tzinfo=UTC)
        assert dt.utcoffset() == timedelta(0)

    def test_naive_taken_as_utc(self) -> None:
        assert parse_timestamp("2023-01-01T00:00:00").tzinfo is not None

    def test_fractional_seconds(self) -> None:
        dt = parse_timestamp("2023-06-01T12:00:00.123456+00:00")
        assert dt.microsecond == 123456

    def test_datetime_passthrough(self) -> None:
        dt = datetime(2023, 1, 1, 1, tzinfo=timezone(timedelta(hours=1)))
        assert parse_timestamp(dt) == datetime(2023, 1, 1, tzinfo=UTC)

    def test_garbage_raises(self) -> None:
        with pytest.raises(ValueError):
            parse_timestamp("yesterday")

    @pytest.mark.parametrize(
        "value", ["0001-01-01T00:00:00+01:00", "9999-12-31T23:59:59-01:00"]
    )
    def test_utc_instant_out_of_range(self, value: str) -> None:
        with pytest.raises(ValueError):
            parse_timestamp(value)

    def test_range_edges_in_utc(self) -> None:
        assert parse_timestamp("0001-01-01T00:00:00Z").year == 1
        assert parse_timestamp("9999-12-31T23:59:59+00:00").year == 9999
