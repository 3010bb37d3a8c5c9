from datetime import UTC, datetime, timedelta, timezone

from tutor_desk.app.core.time import day_label, ensure_utc, month_label, utc_now, weekday_label


def test_utc_now_is_timezone_aware_utc():
    value = utc_now()
    assert value.tzinfo is UTC


def test_ensure_utc_assumes_naive_values_are_utc():
    value = ensure_utc(datetime(2030, 1, 1, 10, 0))
    assert value == datetime(2030, 1, 1, 10, 0, tzinfo=UTC)


def test_ensure_utc_converts_offsets():
    plus_two = timezone(timedelta(hours=2))
    value = ensure_utc(datetime(2030, 1, 1, 1, 0, tzinfo=plus_two))
    assert value == datetime(2029, 12, 31, 23, 0, tzinfo=UTC)


def test_labels():
    moment = datetime(2030, 1, 1, 10, 0, tzinfo=UTC)
    assert month_label(moment) == "2030-01"
    assert day_label(moment) == "Jan 1"
    assert weekday_label(moment) == "Tue, Jan 1"
