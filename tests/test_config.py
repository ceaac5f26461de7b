from datetime import datetime, timezone

import pytest

from mindease.core.config import parse_expires_in
from mindease.core.time import parse_date_bound


@pytest.mark.parametrize(
    "value,seconds",
    [("30s", 30), ("15m", 900), ("2h", 7200), ("7d", 604800)],
)
def test_parse_expires_in(value, seconds):
    assert parse_expires_in(value) == seconds


@pytest.mark.parametrize("value", ["", "15", "m15", "1w", "1.5h"])
def test_parse_expires_in_rejects_bad_format(value):
    with pytest.raises(ValueError):
        parse_expires_in(value)


def test_parse_date_bound():
    assert parse_date_bound(None) is None
    assert parse_date_bound("2024-03-01") == datetime(2024, 3, 1, tzinfo=timezone.utc)
    assert parse_date_bound("2024-03-01T10:30:00Z") == datetime(2024, 3, 1, 10, 30, tzinfo=timezone.utc)
    assert parse_date_bound("2024-03-01T12:30:00+02:00") == datetime(2024, 3, 1, 10, 30, tzinfo=timezone.utc)
    with pytest.raises(ValueError):
        parse_date_bound("03/01/2024")
