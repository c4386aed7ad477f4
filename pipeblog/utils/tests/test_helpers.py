import pytest  # type: ignore

from ..helpers import format_archive_period, parse_archive_period


@pytest.mark.parametrize(
    "period, expected",
    [
        ("2017/08", (2017, 8)),
        ("2017/8", (2017, 8)),
        ("1999/12", (1999, 12)),
    ],
)
def test__parse_archive_period(period, expected):
    assert parse_archive_period(period) == expected


@pytest.mark.parametrize("period", ["", "2017", "2017/00", "2017/13", "17/08", "2017/08/01", "2017-08", "latest"])
def test__parse_archive_period_malformed(period):
    assert parse_archive_period(period) is None


def test__format_archive_period():
    assert format_archive_period(2017, 8) == "2017/08"
    assert parse_archive_period(format_archive_period(2017, 8)) == (2017, 8)
