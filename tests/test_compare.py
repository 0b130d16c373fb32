import datetime

import pytest

from pagewise.utils.compare import (
    between,
    equal,
    greater_than,
    greater_than_or_equal,
    in_values,
    less_than,
    less_than_or_equal,
)


def test_in_values():
    assert in_values(3, 1, 2, 3)
    assert not in_values(4, 1, 2, 3)
    assert not in_values('a')


@pytest.mark.parametrize('value,expected', [(0, False), (1, True), (5, True), (10, True), (11, False)])
def test_between_is_inclusive(value, expected):
    assert between(value, 1, 10) is expected


def test_between_dates():
    day = datetime.date(2024, 2, 29)

    assert between(day, datetime.date(2024, 1, 1), datetime.date(2024, 12, 31))


def test_relational():
    assert greater_than(2, 1)
    assert not greater_than(1, 1)
    assert less_than('a', 'b')
    assert not less_than('b', 'b')
    assert equal(1, 1.0)
    assert greater_than_or_equal(1, 1)
    assert less_than_or_equal(1, 1)
    assert not less_than_or_equal(2, 1)
