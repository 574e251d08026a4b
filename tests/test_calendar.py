import pytest

from wastekit.calendar import (
    World,
    day_of,
    hour_of,
    month_of,
    round_from_date,
    year_of,
)


@pytest.mark.parametrize(
    "year, month, day",
    [
        (2200, 1, 15),
        (2200, 12, 31),
        (2000, 2, 29),
        (2161, 3, 1),
        (2241, 7, 25),
        (1900, 1, 1),
    ],
)
def test_date_round_trip(year, month, day):
    r = round_from_date(year, month, day)
    assert (year_of(r), month_of(r), day_of(r)) == (year, month, day)


def test_every_day_of_a_year_round_trips():
    r = round_from_date(2201, 1, 1)
    end = round_from_date(2202, 1, 1)
    seen = 0
    while r < end:
        assert round_from_date(year_of(r), month_of(r), day_of(r)) == r
        r += 1440
        seen += 1
    assert seen == 365


def test_consecutive_days_differ_by_a_day():
    assert round_from_date(2200, 1, 16) - round_from_date(2200, 1, 15) == 1440
    assert round_from_date(2200, 3, 1) - round_from_date(2200, 2, 28) == 1440


def test_new_year_follows_last_day():
    assert round_from_date(2201, 1, 1) - round_from_date(2200, 12, 31) == 1440


def test_hour_of():
    r = round_from_date(2200, 1, 15)
    assert hour_of(r) == 0
    assert hour_of(r + 5 * 60 + 30) == 5
    assert hour_of(r + 1440) == 0


def test_minutes_within_day_keep_date():
    r = round_from_date(2200, 1, 15) + 1439
    assert (year_of(r), month_of(r), day_of(r)) == (2200, 1, 15)


def test_world_reset():
    world = World()
    world.reset()
    assert (world.year(), world.month(), world.day()) == (2200, 1, 15)
    assert world.rounds == round_from_date(2200, 1, 15)


def test_world_advances():
    world = World()
    world.reset()
    world.rounds += 17 * 1440
    assert (world.year(), world.month(), world.day()) == (2200, 2, 1)