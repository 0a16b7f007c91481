import os
import time
from datetime import datetime, timezone

import pytest

from wearface.core.clock_service import ClockService


def test_current_time_uses_zone_and_source(fake_time):
    clock = ClockService('America/Los_Angeles', time_source=fake_time)

    now = clock.get_current_time()

    assert now.utcoffset() is not None
    assert (now.hour, now.minute) == (14, 13)
    assert clock.current_millis() == 1_700_000_000_250


def test_invalid_zone_falls_back_to_utc(fake_time):
    clock = ClockService('Mars/Olympus_Mons', time_source=fake_time)

    assert clock.timezone == 'UTC'
    assert clock.get_current_time().hour == 22


def test_empty_zone_follows_system(fake_time):
    clock = ClockService('', time_source=fake_time)

    assert clock.timezone == ''
    assert clock.get_current_time().tzinfo is not None


def test_set_timezone(clock):
    assert clock.set_timezone('Europe/Berlin') is True
    assert clock.timezone == 'Europe/Berlin'

    assert clock.set_timezone('Nowhere/Special') is False
    assert clock.timezone == 'Europe/Berlin'

    assert clock.set_timezone('') is True
    assert clock.timezone == ''


def test_format_time_does_not_pad_hour():
    moment = datetime(2026, 10, 19, 9, 5, 7, tzinfo=timezone.utc)

    assert ClockService.format_time(moment) == '9:05'
    assert ClockService.format_time(moment, show_seconds=True) == '9:05:07'


def test_format_date():
    moment = datetime(2026, 10, 19, 9, 5, 7, tzinfo=timezone.utc)

    assert ClockService.format_date(moment) == 'Mon, Oct 19 2026'



@pytest.fixture
def system_zone():
    """Switch the process zone through TZ and restore it afterwards"""
    if not hasattr(time, 'tzset'):
        pytest.skip("time.tzset is not available on this platform")
    saved = os.environ.get('TZ')

    def switch(name):
        os.environ['TZ'] = name
        time.tzset()

    yield switch

    if saved is None:
        os.environ.pop('TZ', None)
    else:
        os.environ['TZ'] = saved
    time.tzset()


def test_system_zone_follows_dst(system_zone):
    system_zone('America/New_York')
    # 2026-03-08 06:00 UTC is 01:00 EST, an hour before the spring change
    before = datetime(2026, 3, 8, 6, 0, tzinfo=timezone.utc).timestamp()
    after = datetime(2026, 3, 8, 8, 0, tzinfo=timezone.utc).timestamp()
    now = [datetime(2025, 10, 19, 12, 0, tzinfo=timezone.utc).timestamp()]
    clock = ClockService('', time_source=lambda: now[0])

    assert clock.get_current_time().hour == 8

    now[0] = before
    assert clock.get_current_time().hour == 1

    now[0] = after
    assert clock.get_current_time().hour == 4


def test_refresh_picks_up_new_system_zone(system_zone, fake_time):
    system_zone('UTC')
    clock = ClockService('', time_source=fake_time)
    assert clock.get_current_time().hour == 22

    os.environ['TZ'] = 'Asia/Tokyo'
    clock.refresh_timezone()

    assert clock.get_current_time().hour == 7
