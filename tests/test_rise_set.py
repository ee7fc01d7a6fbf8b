# tests/test_rise_set.py
from __future__ import annotations

import pytest
from hypothesis import given, strategies as st

from astronav.constants import SUNRISE_ZENITH
from astronav.rise_set import (
    DayEvents,
    SolarEvent,
    SunMood,
    SunRiseAndSet,
    approximate_time,
    day_events,
    event_time,
    solar_noon_minutes,
    sunrise_minutes,
    sunset_minutes,
    twilight_events,
)

# ─────────────────────────────────────────────────────────────────────────────
# Classical hour-angle model
# ─────────────────────────────────────────────────────────────────────────────

def test_new_york_sunrise_chain(new_york: dict) -> None:
    sun = SunRiseAndSet(**new_york)

    assert sun.sunrise_mean_anomaly() == pytest.approx(132.18721, abs=1e-3)
    assert sun.sunrise_true_long_in_deg() == pytest.approx(56.220978, abs=1e-3)
    assert sun.sunrise_ra_in_hours() == pytest.approx(3.5939937, abs=1e-4)
    assert sun.sunrise_declination() == pytest.approx(19.309036, abs=1e-3)

    lha = sun.sunrise_local_hour_angle()
    assert lha.mood is SunMood.RISE
    assert lha.value == pytest.approx(16.748438, abs=1e-4)

    rise = sun.sunrise_time()
    assert rise.mood is SunMood.RISE
    assert rise.occurs
    assert rise.value == pytest.approx(5.6219597, abs=1e-3)


def test_new_york_sunset_chain(new_york: dict) -> None:
    sun = SunRiseAndSet(**new_york)

    assert sun.sunset_mean_anomaly() == pytest.approx(132.68001, abs=1e-3)
    assert sun.sunset_true_long_in_deg() == pytest.approx(56.702637, abs=1e-3)
    assert sun.sunset_ra_in_hours() == pytest.approx(3.6270912, abs=1e-4)
    assert sun.sunset_declination() == pytest.approx(19.42125, abs=1e-3)

    lha = sun.sunset_local_hour_angle()
    assert lha.mood is SunMood.SET
    assert lha.value == pytest.approx(7.25926, abs=1e-4)

    fall = sun.sunset_time()
    assert fall.mood is SunMood.SET
    assert fall.value == pytest.approx(20.133024, abs=1e-3)


def test_with_date_derives_day_of_year(new_york: dict) -> None:
    sun = SunRiseAndSet(long=new_york["long"], lat=new_york["lat"], timezone=new_york["timezone"])
    dated = sun.with_date(2024, 5, 16)

    assert dated.doy == 137
    assert dated.sunrise_time() == SunRiseAndSet(**new_york).sunrise_time()
    # the original record is untouched
    assert sun.doy == 1


@pytest.mark.parametrize("doy, mood", [(355, SunMood.NEVER_RISES), (172, SunMood.NEVER_SETS)])
def test_classical_polar_days(doy: int, mood: SunMood) -> None:
    sun = SunRiseAndSet(doy=doy, long=15.6, lat=78.0, timezone=1.0)

    for event in (sun.sunrise_time(), sun.sunset_time(), sun.sunrise_local_hour_angle()):
        assert event == SolarEvent(mood)
        assert not event.occurs
        assert event.value is None


def test_unknown_event_raises() -> None:
    with pytest.raises(ValueError):
        approximate_time(137, 0.0, "noon")
    with pytest.raises(ValueError):
        event_time(137, 0.0, 45.0, 0.0, "midnight")


@given(
    st.integers(min_value=1, max_value=365),
    st.floats(min_value=-180.0, max_value=180.0),
    st.floats(min_value=-60.0, max_value=60.0),
)
def test_classical_event_time_range(doy: int, longitude: float, latitude: float) -> None:
    for event in ("sunrise", "sunset"):
        result = event_time(doy, longitude, latitude, 0.0, event)
        assert result.occurs
        assert 0.0 <= result.value < 24.0


# ─────────────────────────────────────────────────────────────────────────────
# NOAA minutes-based model
# ─────────────────────────────────────────────────────────────────────────────

def test_solar_noon_at_greenwich() -> None:
    assert solar_noon_minutes(0.0, 0.0, 0.0) == 720.0
    assert solar_noon_minutes(15.0, 0.0, 1.0) == 720.0
    assert solar_noon_minutes(0.0, 4.0, 0.0) == 716.0


def test_equinox_day_at_equator_is_about_twelve_hours() -> None:
    events = day_events(0.0, 0.0, 0.0, 0.0, 0.0)

    assert events.mood is None
    assert events.noon_hours == 12.0
    # refraction and the solar disc stretch the day by a few minutes
    assert events.day_length == pytest.approx(12.11, abs=0.02)
    assert events.noon - events.sunrise == pytest.approx(events.sunset - events.noon)


@given(
    st.floats(min_value=-60.0, max_value=60.0),
    st.floats(min_value=-23.44, max_value=23.44),
    st.floats(min_value=-180.0, max_value=180.0),
    st.floats(min_value=-14.0, max_value=16.0),
)
def test_sunrise_before_noon_before_sunset(lat: float, dec: float, lon: float, eot: float) -> None:
    events = day_events(lat, dec, lon, eot, 0.0)

    assert events.mood is None
    assert events.sunrise < events.noon < events.sunset


@pytest.mark.parametrize("dec, mood", [(-23.4, SunMood.NEVER_RISES), (23.4, SunMood.NEVER_SETS)])
def test_noaa_polar_days(dec: float, mood: SunMood) -> None:
    rise = sunrise_minutes(78.0, dec, 15.6, 0.0, 1.0)
    fall = sunset_minutes(78.0, dec, 15.6, 0.0, 1.0)
    events = day_events(78.0, dec, 15.6, 0.0, 1.0)

    assert rise.mood is mood and fall.mood is mood
    assert events == DayEvents(sunrise=None, noon=events.noon, sunset=None, mood=mood)
    assert events.sunrise_hours is None
    assert events.sunset_hours is None
    assert events.day_length is None


def test_twilight_brackets_the_day() -> None:
    day = day_events(40.0, 10.0, -74.0, 3.6, -4.0, SUNRISE_ZENITH)
    civil = twilight_events(40.0, 10.0, -74.0, 3.6, -4.0, "civil")
    nautical = twilight_events(40.0, 10.0, -74.0, 3.6, -4.0, "nautical")
    astronomical = twilight_events(40.0, 10.0, -74.0, 3.6, -4.0, "astronomical")

    assert astronomical.sunrise < nautical.sunrise < civil.sunrise < day.sunrise
    assert day.sunset < civil.sunset < nautical.sunset < astronomical.sunset
    assert civil.noon == day.noon


def test_astronomical_twilight_lasts_all_night_in_summer() -> None:
    events = twilight_events(55.0, 23.4, 0.0, 0.0, 0.0, "astronomical")
    assert events.mood is SunMood.NEVER_SETS


@pytest.mark.parametrize("kind", ["sunrise", "golden", ""])
def test_unknown_twilight_kind(kind: str) -> None:
    with pytest.raises(ValueError):
        twilight_events(40.0, 10.0, 0.0, 0.0, 0.0, kind)


def test_day_events_for_date_line_timezone() -> None:
    # Apia, Samoa (UTC+13 at 171.76 W) on May 16th 2024
    events = day_events(-13.83, 19.0, -171.76, 3.6, 13.0)

    assert 0.0 <= events.noon < 1440.0
    assert events.noon_hours == pytest.approx(12.39, abs=0.05)
    assert 0.0 < events.sunrise < events.noon < events.sunset < 1440.0

    classical = SunRiseAndSet(doy=137, long=-171.76, lat=-13.83, timezone=13.0)
    assert events.sunrise_hours == pytest.approx(classical.sunrise_time().value, abs=0.1)
    assert events.sunset_hours == pytest.approx(classical.sunset_time().value, abs=0.1)
