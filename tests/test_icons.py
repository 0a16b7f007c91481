import pytest

from wearface.core.icons import ICON_RANGES, Icon, resolve_icon


@pytest.mark.parametrize("code,expected", [
    (200, Icon.STORM),
    (201, Icon.STORM),
    (232, Icon.STORM),
    (300, Icon.LIGHT_RAIN),
    (321, Icon.LIGHT_RAIN),
    (500, Icon.RAIN),
    (504, Icon.RAIN),
    (511, Icon.SNOW),
    (520, Icon.RAIN),
    (531, Icon.RAIN),
    (600, Icon.SNOW),
    (622, Icon.SNOW),
    (701, Icon.FOG),
    (741, Icon.FOG),
    (761, Icon.FOG),
    (781, Icon.STORM),
    (800, Icon.CLEAR),
    (801, Icon.LIGHT_CLOUDS),
    (802, Icon.CLOUDY),
    (804, Icon.CLOUDY),
])
def test_known_codes(code, expected):
    assert resolve_icon(code) == expected


@pytest.mark.parametrize("code", [0, -1, 199, 233, 322, 505, 510, 512, 519, 532, 623, 700, 762, 780, 782, 805, 1000])
def test_unknown_codes_have_no_icon(code):
    assert resolve_icon(code) is None


def test_overlapping_code_takes_first_row():
    matches = [icon for first, last, icon in ICON_RANGES if first <= 761 <= last]

    assert matches == [Icon.FOG, Icon.STORM]
    assert resolve_icon(761) == Icon.FOG


def test_every_row_names_a_known_icon():
    assert {icon for _, _, icon in ICON_RANGES} == set(Icon.ALL)
