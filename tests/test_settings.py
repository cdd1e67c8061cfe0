import pytest

from countryclock import ClockSettings


def test_defaults():
    settings = ClockSettings()
    assert settings.locale == "en_US"
    assert settings.hour12 is True
    assert settings.zone_limit == 5
    assert settings.data_dir is None


@pytest.mark.parametrize("max_zones, expected", [(1, 1), (3, 3), (5, 5), (9, 5), (0, 1)])
def test_zone_limit_is_clamped(max_zones, expected):
    assert ClockSettings(max_zones=max_zones).zone_limit == expected
