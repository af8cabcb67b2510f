import pytest
from pydantic import ValidationError

from connectagrapher.services.pricing_catalog import (
    DEFAULT_PRICING_CONFIG,
    Addon,
    ServiceType,
    Tier,
    build_pricing_config,
)


def test_defaults_match_published_rates():
    packages = DEFAULT_PRICING_CONFIG.packages
    assert packages.photoshoot.photography[Tier.PLATINUM].price == 500
    assert packages.photoshoot.photography[Tier.PLATINUM].locations == 2
    assert packages.photoshoot.videography[Tier.BRONZE] == 250
    assert packages.wedding.photography[Tier.GOLD].price == 1250
    assert packages.wedding.videography[Tier.PLATINUM] == 1800
    assert packages.event.photography.base_rate == 150
    assert packages.event.videography.minimum_hours == 2
    assert DEFAULT_PRICING_CONFIG.fees.transportation.resort_corridor == 50


def test_config_is_frozen():
    with pytest.raises(ValidationError):
        DEFAULT_PRICING_CONFIG.fees.additional_person = 0


def test_partial_override_keeps_other_defaults():
    config = build_pricing_config({"addons": {"studio_rental": 95}})
    assert config.addons.studio_rental == 95
    assert config.addons.price_for(Addon.DRONE, ServiceType.WEDDING) == 250


def test_unknown_tier_key_is_rejected():
    with pytest.raises(ValidationError):
        build_pricing_config({"packages": {"wedding": {"videography": {"diamond": 9000}}}})


def test_negative_price_is_rejected():
    with pytest.raises(ValidationError):
        build_pricing_config({"fees": {"additional_person": -5}})


@pytest.mark.parametrize("raw", ["highlightReel", "highlight-reel", "highlight_reel"])
def test_addon_spellings(raw):
    assert Addon(raw) is Addon.HIGHLIGHT_REEL
