import os

import pytest

from pricing import (
    LinearPricingPolicy,
    PricingConfig,
    PricingConfigError,
    StartedKilometrePricingPolicy,
    TieredPricingPolicy,
    load_pricing_config,
)

ENV_VARS = [
    "DELIVEREASE_PRICING_POLICY",
    "DELIVEREASE_STANDARD_BASE_PRICE",
    "DELIVEREASE_URGENT_BASE_PRICE",
    "DELIVEREASE_LINEAR_BASE_FEE",
    "DELIVEREASE_LINEAR_RATE_PER_KM",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment():
    config = load_pricing_config()

    assert config.policy_name == "tiered"
    assert config.tiers["standard"].base_price == 10.0
    assert config.tiers["urgent"].base_price == 15.0
    assert isinstance(config.build_policy(), TieredPricingPolicy)


def test_tier_prices_from_environment(monkeypatch):
    monkeypatch.setenv("DELIVEREASE_STANDARD_BASE_PRICE", "12.5")
    monkeypatch.setenv("DELIVEREASE_URGENT_BASE_PRICE", "20")

    config = load_pricing_config()

    assert config.tiers["standard"].base_price == 12.5
    assert config.tiers["urgent"].base_price == 20.0
    # display metadata survives the override
    assert config.tiers["urgent"].name == "Urgent"


def test_linear_policy_from_environment(monkeypatch):
    monkeypatch.setenv("DELIVEREASE_PRICING_POLICY", "Linear")
    monkeypatch.setenv("DELIVEREASE_LINEAR_BASE_FEE", "4")
    monkeypatch.setenv("DELIVEREASE_LINEAR_RATE_PER_KM", "3")

    policy = load_pricing_config().build_policy()

    assert isinstance(policy, LinearPricingPolicy)
    assert policy.quote(2.0).cost == 10.0


def test_started_km_policy_from_environment(monkeypatch):
    monkeypatch.setenv("DELIVEREASE_PRICING_POLICY", "started_km")
    assert isinstance(load_pricing_config().build_policy(), StartedKilometrePricingPolicy)


@pytest.mark.parametrize(
    "name, value",
    [
        ("DELIVEREASE_STANDARD_BASE_PRICE", "ten"),
        ("DELIVEREASE_URGENT_BASE_PRICE", "0"),
        ("DELIVEREASE_PRICING_POLICY", "surge"),
        ("DELIVEREASE_LINEAR_RATE_PER_KM", "-2"),
        ("DELIVEREASE_LINEAR_BASE_FEE", "-1"),
    ],
)
def test_malformed_values_raise(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(PricingConfigError):
        load_pricing_config()


def test_linear_knobs_checked_under_tiered_policy():
    config = PricingConfig(policy_name="tiered", linear_rate_per_km=-2.0)

    with pytest.raises(PricingConfigError, match="rate_per_km"):
        config.validate()


def test_env_file_is_read(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("DELIVEREASE_STANDARD_BASE_PRICE=11\n", encoding="utf-8")

    try:
        config = load_pricing_config(env_file=str(env_file))
    finally:
        # load_dotenv writes straight into os.environ
        os.environ.pop("DELIVEREASE_STANDARD_BASE_PRICE", None)

    assert config.tiers["standard"].base_price == 11.0
