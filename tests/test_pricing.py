"""Unit tests for the driver revenue strategies."""

import pytest

from rideshare.config import Settings
from rideshare.domain.errors import ValidationError
from rideshare.domain.pricing import PlatformFeeSplit, default_strategy


class TestPlatformFeeSplit:
    def setup_method(self):
        self.strategy = PlatformFeeSplit(platform_fee=1.65, driver_share=0.8)

    def test_worked_example(self):
        assert self.strategy.driver_revenue(10.00) == pytest.approx(6.68)  # (10 - 1.65) * 0.8

    def test_cost_below_fee_floors_at_zero(self):
        assert self.strategy.driver_revenue(1.64) == 0.0

    def test_cost_equal_to_fee(self):
        assert self.strategy.driver_revenue(1.65) == pytest.approx(0.0)

    def test_zero_cost(self):
        assert self.strategy.driver_revenue(0) == 0.0

    def test_negative_cost_fails(self):
        with pytest.raises(ValidationError, match="negative"):
            self.strategy.driver_revenue(-0.01)

    def test_deterministic(self):
        assert self.strategy.driver_revenue(23.45) == self.strategy.driver_revenue(23.45)

    def test_rejects_negative_fee(self):
        with pytest.raises(ValidationError):
            PlatformFeeSplit(platform_fee=-1)

    def test_rejects_share_above_one(self):
        with pytest.raises(ValidationError):
            PlatformFeeSplit(driver_share=1.5)


class TestDefaultStrategy:
    def test_uses_settings(self, monkeypatch):
        monkeypatch.setattr(
            "rideshare.domain.pricing.settings",
            Settings(platform_fee=0, driver_share=0.5),
        )
        assert default_strategy().driver_revenue(10.0) == pytest.approx(5.0)
