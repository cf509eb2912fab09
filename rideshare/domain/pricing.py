"""
Driver Revenue  (Strategy Pattern)
==================================

Formula
-------
Revenue = max(Cost - Platform_Fee, 0) x Driver_Share

* **Platform_Fee** is a flat amount kept by the platform on every trip
  (default 1.65).
* **Driver_Share** is the fraction of what remains that goes to the
  driver (default 80 %).

Worked examples with the defaults::

    cost = 10.00  ->  (10.00 - 1.65) x 0.8 = 6.68
    cost =  1.64  ->  max(-0.01, 0)  x 0.8 = 0.00

A cheap trip floors at zero; it is never an error.  Only a negative cost
is rejected.

Complexity: O(1) per trip.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from rideshare.config import settings

from .errors import ValidationError


# ── Strategy hierarchy ────────────────────────────────────────────────


class RevenueStrategy(ABC):
    @abstractmethod
    def driver_revenue(self, cost: float) -> float: ...

    @staticmethod
    def _check_cost(cost: float) -> None:
        if cost < 0:
            raise ValidationError(f"Trip cost cannot be negative: {cost}")


class PlatformFeeSplit(RevenueStrategy):
    def __init__(self, platform_fee: float = 1.65, driver_share: float = 0.80):
        if platform_fee < 0:
            raise ValidationError(f"Platform fee cannot be negative: {platform_fee}")
        if not 0 <= driver_share <= 1:
            raise ValidationError(f"Driver share must be within [0, 1]: {driver_share}")
        self.platform_fee = platform_fee
        self.driver_share = driver_share

    def driver_revenue(self, cost: float) -> float:
        self._check_cost(cost)
        return max(cost - self.platform_fee, 0.0) * self.driver_share


def default_strategy() -> RevenueStrategy:
    """Fee split configured from the application settings."""
    return PlatformFeeSplit(settings.platform_fee, settings.driver_share)
