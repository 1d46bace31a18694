"""
Pricing Constants

Thresholds and rates used by the pricing rules. Amounts are in minor
currency units (cents).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PricingConstants:
    """Configuration table for all play-type pricing formulas."""

    # Volume credits
    base_volume_credit_threshold: int = 30
    comedy_extra_volume_factor: int = 5
    history_volume_credit_threshold: int = 20
    pastoral_volume_credit_threshold: int = 20
    pastoral_extra_volume_factor: int = 2

    # Tragedy
    tragedy_base_amount: int = 40000
    tragedy_audience_threshold: int = 30
    tragedy_over_base_capacity_per_person: int = 1000

    # Comedy
    comedy_base_amount: int = 30000
    comedy_audience_threshold: int = 20
    comedy_over_base_capacity_amount: int = 10000
    comedy_over_base_capacity_per_person: int = 500
    comedy_amount_per_audience: int = 300

    # History
    history_base_amount: int = 20000
    history_audience_threshold: int = 20
    history_over_base_capacity_per_person: int = 1000

    # Pastoral
    pastoral_base_amount: int = 40000
    pastoral_audience_threshold: int = 20
    pastoral_over_base_capacity_per_person: int = 2500

    # Currency
    minor_units_per_major: int = 100

    def __post_init__(self):
        for name, value in vars(self).items():
            if not isinstance(value, int) or isinstance(value, bool) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got: {value!r}")
        for name in ("comedy_extra_volume_factor", "pastoral_extra_volume_factor", "minor_units_per_major"):
            if getattr(self, name) == 0:
                raise ValueError(f"{name} cannot be zero")


DEFAULT_CONSTANTS = PricingConstants()
