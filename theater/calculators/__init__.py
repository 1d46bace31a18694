"""
Calculators Package

Provides the pricing components for statement generation.
"""

from .amount import AmountCalculator
from .credits import VolumeCreditCalculator
from .pricing import PricingRules

__all__ = [
    "AmountCalculator",
    "VolumeCreditCalculator",
    "PricingRules",
]
