"""
Pricing Rules

Single entry point mapping (play type, audience) to (charge, credits).
"""

from ..constants import DEFAULT_CONSTANTS, PricingConstants
from ..models import PlayType
from ..validators import validate_audience
from .amount import AmountCalculator
from .credits import VolumeCreditCalculator


class PricingRules:
    """Combines the amount and volume credit calculators."""

    def __init__(self, constants: PricingConstants = DEFAULT_CONSTANTS):
        self.constants = constants
        self.amount_calculator = AmountCalculator(constants)
        self.credit_calculator = VolumeCreditCalculator(constants)

    def price_and_credits(self, play_type, audience: int) -> tuple[int, int]:
        """
        Price a single performance.

        Args:
            play_type: PlayType, or its string name
            audience: number of seats sold, >= 0

        Returns:
            (charge in cents, volume credits)

        Raises:
            ValueError: audience is not a non-negative integer
            UnknownPlayTypeError: play_type is not a supported genre
        """
        validate_audience(audience)
        play_type = PlayType.parse(play_type)
        return (
            self.amount_calculator.calculate(play_type, audience),
            self.credit_calculator.calculate(play_type, audience),
        )
