"""
Amount Calculator

Computes the charge for a single performance in minor currency units.
Each play type has its own formula; all arithmetic is integer.
"""

from ..constants import DEFAULT_CONSTANTS, PricingConstants
from ..errors import UnknownPlayTypeError
from ..models import PlayType


class AmountCalculator:
    """Calculates the charge for a performance based on play type."""

    def __init__(self, constants: PricingConstants = DEFAULT_CONSTANTS):
        self.constants = constants
        self._formulas = {
            PlayType.TRAGEDY: self._calculate_tragedy,
            PlayType.COMEDY: self._calculate_comedy,
            PlayType.HISTORY: self._calculate_history,
            PlayType.PASTORAL: self._calculate_pastoral,
        }

    def calculate(self, play_type: PlayType, audience: int) -> int:
        """Return the charge in cents for a performance of this type."""
        formula = self._formulas.get(play_type)
        if formula is None:
            raise UnknownPlayTypeError(play_type)
        return formula(audience)

    @staticmethod
    def _over_threshold(audience: int, threshold: int, per_person: int) -> int:
        """Surcharge for every seat above the threshold."""
        if audience <= threshold:
            return 0
        return per_person * (audience - threshold)

    def _calculate_tragedy(self, audience: int) -> int:
        c = self.constants
        return c.tragedy_base_amount + self._over_threshold(
            audience, c.tragedy_audience_threshold, c.tragedy_over_base_capacity_per_person
        )

    def _calculate_comedy(self, audience: int) -> int:
        """
        Comedy adds a flat over-capacity amount once the threshold is passed,
        and a per-seat amount for every seat regardless of threshold.
        """
        c = self.constants
        result = c.comedy_base_amount
        if audience > c.comedy_audience_threshold:
            result += c.comedy_over_base_capacity_amount + self._over_threshold(
                audience, c.comedy_audience_threshold, c.comedy_over_base_capacity_per_person
            )
        result += c.comedy_amount_per_audience * audience
        return result

    def _calculate_history(self, audience: int) -> int:
        c = self.constants
        return c.history_base_amount + self._over_threshold(
            audience, c.history_audience_threshold, c.history_over_base_capacity_per_person
        )

    def _calculate_pastoral(self, audience: int) -> int:
        c = self.constants
        return c.pastoral_base_amount + self._over_threshold(
            audience, c.pastoral_audience_threshold, c.pastoral_over_base_capacity_per_person
        )
