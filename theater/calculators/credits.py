"""
Volume Credit Calculator

Computes the loyalty credits earned for a single performance.
"""

from ..constants import DEFAULT_CONSTANTS, PricingConstants
from ..errors import UnknownPlayTypeError
from ..models import PlayType


class VolumeCreditCalculator:
    """Calculates volume credits for a performance based on play type."""

    def __init__(self, constants: PricingConstants = DEFAULT_CONSTANTS):
        self.constants = constants
        self._formulas = {
            PlayType.TRAGEDY: self._calculate_tragedy,
            PlayType.COMEDY: self._calculate_comedy,
            PlayType.HISTORY: self._calculate_history,
            PlayType.PASTORAL: self._calculate_pastoral,
        }

    def calculate(self, play_type: PlayType, audience: int) -> int:
        """
        Return the credits earned for a performance of this type.

        Every type earns one credit per seat above its credit threshold.
        Comedy and pastoral add a bonus of one credit per N seats.
        """
        formula = self._formulas.get(play_type)
        if formula is None:
            raise UnknownPlayTypeError(play_type)
        return formula(audience)

    @staticmethod
    def _base_credits(audience: int, threshold: int) -> int:
        return max(audience - threshold, 0)

    def _calculate_tragedy(self, audience: int) -> int:
        return self._base_credits(audience, self.constants.base_volume_credit_threshold)

    def _calculate_comedy(self, audience: int) -> int:
        c = self.constants
        return (
            self._base_credits(audience, c.base_volume_credit_threshold)
            + audience // c.comedy_extra_volume_factor
        )

    def _calculate_history(self, audience: int) -> int:
        return self._base_credits(audience, self.constants.history_volume_credit_threshold)

    def _calculate_pastoral(self, audience: int) -> int:
        c = self.constants
        return (
            self._base_credits(audience, c.pastoral_volume_credit_threshold)
            + audience // c.pastoral_extra_volume_factor
        )
