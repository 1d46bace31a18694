"""
Statement Aggregator

Prices every performance on an invoice and folds the results into
per-line results plus totals.
"""

from functools import reduce

from .calculators import PricingRules
from .errors import UnknownPlayError
from .models import Invoice, LineResult, Performance, Play, PlayCatalog, StatementTotals
from .validators import validate_performance


class StatementAggregator:
    """Resolves plays and accumulates line results in invoice order."""

    def __init__(self, pricing_rules: PricingRules | None = None):
        self.pricing_rules = pricing_rules or PricingRules()

    def aggregate(
        self, invoice: Invoice, catalog: PlayCatalog
    ) -> tuple[tuple[LineResult, ...], StatementTotals]:
        """
        Price each performance once and sum the results.

        Raises on the first performance that cannot be priced, checking its
        fields before resolving its play; no partial result is returned.
        """

        def step(acc, indexed):
            lines, totals = acc
            index, performance = indexed
            validate_performance(index, performance)
            line = self._price_line(performance, invoice, catalog)
            return lines + (line,), totals + line

        return reduce(step, enumerate(invoice.performances), ((), StatementTotals()))

    def _price_line(self, performance: Performance, invoice: Invoice, catalog: PlayCatalog) -> LineResult:
        play = self._resolve_play(performance, invoice, catalog)
        charge, credits = self.pricing_rules.price_and_credits(play.type, performance.audience)
        return LineResult(
            play_name=play.name,
            charge=charge,
            audience=performance.audience,
            credits=credits,
        )

    @staticmethod
    def _resolve_play(performance: Performance, invoice: Invoice, catalog: PlayCatalog) -> Play:
        try:
            return catalog[performance.play_id]
        except KeyError:
            raise UnknownPlayError(performance.play_id, invoice.customer) from None
