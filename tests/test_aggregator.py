"""
Unit Tests for Statement Aggregator
"""

import pytest

from theater.aggregator import StatementAggregator
from theater.calculators import PricingRules
from theater.errors import UnknownPlayError, UnknownPlayTypeError
from theater.models import Invoice, LineResult, Performance, Play, PlayCatalog, PlayType, StatementTotals


class CountingPricingRules(PricingRules):
    """Records every pricing call."""

    def __init__(self):
        super().__init__()
        self.calls = []

    def price_and_credits(self, play_type, audience):
        self.calls.append((play_type, audience))
        return super().price_and_credits(play_type, audience)


class TestAggregate:
    """Test per-line results and totals."""

    @pytest.fixture
    def aggregator(self):
        return StatementAggregator()

    def test_reference_invoice(self, aggregator, invoice, catalog):
        lines, totals = aggregator.aggregate(invoice, catalog)

        assert lines == (
            LineResult(play_name="Hamlet", charge=65000, audience=55, credits=25),
            LineResult(play_name="As You Like It", charge=58000, audience=35, credits=12),
            LineResult(play_name="Othello", charge=50000, audience=40, credits=10),
        )
        assert totals == StatementTotals(total_amount=173000, total_credits=47)

    def test_totals_equal_sum_of_lines(self, aggregator, catalog):
        invoice = Invoice(
            customer="Globe",
            performances=tuple(
                Performance(play_id, audience)
                for play_id, audience in [
                    ("henry-v", 53), ("pericles", 17), ("as-like", 61), ("john", 0), ("hamlet", 31)
                ]
            ),
        )
        lines, totals = aggregator.aggregate(invoice, catalog)

        assert totals.total_amount == sum(line.charge for line in lines)
        assert totals.total_credits == sum(line.credits for line in lines)

    def test_empty_invoice(self, aggregator, catalog):
        lines, totals = aggregator.aggregate(Invoice(customer="Nobody"), catalog)

        assert lines == ()
        assert totals == StatementTotals(0, 0)

    def test_line_order_follows_invoice(self, aggregator, catalog):
        order = ["pericles", "hamlet", "henry-v", "as-like", "othello", "richard-iii"]
        invoice = Invoice(customer="Globe", performances=tuple(Performance(p, 25) for p in order))

        lines, _ = aggregator.aggregate(invoice, catalog)

        assert [line.play_name for line in lines] == [catalog[p].name for p in order]

    def test_prices_each_performance_once(self, invoice, catalog):
        rules = CountingPricingRules()
        StatementAggregator(rules).aggregate(invoice, catalog)

        assert rules.calls == [
            (PlayType.TRAGEDY, 55),
            (PlayType.COMEDY, 35),
            (PlayType.TRAGEDY, 40),
        ]

    def test_same_play_repeated(self, aggregator, catalog):
        invoice = Invoice(customer="Globe", performances=(Performance("hamlet", 55), Performance("hamlet", 55)))
        lines, totals = aggregator.aggregate(invoice, catalog)

        assert lines[0] == lines[1]
        assert totals == StatementTotals(130000, 50)


class TestAggregateErrors:
    """Test that failures abort the whole statement."""

    @pytest.fixture
    def aggregator(self):
        return StatementAggregator()

    def test_unknown_play_id(self, aggregator, catalog):
        invoice = Invoice(customer="BigCo", performances=(Performance("hamlet", 55), Performance("macbeth", 10)))

        with pytest.raises(UnknownPlayError) as exc_info:
            aggregator.aggregate(invoice, catalog)

        assert exc_info.value.play_id == "macbeth"
        assert exc_info.value.customer == "BigCo"
        assert "macbeth" in str(exc_info.value)

    def test_unknown_play_is_distinct_from_unknown_type(self, aggregator, catalog):
        invoice = Invoice(customer="BigCo", performances=(Performance("macbeth", 10),))

        with pytest.raises(UnknownPlayError) as exc_info:
            aggregator.aggregate(invoice, catalog)

        assert not isinstance(exc_info.value, UnknownPlayTypeError)

    def test_unsupported_type_in_catalog(self, aggregator):
        # Bypasses catalog loading, which would reject the type up front
        catalog = PlayCatalog({"cats": Play(name="Cats", type="musical")})
        invoice = Invoice(customer="BigCo", performances=(Performance("cats", 10),))

        with pytest.raises(UnknownPlayTypeError):
            aggregator.aggregate(invoice, catalog)


class TestPerformanceChecks:
    """Performances are checked in invoice order as they are priced."""

    @pytest.fixture
    def aggregator(self):
        return StatementAggregator()

    def test_negative_audience_aborts(self, aggregator, catalog):
        invoice = Invoice(customer="BigCo", performances=(Performance("as-like", -200),))

        with pytest.raises(ValueError, match="Performance 0 audience cannot be negative"):
            aggregator.aggregate(invoice, catalog)

    def test_unknown_play_before_bad_audience_is_reported_first(self, aggregator, catalog):
        invoice = Invoice(customer="BigCo", performances=(Performance("macbeth", 10), Performance("hamlet", -1)))

        with pytest.raises(UnknownPlayError) as exc_info:
            aggregator.aggregate(invoice, catalog)

        assert exc_info.value.play_id == "macbeth"

    def test_bad_audience_before_unknown_play_is_reported_first(self, aggregator, catalog):
        invoice = Invoice(customer="BigCo", performances=(Performance("hamlet", -1), Performance("macbeth", 10)))

        with pytest.raises(ValueError, match="Performance 0") as exc_info:
            aggregator.aggregate(invoice, catalog)

        assert not isinstance(exc_info.value, UnknownPlayError)

    def test_audience_checked_before_play_lookup(self, aggregator, catalog):
        invoice = Invoice(customer="BigCo", performances=(Performance("macbeth", -1),))

        with pytest.raises(ValueError, match="cannot be negative"):
            aggregator.aggregate(invoice, catalog)

    def test_empty_play_id(self, aggregator, catalog):
        invoice = Invoice(customer="BigCo", performances=(Performance("hamlet", 5), Performance("", 5)))

        with pytest.raises(ValueError, match="Performance 1 play id"):
            aggregator.aggregate(invoice, catalog)
