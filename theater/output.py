"""
Statement Formatter

Renders aggregated line results and totals as statement text, or as a
JSON-ready dict for the API.
"""

from decimal import ROUND_HALF_UP, Decimal

from .constants import DEFAULT_CONSTANTS
from .models import LineResult, StatementTotals


def to_major_units(amount: int, minor_units_per_major: int = DEFAULT_CONSTANTS.minor_units_per_major) -> Decimal:
    """Convert integer cents to a Decimal amount with 2 decimal places."""
    return (Decimal(amount) / Decimal(minor_units_per_major)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def to_money(amount: int) -> float:
    """Convert cents to float dollars with 2 decimal places."""
    return float(to_major_units(amount))


def usd(amount: int) -> str:
    """Format an amount in cents as a US currency string, e.g. $1,730.00 or -$5.00."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${to_major_units(abs(amount)):,.2f}"


class StatementFormatter:
    """Builds the statement text."""

    def __init__(self, currency=usd):
        self.currency = currency

    def format(self, customer: str, lines: tuple[LineResult, ...], totals: StatementTotals) -> str:
        result = [f"Statement for {customer}"]

        # build a line for each performance
        for line in lines:
            result.append(f"  {line.play_name}: {self.currency(line.charge)} ({line.audience} seats)")

        # footer lines
        result.append(f"Amount owed is {self.currency(totals.total_amount)}")
        result.append(f"You earned {totals.total_credits} credits")
        return "".join(f"{row}\n" for row in result)

    def to_dict(self, customer: str, lines: tuple[LineResult, ...], totals: StatementTotals) -> dict:
        """Build the statement as an API response section."""
        return {
            "customer": customer,
            "lines": [
                {
                    "play": line.play_name,
                    "audience": line.audience,
                    "amount": to_money(line.charge),
                    "amount_formatted": self.currency(line.charge),
                    "credits": line.credits,
                }
                for line in lines
            ],
            "totals": {
                "amount_cents": totals.total_amount,
                "amount": to_money(totals.total_amount),
                "amount_formatted": self.currency(totals.total_amount),
                "credits": totals.total_credits,
            },
        }
