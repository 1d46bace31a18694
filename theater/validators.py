"""
Input Validation for the Theater Statement Engine

Raises ValueError with clear messages for any constraint violations.
Invoice-level and catalog-level checks run before processing; each
performance is checked as it is priced, so the first offending
performance in invoice order is the one reported.
"""

from .models import Invoice, Performance, PlayCatalog


def validate_audience(audience, label: str = "audience") -> None:
    """Audience must be a non-negative int."""
    # bool is an int subclass
    if not isinstance(audience, int) or isinstance(audience, bool):
        raise ValueError(f"{label} must be an integer, got: {audience!r}")
    if audience < 0:
        raise ValueError(f"{label} cannot be negative, got: {audience}")


def validate_performance(index: int, performance: Performance) -> None:
    if not isinstance(performance.play_id, str) or not performance.play_id:
        raise ValueError(f"Performance {index} play id must be a non-empty string, got: {performance.play_id!r}")
    validate_audience(performance.audience, f"Performance {index} audience")


class InputValidator:
    """Validates statement input according to business rules."""

    def validate(self, invoice: Invoice, catalog: PlayCatalog) -> None:
        """
        Run invoice and catalog validations. Raises ValueError if any check fails.
        """
        self._validate_invoice(invoice)
        self._validate_catalog(catalog)

    def _validate_invoice(self, invoice: Invoice) -> None:
        if not isinstance(invoice.customer, str) or not invoice.customer.strip():
            raise ValueError(f"customer must be a non-empty string, got: {invoice.customer!r}")

    def _validate_catalog(self, catalog: PlayCatalog) -> None:
        for play_id, play in catalog.items():
            if not play.name:
                raise ValueError(f"Play {play_id} must have a name")
