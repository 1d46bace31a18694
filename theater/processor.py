"""
Statement Processor - Main Orchestrator

Coordinates statement generation through discrete, testable steps.
"""

import json
import logging
from typing import Any, Dict

from .aggregator import StatementAggregator
from .calculators import PricingRules
from .constants import DEFAULT_CONSTANTS, PricingConstants
from .models import Invoice, PlayCatalog, StatementInput, StatementResult
from .output import StatementFormatter
from .validators import InputValidator

logger = logging.getLogger(__name__)

# Errors caused by bad caller data: missing keys, wrong shapes, failed checks
INPUT_ERRORS = (ValueError, KeyError, TypeError, AttributeError)


class StatementProcessor:
    """
    Main orchestrator for statement generation.

    Implements a clear pipeline pattern:
    1. Validate Input
    2. Aggregate (check, price and sum each performance)
    3. Format Statement
    4. Build Result
    """

    def __init__(self, constants: PricingConstants = DEFAULT_CONSTANTS):
        self.validator = InputValidator()
        self.aggregator = StatementAggregator(PricingRules(constants))
        self.formatter = StatementFormatter()

    def process(self, invoice: Invoice, catalog: PlayCatalog) -> StatementResult:
        """
        Generate a statement for an invoice.

        Args:
            invoice: the customer's invoice
            catalog: play id to Play lookup, not mutated during the call

        Returns:
            StatementResult with line results, totals and statement text
        """
        try:
            # Step 1: Validate
            self.validator.validate(invoice, catalog)

            # Step 2: Aggregate
            lines, totals = self.aggregator.aggregate(invoice, catalog)
        except ValueError as e:
            logger.warning(f"Statement aborted for {invoice.customer!r}: {e}")
            raise

        # Steps 3 and 4: Format and build result
        result = StatementResult(
            customer=invoice.customer,
            lines=lines,
            totals=totals,
            text=self.formatter.format(invoice.customer, lines, totals),
            summary=self.formatter.to_dict(invoice.customer, lines, totals),
        )
        logger.info(
            f"Statement generated for {invoice.customer}: "
            f"{len(lines)} performances, {totals.total_amount} cents, {totals.total_credits} credits"
        )
        return result

    def statement(self, invoice: Invoice, catalog: PlayCatalog) -> str:
        """Return only the formatted statement text."""
        return self.process(invoice, catalog).text

    def process_from_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Generate a statement from raw dictionary input.

        Convenience method for API usage.
        """
        input_data = load_input(data)
        result = self.process(input_data.invoice, input_data.catalog)
        return result.to_dict()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def load_input(data: Dict[str, Any]) -> StatementInput:
    """Load invoice and catalog from a dict, logging anything it rejects."""
    try:
        return StatementInput.from_dict(data)
    except INPUT_ERRORS as e:
        logger.warning(f"Statement input rejected: {type(e).__name__}: {e}")
        raise


def statement_from_dict(input_data: Dict[str, Any]) -> str:
    """Generate statement text from a Python dict."""
    input_data = load_input(input_data)
    return StatementProcessor().statement(input_data.invoice, input_data.catalog)


def statement_from_json(json_input: str) -> str:
    """
    Generate a statement from JSON string input and return JSON string output.
    Errors are returned as a JSON body rather than raised.
    """
    try:
        input_data = json.loads(json_input)
        processor = StatementProcessor()
        result = processor.process_from_dict(input_data)
        return json.dumps(result, indent=2)

    except INPUT_ERRORS as e:
        error_response = {"error": str(e), "status": "validation_failed"}
        return json.dumps(error_response, indent=2)

    except Exception as e:
        logger.error(f"Unexpected statement error: {e}", exc_info=True)
        error_response = {"error": str(e), "status": "failed"}
        return json.dumps(error_response, indent=2)
