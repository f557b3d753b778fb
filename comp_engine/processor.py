"""
Statement Processor - Main Orchestrator

Coordinates the commission statement pipeline through discrete, testable steps.
"""

import json
import logging
from typing import Any, Dict

from .calculators import AggregateCommissionCalculator, DealAttributionCalculator, SimpleCommissionCalculator
from .models import CommissionCalculation, ProcessingContext, StatementInput, StatementResult, StatementSummary
from .output import OutputBuilder
from .validators import InputValidator

logger = logging.getLogger(__name__)


class StatementProcessor:
    """
    Main orchestrator for commission statement processing.

    Implements a clear pipeline pattern:
    1. Validate Input
    2. Build Context
    3. Calculate Commission (tiered, flat or SDR)
    4. Attribute Deals
    5. Summarize (gross + adjustments = net)
    6. Build Output
    """

    def __init__(self):
        self.validator = InputValidator()
        self.aggregate_calculator = AggregateCommissionCalculator()
        self.attribution_calculator = DealAttributionCalculator()
        self.simple_calculator = SimpleCommissionCalculator()
        self.output_builder = OutputBuilder()

    def process(self, statement: StatementInput) -> StatementResult:
        """
        Process a statement through the complete pipeline.

        Args:
            statement: Parsed StatementInput object

        Returns:
            StatementResult with summary, calculations and per-deal records
        """
        # Step 2: Build context
        ctx = ProcessingContext(statement=statement)

        # Step 3: Calculate commission
        ctx.commission = self._calculate_commission(statement)

        # Step 4: Attribute deals (only accelerator plans carry a running rate)
        if statement.plan_type == 'tiered':
            ctx.deal_commissions = self.attribution_calculator.attribute(
                statement.deals, statement.quota, statement.tiers
            )

        # Step 5: Summarize
        ctx.summary = StatementSummary(
            gross_commission=ctx.commission.gross_commission,
            adjustments=statement.adjustments,
            net_commission=ctx.commission.gross_commission + statement.adjustments,
        )

        # Step 6: Build output
        return self.output_builder.build(ctx)

    def process_from_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Process a statement from raw dictionary input.

        Convenience method for API usage.
        """
        # Step 1: Validate
        self.validator.validate(data)

        statement = StatementInput.from_dict(data)
        result = self.process(statement)
        return self._result_to_dict(result)

    def _calculate_commission(self, statement: StatementInput) -> CommissionCalculation:
        """
        Calculate gross commission for the statement's plan type.

        Flat and SDR plans have no breakdown, but still report attainment
        against quota when there is one.
        """
        bookings = statement.total_bookings

        if statement.plan_type == 'tiered':
            return self.aggregate_calculator.compute(bookings, statement.quota, statement.tiers)

        if statement.plan_type == 'flat':
            gross = self.simple_calculator.flat(bookings, statement.base_rate_percent)
        else:
            gross = self.simple_calculator.sdr(statement.opportunity_count, statement.per_opportunity_rate)

        attainment = (bookings / statement.quota) * 100 if statement.quota > 0 else 0.0
        return CommissionCalculation(gross_commission=gross, tier_breakdown=[], attainment_percent=attainment)

    def _result_to_dict(self, result: StatementResult) -> Dict[str, Any]:
        """Convert StatementResult to dictionary for API response."""
        return {
            "statement_summary": result.statement_summary,
            "calculations": result.calculations,
            "tier_breakdown": result.tier_breakdown,
            "deal_commissions": result.deal_commissions,
        }


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def process_statement_from_dict(input_data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Process a statement from Python dict and return Python dict.
    """
    processor = StatementProcessor()
    return processor.process_from_dict(input_data)


def process_statement_from_json(json_input: str) -> str:
    """
    Process a statement from JSON string input and return JSON string output.
    """
    try:
        input_data = json.loads(json_input)
        processor = StatementProcessor()
        result = processor.process_from_dict(input_data)
        return json.dumps(result, indent=2)

    except ValueError as e:
        # json.JSONDecodeError is a ValueError too
        error_response = {"error": str(e), "status": "validation_failed"}
        return json.dumps(error_response, indent=2)

    except Exception as e:
        logger.error(f"Statement processing error: {str(e)}")
        error_response = {"error": str(e), "status": "failed"}
        return json.dumps(error_response, indent=2)
