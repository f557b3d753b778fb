"""
Output Builder

Constructs the final API response from processing context.
"""

from .formatting import DEFAULT_FORMAT, FormatConfig, format_currency, format_percent, to_money
from .models import ProcessingContext, StatementResult


class OutputBuilder:
    """Builds the final output response."""

    def __init__(self, format_config: FormatConfig | None = None):
        self.format_config = format_config or DEFAULT_FORMAT

    def build(self, ctx: ProcessingContext) -> StatementResult:
        """Construct the complete statement result from processing context."""
        return StatementResult(
            statement_summary=self._build_statement_summary(ctx),
            calculations=self._build_calculations(ctx),
            tier_breakdown=self._build_tier_breakdown(ctx),
            deal_commissions=self._build_deal_commissions(ctx),
        )

    def _money(self, value: float) -> str:
        return format_currency(value, self.format_config)

    def _pct(self, value: float) -> str:
        return format_percent(value, config=self.format_config)

    def _build_statement_summary(self, ctx: ProcessingContext) -> dict:
        """Build statement summary section."""
        statement = ctx.statement
        summary = ctx.summary
        return {
            "rep_name": statement.rep_name,
            "period": statement.period,
            "plan_type": statement.plan_type,
            "quota": to_money(statement.quota),
            "bookings": to_money(statement.total_bookings),
            "attainment_percent": ctx.commission.attainment_percent,
            "gross_commission": to_money(summary.gross_commission),
            "adjustments": to_money(summary.adjustments),
            "net_commission": to_money(summary.net_commission),
            "deal_count": len(statement.deals),
        }

    def _build_calculations(self, ctx: ProcessingContext) -> dict:
        """Build calculations section with value and dynamic description for each field."""
        statement = ctx.statement
        commission = ctx.commission
        summary = ctx.summary

        quota = statement.quota
        bookings = statement.total_bookings
        adjustments = summary.adjustments
        sign = "+" if adjustments >= 0 else "-"

        if statement.plan_type == 'flat':
            gross_desc = f"{self._pct(statement.base_rate_percent)} flat rate × {self._money(bookings)} bookings"
        elif statement.plan_type == 'sdr':
            gross_desc = (
                f"{statement.opportunity_count} opportunities × "
                f"{self._money(statement.per_opportunity_rate)} per opportunity"
            )
        else:
            gross_desc = " + ".join(
                f"{entry.tier_name} ({self._money(entry.commission_amount)})" for entry in commission.tier_breakdown
            ) or "No bookings fell inside any commission tier"

        return {
            "quota": {
                "value": to_money(quota),
                "description": f"Quota target for {statement.period or 'the period'}" if quota > 0 else "No positive quota - commission is not calculated",
            },
            "bookings": {
                "value": to_money(bookings),
                "description": "Bookings total supplied with the statement" if statement.bookings is not None else f"Sum of {len(statement.deals)} closed deal(s)",
            },
            "attainment_percent": {
                "value": commission.attainment_percent,
                "description": f"{self._money(bookings)} / {self._money(quota)} = {self._pct(commission.attainment_percent)}" if quota > 0 else "Attainment is 0% when quota is not positive",
            },
            "gross_commission": {
                "value": to_money(summary.gross_commission),
                "description": gross_desc,
            },
            "adjustments": {
                "value": to_money(adjustments),
                "description": "Manual adjustments applied to the statement" if adjustments else "No adjustments for this statement",
            },
            "net_commission": {
                "value": to_money(summary.net_commission),
                "description": f"gross ({self._money(summary.gross_commission)}) {sign} adjustments ({self._money(abs(adjustments))}) = {self._money(summary.net_commission)}",
            },
        }

    def _build_tier_breakdown(self, ctx: ProcessingContext) -> list:
        """Build per-tier breakdown section."""
        return [
            {
                "tier_name": entry.tier_name,
                "bookings_in_tier": to_money(entry.bookings_in_tier),
                "rate_applied": entry.rate_applied,
                "commission_amount": to_money(entry.commission_amount),
            }
            for entry in ctx.commission.tier_breakdown
        ]

    def _build_deal_commissions(self, ctx: ProcessingContext) -> list:
        """Build per-deal attribution section, in close date order."""
        return [
            {
                "deal_id": record.deal_id,
                "deal_name": record.deal_name,
                "deal_amount": to_money(record.deal_amount),
                "commission_rate": record.commission_rate,
                "commission_amount": to_money(record.commission_amount),
                "tier_applied": record.tier_applied,
                "attainment_at_deal": record.attainment_at_deal,
                "running_bookings": to_money(record.running_bookings),
            }
            for record in ctx.deal_commissions
        ]
