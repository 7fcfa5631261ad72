"""Recompute orchestrator: composes the engine sub-modules into one analysis.

Pure computation. No I/O. InputSnapshot in, MortgageAnalysis out. Each call
owns its schedule and derived series; nothing is cached between calls.
"""

import logging
from collections.abc import Iterable

from mortgage_calc.config import settings
from mortgage_calc.models.inputs import InputSnapshot
from mortgage_calc.models.results import MortgageAnalysis, MortgageSummary
from mortgage_calc.models.schedule import check_categories

from mortgage_calc.engine.payment import principal_and_interest
from mortgage_calc.engine.amortization import build_schedule
from mortgage_calc.engine.aggregation import (
    count_pmi_months,
    cumulative_sum_by_fields,
    debt_to_income,
    lifetime_payment,
)

logger = logging.getLogger(__name__)

CUMULATIVE_CATEGORIES: tuple[str, ...] = tuple(settings.cumulative_categories)


def analyze(
    snapshot: InputSnapshot,
    cumulative_categories: Iterable[str] = CUMULATIVE_CATEGORIES,
) -> MortgageAnalysis:
    """Run a complete recompute for one snapshot.

    Returns MortgageAnalysis with the schedule, its cumulative series and
    the summary figures.
    """
    cumulative_categories = check_categories(cumulative_categories)

    pi = principal_and_interest(snapshot)
    schedule = build_schedule(snapshot, pi)
    cumulative = cumulative_sum_by_fields(schedule, cumulative_categories)

    pmi_months = count_pmi_months(schedule)
    monthly = pi + snapshot.monthly_extras
    # No price means no equity target, so PMI is never shown
    show_pmi = (
        snapshot.price > 0
        and snapshot.pmi_monthly > 0
        and snapshot.down_payment_pct < snapshot.pmi_equity_threshold
    )

    summary = MortgageSummary(
        loan_amount=snapshot.loan_amount,
        principal_and_interest=pi,
        monthly_payment=monthly,
        monthly_payment_with_pmi=monthly + snapshot.pmi_monthly,
        show_pmi=show_pmi,
        pmi_months=pmi_months,
        pmi_total=pmi_months * snapshot.pmi_monthly,
        lifetime_payment=lifetime_payment(schedule, pi),
        purchase_payment=snapshot.down_payment + snapshot.closing_cost,
        debt_to_income=debt_to_income(snapshot, pi),
    )

    logger.debug(
        "Recomputed schedule: loan=%s periods=%d payment=%s pmi_months=%d",
        snapshot.loan_amount, len(schedule), pi, pmi_months,
    )

    return MortgageAnalysis(
        snapshot=snapshot,
        summary=summary,
        schedule=schedule,
        cumulative=cumulative,
        cumulative_categories=cumulative_categories,
    )
