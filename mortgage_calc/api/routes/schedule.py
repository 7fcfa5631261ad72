"""Schedule routes: the recompute exposed over HTTP."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from mortgage_calc.api.schemas import (
    ScheduleRequest,
    NearestRequest,
    ScheduleResponse,
    NearestResponse,
    LayersResponse,
    SnapshotResponse,
    SummaryResponse,
    PaymentRecordResponse,
    StackLayerResponse,
    StackPointResponse,
    CategorySeriesResponse,
    SeriesPointResponse,
)
from mortgage_calc.api.deps import get_settings
from mortgage_calc.config import Settings
from mortgage_calc.models.inputs import InputSnapshot, RawInputs
from mortgage_calc.models.results import MortgageAnalysis
from mortgage_calc.models.schedule import CATEGORY_KEYS, PaymentCategory, PaymentRecord
from mortgage_calc.engine.amortization import equity_by_month
from mortgage_calc.engine.calculator import CUMULATIVE_CATEGORIES, analyze
from mortgage_calc.engine.labels import input_hints, summary_labels, tooltip_text
from mortgage_calc.engine.nearest import nearest_period
from mortgage_calc.engine.snapshot_builder import build_snapshot
from mortgage_calc.engine.stack import (
    overlaid_category_at,
    overlaid_series,
    stack_layers,
    stacked_category_at,
    value_axis_max,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["schedule"])


def _run(req: ScheduleRequest, cfg: Settings) -> MortgageAnalysis:
    """Build the snapshot and recompute, mapping engine errors to 400."""
    raw = RawInputs(**req.model_dump(exclude={"cumulative_categories"}))
    snapshot = build_snapshot(raw, cfg)
    # An explicit empty list is a valid choice: nothing accumulates
    categories = req.cumulative_categories
    if categories is None:
        categories = CUMULATIVE_CATEGORIES
    try:
        return analyze(snapshot, categories)
    except ValueError as e:
        logger.warning("Rejected schedule request: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


def _snapshot_response(s: InputSnapshot) -> SnapshotResponse:
    return SnapshotResponse(
        price=s.price,
        down_payment=s.down_payment,
        loan_amount=s.loan_amount,
        annual_rate=s.annual_rate,
        term_years=s.term_years,
        period_count=s.period_count,
        hoa=s.hoa,
        property_tax=s.property_tax,
        homeowners_insurance=s.homeowners_insurance,
        pmi_monthly=s.pmi_monthly,
        pmi_equity_threshold=s.pmi_equity_threshold,
        closing_cost=s.closing_cost,
        home_value=s.home_value,
        annual_income=s.annual_income,
        monthly_debt=s.monthly_debt,
    )


def _record_response(p: PaymentRecord, balance=None) -> PaymentRecordResponse:
    return PaymentRecordResponse(
        month=p.month,
        principal=p.principal,
        interest=p.interest,
        hoa=p.hoa,
        property_tax=p.property_tax,
        homeowners_insurance=p.homeowners_insurance,
        pmi=p.pmi,
        principal_balance=balance,
    )


@router.post("/schedule", response_model=ScheduleResponse)
def compute_schedule(req: ScheduleRequest, cfg: Settings = Depends(get_settings)):
    """Primary endpoint: form values → schedule, cumulative series and summary."""
    result = _run(req, cfg)
    snapshot = result.snapshot
    s = result.summary

    balances = [snapshot.price - e for e in equity_by_month(snapshot, result.schedule)]

    return ScheduleResponse(
        snapshot=_snapshot_response(snapshot),
        summary=SummaryResponse(
            loan_amount=s.loan_amount,
            principal_and_interest=s.principal_and_interest,
            monthly_payment=s.monthly_payment,
            monthly_payment_with_pmi=s.monthly_payment_with_pmi,
            show_pmi=s.show_pmi,
            pmi_months=s.pmi_months,
            pmi_total=s.pmi_total,
            lifetime_payment=s.lifetime_payment,
            purchase_payment=s.purchase_payment,
            debt_to_income=s.debt_to_income,
        ),
        labels=summary_labels(s),
        hints=input_hints(snapshot),
        schedule=[_record_response(p, b) for p, b in zip(result.schedule, balances)],
        cumulative=[_record_response(p) for p in result.cumulative],
        cumulative_categories=list(result.cumulative_categories),
    )


@router.post("/schedule/nearest", response_model=NearestResponse)
def nearest(req: NearestRequest, cfg: Settings = Depends(get_settings)):
    """Record under the pointer, with its tooltip text.

    When y is given, also names the category drawn at that height so the
    tooltip can emphasise it.
    """
    result = _run(req.inputs, cfg)
    if req.cumulative:
        records, keys = result.cumulative, result.cumulative_categories
    else:
        records, keys = result.schedule, CATEGORY_KEYS

    if not records:
        raise HTTPException(status_code=404, detail="Schedule is empty")

    record = nearest_period(records, req.month)

    highlighted = None
    if req.y is not None and keys:
        category_at = overlaid_category_at if req.cumulative else stacked_category_at
        highlighted = keys[category_at(record, keys, req.y)]

    return NearestResponse(
        record=_record_response(record),
        tooltip=tooltip_text(record, keys),
        highlighted=highlighted,
    )


@router.post("/schedule/layers", response_model=LayersResponse)
def layers(req: ScheduleRequest, cfg: Settings = Depends(get_settings)):
    """Chart-ready shapes: stacked monthly layers and overlaid cumulative series."""
    result = _run(req, cfg)
    cumulative_keys = result.cumulative_categories

    schedule_layers = [
        StackLayerResponse(
            key=layer.key,
            display_name=PaymentCategory(layer.key).display_name,
            color=PaymentCategory(layer.key).color,
            points=[
                StackPointResponse(month=pt.month, lower=pt.lower, upper=pt.upper)
                for pt in layer.points
            ],
        )
        for layer in stack_layers(result.schedule, CATEGORY_KEYS)
    ]
    cumulative_series = [
        CategorySeriesResponse(
            key=series.key,
            display_name=PaymentCategory(series.key).display_name,
            color=PaymentCategory(series.key).color,
            points=[SeriesPointResponse(month=pt.month, value=pt.value) for pt in series.points],
        )
        for series in overlaid_series(result.cumulative, cumulative_keys)
    ]

    return LayersResponse(
        schedule_layers=schedule_layers,
        schedule_axis_max=value_axis_max(result.schedule, CATEGORY_KEYS, stacked=True),
        cumulative_series=cumulative_series,
        cumulative_axis_max=value_axis_max(result.cumulative, cumulative_keys, stacked=False),
    )
