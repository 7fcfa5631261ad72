"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, Field


# ---- Request schemas ----

class ScheduleRequest(BaseModel):
    """Form values as entered. Blank fields may be omitted or null."""
    price: Decimal | None = Field(None, description="Purchase price")
    home_value: Decimal | None = Field(None, description="Assessed value, defaults to price")
    hoa: Decimal | None = None
    down_payment_pct: Decimal | None = Field(None, description="Whole-number percent of price")
    down_payment_amount: Decimal | None = None
    interest_rate_pct: Decimal | None = Field(None, description="Annual rate, whole-number percent")
    pmi_monthly: Decimal | None = None
    pmi_equity_pct: Decimal | None = Field(None, description="Equity percent at which PMI stops")
    property_tax: Decimal | None = Field(None, description="Monthly amount")
    property_tax_pct: Decimal | None = Field(None, description="Annual percent of home value")
    homeowners_insurance: Decimal | None = None
    closing_cost: Decimal | None = None
    mortgage_term: Decimal | None = Field(None, description="Years")
    annual_income: Decimal | None = None
    monthly_debt: Decimal | None = None

    # Which categories the cumulative chart sums; others stay per-month
    cumulative_categories: list[str] | None = None


class NearestRequest(BaseModel):
    inputs: ScheduleRequest
    month: float = Field(..., description="Month position under the pointer")
    cumulative: bool = Field(False, description="Look up in the cumulative chart's series")
    y: Decimal | None = Field(None, description="Value position under the pointer; picks the highlighted category")


# ---- Response schemas ----

class SnapshotResponse(BaseModel):
    price: Decimal
    down_payment: Decimal
    loan_amount: Decimal
    annual_rate: Decimal
    term_years: Decimal
    period_count: int
    hoa: Decimal
    property_tax: Decimal
    homeowners_insurance: Decimal
    pmi_monthly: Decimal
    pmi_equity_threshold: Decimal
    closing_cost: Decimal
    home_value: Decimal
    annual_income: Decimal
    monthly_debt: Decimal


class SummaryResponse(BaseModel):
    loan_amount: Decimal
    principal_and_interest: Decimal
    monthly_payment: Decimal
    monthly_payment_with_pmi: Decimal
    show_pmi: bool
    pmi_months: int
    pmi_total: Decimal
    lifetime_payment: Decimal
    purchase_payment: Decimal
    debt_to_income: Decimal | None = None


class PaymentRecordResponse(BaseModel):
    month: int
    principal: Decimal
    interest: Decimal
    hoa: Decimal
    property_tax: Decimal
    homeowners_insurance: Decimal
    pmi: Decimal
    principal_balance: Decimal | None = None


class ScheduleResponse(BaseModel):
    snapshot: SnapshotResponse
    summary: SummaryResponse
    labels: dict[str, str]
    hints: dict[str, str]
    schedule: list[PaymentRecordResponse]
    cumulative: list[PaymentRecordResponse]
    cumulative_categories: list[str]


class NearestResponse(BaseModel):
    record: PaymentRecordResponse
    tooltip: str
    highlighted: str | None = None  # Category under the pointer when y was given


class StackPointResponse(BaseModel):
    month: int
    lower: Decimal
    upper: Decimal


class StackLayerResponse(BaseModel):
    key: str
    display_name: str
    color: str
    points: list[StackPointResponse]


class SeriesPointResponse(BaseModel):
    month: int
    value: Decimal


class CategorySeriesResponse(BaseModel):
    key: str
    display_name: str
    color: str
    points: list[SeriesPointResponse]


class LayersResponse(BaseModel):
    schedule_layers: list[StackLayerResponse]
    schedule_axis_max: Decimal
    cumulative_series: list[CategorySeriesResponse]
    cumulative_axis_max: Decimal
