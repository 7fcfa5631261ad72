"""Reshape schedules into chart layers, and hit-test tooltip positions against them.

Pure functions. No drawing; the chart layer consumes these shapes.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal

from mortgage_calc.models.schedule import PaymentRecord, check_categories

AXIS_HEADROOM = Decimal("1.25")


@dataclass(frozen=True)
class StackPoint:
    month: int
    lower: Decimal
    upper: Decimal


@dataclass(frozen=True)
class StackLayer:
    key: str
    points: list[StackPoint] = field(default_factory=list)


@dataclass(frozen=True)
class SeriesPoint:
    month: int
    value: Decimal


@dataclass(frozen=True)
class CategorySeries:
    key: str
    points: list[SeriesPoint] = field(default_factory=list)


def stack_layers(records: list[PaymentRecord], keys: Iterable[str]) -> list[StackLayer]:
    """Stack categories in the given order on a zero baseline.

    Each layer's lower bound at a month is the sum of the layers below it.
    """
    keys = check_categories(keys)
    baselines = [Decimal("0")] * len(records)
    layers: list[StackLayer] = []
    for key in keys:
        points: list[StackPoint] = []
        for i, p in enumerate(records):
            lower = baselines[i]
            upper = lower + p.value(key)
            points.append(StackPoint(month=p.month, lower=lower, upper=upper))
            baselines[i] = upper
        layers.append(StackLayer(key=key, points=points))
    return layers


def overlaid_series(records: list[PaymentRecord], keys: Iterable[str]) -> list[CategorySeries]:
    """One unstacked series per category, each drawn from zero."""
    return [
        CategorySeries(
            key=key,
            points=[SeriesPoint(month=p.month, value=p.value(key)) for p in records],
        )
        for key in check_categories(keys)
    ]


def stacked_category_at(record: PaymentRecord, keys: Iterable[str], y: Decimal) -> int:
    """Index of the stacked layer under height y, or the top layer if y is above the stack."""
    keys = check_categories(keys)
    cumulative = Decimal("0")
    for idx, key in enumerate(keys):
        value = record.value(key)
        if cumulative + value >= y:
            return idx
        cumulative += value
    return len(keys) - 1


def overlaid_category_at(record: PaymentRecord, keys: Iterable[str], y: Decimal) -> int:
    """Index of the overlaid area under height y.

    Areas overlap, so the smallest value that still reaches y wins. Above
    every area, the largest one is reported.
    """
    keys = check_categories(keys)
    ranked = sorted(keys, key=record.value)
    chosen = ranked[-1]
    for i, key in enumerate(ranked):
        is_last = i == len(ranked) - 1
        if y <= record.value(key) and (is_last or record.value(ranked[i + 1]) >= y):
            chosen = key
            break
    return keys.index(chosen)


def value_axis_max(records: list[PaymentRecord], keys: Iterable[str], stacked: bool) -> Decimal:
    """Upper bound for the chart's value axis, with headroom above the tallest month."""
    keys = check_categories(keys)
    if not records or not keys:
        return Decimal("0")
    reduce = sum if stacked else max
    tallest = max(reduce(p.value(k) for k in keys) for p in records)
    return tallest * AXIS_HEADROOM
