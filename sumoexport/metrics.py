"""Metric data model consumed by the metric formatters."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Union


class MetricDataType(enum.Enum):
    """Kind of data carried by a metric."""

    GAUGE = "gauge"
    SUM = "sum"
    HISTOGRAM = "histogram"
    SUMMARY = "summary"


@dataclass
class NumberDataPoint:
    """A single gauge or sum sample; an int value is integral, a float is double."""

    value: Union[int, float]
    timestamp: int = 0
    attributes: dict[str, Any] = field(default_factory=dict)

    @property
    def is_double(self) -> bool:
        return isinstance(self.value, float)


@dataclass
class QuantileValue:
    """One quantile of a summary data point."""

    quantile: float
    value: float


@dataclass
class SummaryDataPoint:
    """A summary sample with its quantiles, sum and count."""

    sum: float
    count: int
    quantile_values: list[QuantileValue] = field(default_factory=list)
    timestamp: int = 0
    attributes: dict[str, Any] = field(default_factory=dict)


@dataclass
class HistogramDataPoint:
    """A histogram sample; bucket_counts has one entry more than explicit_bounds."""

    sum: float
    count: int
    bucket_counts: list[int] = field(default_factory=list)
    explicit_bounds: list[float] = field(default_factory=list)
    timestamp: int = 0
    attributes: dict[str, Any] = field(default_factory=dict)


@dataclass
class Metric:
    """A named metric with its data points; timestamps are in nanoseconds."""

    name: str
    data_type: MetricDataType
    data_points: list[Any] = field(default_factory=list)
    unit: str = ""


@dataclass
class MetricPair:
    """A metric together with the resource attributes it belongs to."""

    metric: Metric
    attributes: dict[str, Any] = field(default_factory=dict)


def _shortest_digits(value: float) -> tuple[bool, str, int]:
    """Return the sign, shortest significant digits and decimal point position."""
    sign, digits, exponent = Decimal(repr(value)).as_tuple()
    point = len(digits) + exponent
    text = "".join(str(digit) for digit in digits).rstrip("0")
    return bool(sign), text, point


def _plain(digits: str, point: int) -> str:
    if point <= 0:
        return "0." + "0" * (-point) + digits
    if point >= len(digits):
        return digits + "0" * (point - len(digits))
    return f"{digits[:point]}.{digits[point:]}"


def format_float(value: float) -> str:
    """Format a float with the shortest representation in %g style."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    negative, digits, point = _shortest_digits(value)
    exp10 = point - 1
    if exp10 < -4 or exp10 >= 6:
        mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
        body = f"{mantissa}e{'-' if exp10 < 0 else '+'}{abs(exp10):02d}"
    else:
        body = _plain(digits, point)
    return ("-" if negative else "") + body