"""Carbon 2.0 rendering of metrics."""

from __future__ import annotations

from .fields import attribute_value_to_string
from .metrics import MetricDataType, MetricPair, NumberDataPoint, format_float

_CARBON_TRANSLATION = str.maketrans({" ": "_", "=": ":", "\n": "_"})
_RESERVED_KEYS = frozenset({"name", "unit"})
_NANOS_PER_SECOND = 1_000_000_000


def sanitize_carbon_string(text: str) -> str:
    """Replace characters that would break a carbon2 line."""
    return text.translate(_CARBON_TRANSLATION)


def carbon2_tag_string(record: MetricPair) -> str:
    """Return the attributes, metric name and unit as space separated key=value pairs.

    Attributes named ``name`` or ``unit`` are prefixed with an underscore so
    that they do not clash with the intrinsic tags.
    """
    parts = []
    for key, value in record.attributes.items():
        if key in _RESERVED_KEYS:
            key = f"_{key}"
        parts.append(
            f"{sanitize_carbon_string(key)}="
            f"{sanitize_carbon_string(attribute_value_to_string(value))}"
        )

    parts.append(f"metric={sanitize_carbon_string(record.metric.name)}")
    if record.metric.unit:
        parts.append(f"unit={sanitize_carbon_string(record.metric.unit)}")

    return " ".join(parts)


def carbon2_number_record(record: MetricPair, data_point: NumberDataPoint) -> str:
    """Render one gauge or sum data point as a carbon2 line."""
    if data_point.is_double:
        value = format_float(data_point.value)
    else:
        value = str(int(data_point.value))
    return f"{carbon2_tag_string(record)}  {value} {data_point.timestamp // _NANOS_PER_SECOND}"


def carbon2_metric_to_string(record: MetricPair) -> str:
    """Render a metric as carbon2 lines; histograms and summaries give nothing."""
    if record.metric.data_type not in (MetricDataType.GAUGE, MetricDataType.SUM):
        return ""
    return "\n".join(
        carbon2_number_record(record, data_point) for data_point in record.metric.data_points
    )