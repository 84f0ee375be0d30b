"""Graphite rendering of metrics."""

from __future__ import annotations

import re

from .fields import Fields, attribute_value_to_string
from .metrics import MetricDataType, MetricPair, NumberDataPoint, format_float

METRIC_NAME_PLACEHOLDER = "_metric_"

_PLACEHOLDER = re.compile(r"%\{([\w.]+)\}")
_GRAPHITE_TRANSLATION = str.maketrans({".": "_", " ": "_"})
_NANOS_PER_SECOND = 1_000_000_000


class GraphiteFormatter:
    """Renders metrics as graphite lines named by a ``%{attr}`` template."""

    def __init__(self, template: str) -> None:
        self.template = template

    def escape(self, value: str) -> str:
        """Replace dots and spaces, which are special in graphite names."""
        return value.translate(_GRAPHITE_TRANSLATION)

    def format(self, fields: Fields, metric_name: str) -> str:
        """Return the metric path built from the template for the given fields."""

        def substitute(match: re.Match[str]) -> str:
            key = match.group(1)
            if key == METRIC_NAME_PLACEHOLDER:
                return self.escape(metric_name)
            if key in fields.attributes:
                return self.escape(attribute_value_to_string(fields.attributes[key]))
            return ""

        return _PLACEHOLDER.sub(substitute, self.template)

    def number_record(self, fields: Fields, name: str, data_point: NumberDataPoint) -> str:
        """Render one gauge or sum data point as a graphite line."""
        if data_point.is_double:
            value = format_float(data_point.value)
        else:
            value = str(int(data_point.value))
        return (
            f"{self.format(fields, name)} {value} "
            f"{data_point.timestamp // _NANOS_PER_SECOND}"
        )

    def metric_to_string(self, record: MetricPair) -> str:
        """Render a metric as graphite lines; histograms and summaries give nothing."""
        if record.metric.data_type not in (MetricDataType.GAUGE, MetricDataType.SUM):
            return ""
        fields = Fields(record.attributes)
        name = record.metric.name
        return "\n".join(
            self.number_record(fields, name, data_point)
            for data_point in record.metric.data_points
        )