"""Prometheus text rendering of metrics."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from .fields import attribute_value_to_string
from .metrics import (
    HistogramDataPoint,
    MetricDataType,
    MetricPair,
    NumberDataPoint,
    SummaryDataPoint,
    format_float,
)

LE_TAG = "le"
QUANTILE_TAG = "quantile"
INF_VALUE = "+Inf"

_NAME_SANITIZER = re.compile(r"[^0-9a-zA-Z]")
_NANOS_PER_MILLISECOND = 1_000_000


class PrometheusFormatter:
    """Renders metrics in the prometheus exposition format."""

    def sanitize_key(self, key: str) -> str:
        """Replace every non-alphanumeric character with an underscore."""
        return _NAME_SANITIZER.sub("_", key)

    def sanitize_value(self, value: str) -> str:
        """Escape backslashes and quotes, keeping an escaped newline as ``\\n``."""
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return escaped.replace("\\\\n", "\\n")

    def tags_to_string(self, attributes: Mapping[str, Any], labels: Mapping[str, Any]) -> str:
        """Return merged attributes and labels as a ``{k="v",...}`` string, or ''.

        Labels override attributes; a label that is not a string counts as empty.
        """
        merged = dict(attributes)
        for key, value in labels.items():
            merged[key] = value if isinstance(value, str) else ""
        if not merged:
            return ""
        pairs = ",".join(
            f'{self.sanitize_key(key)}="{self.sanitize_value(attribute_value_to_string(value))}"'
            for key, value in merged.items()
        )
        return f"{{{pairs}}}"

    def _line(self, name: str, tags: str, value: str, timestamp: int) -> str:
        return f"{self.sanitize_key(name)}{tags} {value} {timestamp // _NANOS_PER_MILLISECOND}"

    def _double_value_line(
        self, name: str, value: float, data_point: Any, attributes: Mapping[str, Any]
    ) -> str:
        return self._line(
            name,
            self.tags_to_string(attributes, data_point.attributes),
            format_float(value),
            data_point.timestamp,
        )

    def _uint_value_line(
        self, name: str, value: int, data_point: Any, attributes: Mapping[str, Any]
    ) -> str:
        return self._line(
            name,
            self.tags_to_string(attributes, data_point.attributes),
            str(int(value)),
            data_point.timestamp,
        )

    def _number_line(
        self, name: str, data_point: NumberDataPoint, attributes: Mapping[str, Any]
    ) -> str:
        if data_point.is_double:
            return self._double_value_line(name, data_point.value, data_point, attributes)
        return self._uint_value_line(name, data_point.value, data_point, attributes)

    def _number_lines(self, record: MetricPair) -> list[str]:
        return [
            self._number_line(record.metric.name, data_point, record.attributes)
            for data_point in record.metric.data_points
        ]

    def _summary_lines(self, record: MetricPair) -> list[str]:
        name = record.metric.name
        lines = []
        for data_point in record.metric.data_points:
            data_point: SummaryDataPoint
            additional: dict[str, Any] = {}
            for quantile in data_point.quantile_values:
                additional[QUANTILE_TAG] = float(quantile.quantile)
                lines.append(
                    self._double_value_line(
                        name, quantile.value, data_point, {**record.attributes, **additional}
                    )
                )
            lines.append(
                self._double_value_line(f"{name}_sum", data_point.sum, data_point, record.attributes)
            )
            lines.append(
                self._uint_value_line(
                    f"{name}_count", data_point.count, data_point, record.attributes
                )
            )
        return lines

    def _histogram_lines(self, record: MetricPair) -> list[str]:
        name = record.metric.name
        lines = []
        for data_point in record.metric.data_points:
            data_point: HistogramDataPoint
            bounds = data_point.explicit_bounds
            counts = data_point.bucket_counts
            if len(counts) <= len(bounds):
                raise IndexError(
                    f"histogram has {len(counts)} bucket counts for {len(bounds)} bounds"
                )
            cumulative = 0
            additional: dict[str, Any] = {}
            for bound, count in zip(bounds, counts):
                cumulative += count
                additional[LE_TAG] = float(bound)
                lines.append(
                    self._uint_value_line(
                        name, cumulative, data_point, {**record.attributes, **additional}
                    )
                )
            cumulative += counts[len(bounds)]
            additional[LE_TAG] = INF_VALUE
            lines.append(
                self._uint_value_line(
                    name, cumulative, data_point, {**record.attributes, **additional}
                )
            )
            lines.append(
                self._double_value_line(f"{name}_sum", data_point.sum, data_point, record.attributes)
            )
            lines.append(
                self._uint_value_line(
                    f"{name}_count", data_point.count, data_point, record.attributes
                )
            )
        return lines

    def metric_to_string(self, record: MetricPair) -> str:
        """Render a metric as prometheus lines joined by newlines."""
        data_type = record.metric.data_type
        if data_type in (MetricDataType.GAUGE, MetricDataType.SUM):
            lines = self._number_lines(record)
        elif data_type is MetricDataType.SUMMARY:
            lines = self._summary_lines(record)
        elif data_type is MetricDataType.HISTOGRAM:
            lines = self._histogram_lines(record)
        else:
            lines = []
        return "\n".join(lines)