# sumoexport

Building blocks for sending metrics to Sumo Logic: render metric data in
Prometheus, Carbon2 or Graphite text formats, pick out metadata attributes
with regular expressions, and compress request bodies with gzip or deflate.
The package has no dependencies outside the standard library.

## Installation

```
pip install sumoexport
```

## Metrics

Metrics are described with plain data classes from `sumoexport.metrics`:

- `Metric(name, data_type, data_points, unit="")`
- `NumberDataPoint(value, timestamp, attributes)`: an `int` value is written
  as an integer, a `float` value as a double
- `SummaryDataPoint(sum, count, quantile_values, timestamp, attributes)` with
  `QuantileValue(quantile, value)` entries
- `HistogramDataPoint(sum, count, bucket_counts, explicit_bounds, timestamp,
  attributes)`, where `bucket_counts` has one entry more than
  `explicit_bounds`
- `MetricPair(metric, attributes)`, which ties a metric to its resource
  attributes

`MetricDataType` says whether a metric is a `GAUGE`, `SUM`, `SUMMARY` or
`HISTOGRAM`. Timestamps are in nanoseconds.

`format_float(value)` renders a float in `%g` style with the shortest digits
that round-trip (`33.4`, `1e+06`, `+Inf`, `NaN`).

## Formatting

```python
from sumoexport.carbon import carbon2_metric_to_string
from sumoexport.graphite import GraphiteFormatter
from sumoexport.metrics import Metric, MetricDataType, MetricPair, NumberDataPoint
from sumoexport.prometheus import PrometheusFormatter

pair = MetricPair(
    Metric(
        "gauge_metric_name",
        MetricDataType.GAUGE,
        [NumberDataPoint(124, 1608124661166000000, {"remote_name": "156920"})],
    ),
    {"foo": "bar"},
)

PrometheusFormatter().metric_to_string(pair)
# 'gauge_metric_name{foo="bar",remote_name="156920"} 124 1608124661166'
carbon2_metric_to_string(pair)
# 'foo=bar metric=gauge_metric_name  124 1608124661'
GraphiteFormatter("%{foo}.%{_metric_}").metric_to_string(pair)
# 'bar.gauge_metric_name 124 1608124661'
```

### Prometheus

`PrometheusFormatter.metric_to_string` renders every metric type, with
timestamps in milliseconds:

- gauges and sums give one line per data point;
- summaries give a line per quantile (tagged `quantile`), then `_sum` and
  `_count` lines;
- histograms give a cumulative line per bound (tagged `le`), a `le="+Inf"`
  line, then `_sum` and `_count` lines. A histogram with too few bucket
  counts raises `IndexError`.

`tags_to_string(attributes, labels)` merges resource attributes with data
point labels (labels win; a non-string label counts as empty) into
`{k="v",...}`, or `""` when there is nothing to write. `sanitize_key`
replaces every non-alphanumeric character with `_`; `sanitize_value` escapes
backslashes and double quotes.

### Carbon2

`sumoexport.carbon` writes gauges and sums as
`key=value ... metric=<name> [unit=<unit>]  <value> <seconds>`. Attributes
named `name` or `unit` are written as `_name` and `_unit`.
`sanitize_carbon_string` turns spaces and newlines into `_` and `=` into `:`.
`carbon2_tag_string` and `carbon2_number_record` expose the pieces of a line.
Summaries and histograms give an empty string.

### Graphite

`GraphiteFormatter(template)` writes gauges and sums as
`<path> <value> <seconds>`. In the template, `%{name}` is replaced with the
value of the attribute `name` (empty when absent) and `%{_metric_}` with the
metric name; dots and spaces in the substituted values become `_`
(`escape`). `format(fields, metric_name)` builds the path alone, and
`number_record` a single line. Summaries and histograms give an empty string.

## Metadata

```python
from sumoexport.filter import MetadataFilter

metadata = MetadataFilter([r"^key[12]", r"^key3"])
fields = metadata.filter_in({"key1": "value1", "other": "x"})
fields.render()   # "key1=value1"
```

`filter_in` keeps attributes whose key matches any pattern (searched
anywhere in the key); `filter_out` keeps those that match none. Both return a
`Fields` sorted by key. An invalid pattern raises `ValueError`.

`Fields.render()` gives the sorted `key=value, key=value` string used as the
fields header, with `,` and newlines in keys and values replaced by `_` and
`=` by `:`. `attribute_value_to_string` renders attribute values as text:
booleans as `true`/`false`, bytes as base64, lists and mappings as compact
JSON.

## Compression

```python
from sumoexport.compress import Compressor
from sumoexport.config import CompressEncoding

body = Compressor(CompressEncoding.GZIP).compress(b"This is an example log")
```

`compress` accepts bytes or a binary stream and returns bytes.
`CompressEncoding.DEFLATE` produces a raw deflate stream at the fastest
level, and `CompressEncoding.NONE` passes data through unchanged. An unknown
encoding raises `ValueError("invalid format: ...")`.

## Configuration

`sumoexport.config.create_default_config()` returns a `Config` with the
default settings: gzip compression, a 1 MiB maximum request body, OTLP log,
metric and trace formats, client name `otelcol`, the Graphite template
`%{_metric_}`, attribute and Telegraf metric translation enabled, the sending
queue disabled, and HTTP client settings with a 5 second timeout that
authenticate through an authenticator named `sumologic`
(`default_http_client_settings()`).

The enums `LogFormat`, `MetricFormat`, `TraceFormat`, `CompressEncoding` and
`PipelineType` hold the accepted option values.

## What this package does not do

It does not send anything. There is no HTTP client, no batching or retrying,
no log or trace formatting, and nothing reads the translation options in
`Config`: attribute and metric name translation are not performed. The
package formats, filters and compresses; delivering the result is up to the
caller.

## Running the tests

```
pip install -e .[test]
pytest
```