from sumoexport.carbon import (
    carbon2_metric_to_string,
    carbon2_number_record,
    carbon2_tag_string,
    sanitize_carbon_string,
)
from sumoexport.metrics import (
    HistogramDataPoint,
    Metric,
    MetricDataType,
    MetricPair,
    NumberDataPoint,
    QuantileValue,
    SummaryDataPoint,
)


def _ts(seconds, millis=0):
    return seconds * 1_000_000_000 + millis * 1_000_000


def example_int_metric():
    metric = Metric(
        name="test.metric.data",
        data_type=MetricDataType.SUM,
        unit="bytes",
        data_points=[NumberDataPoint(14500, _ts(1605534165))],
    )
    return MetricPair(metric, {"test": "test_value", "test2": "second_value"})


def example_int_gauge_metric():
    metric = Metric(
        name="gauge_metric_name",
        data_type=MetricDataType.GAUGE,
        data_points=[
            NumberDataPoint(
                124,
                _ts(1608124661, 166),
                {"remote_name": "156920", "url": "http://example_url"},
            ),
            NumberDataPoint(
                245,
                _ts(1608124662, 166),
                {"remote_name": "156955", "url": "http://another_url"},
            ),
        ],
    )
    return MetricPair(metric, {"foo": "bar"})


def example_double_gauge_metric():
    metric = Metric(
        name="gauge_metric_name_double_test",
        data_type=MetricDataType.GAUGE,
        data_points=[
            NumberDataPoint(
                33.4,
                _ts(1608124661, 169),
                {"local_name": "156720", "endpoint": "http://example_url"},
            ),
            NumberDataPoint(
                56.8,
                _ts(1608124662, 186),
                {"local_name": "156155", "endpoint": "http://another_url"},
            ),
        ],
    )
    return MetricPair(metric, {"foo": "bar"})


def example_int_sum_metric():
    metric = Metric(
        name="sum_metric_int_test",
        data_type=MetricDataType.SUM,
        data_points=[
            NumberDataPoint(45, _ts(1608124444, 169), {"name": "156720"}),
            NumberDataPoint(1238, _ts(1608124699, 186), {"name": "156155"}),
        ],
    )
    return MetricPair(metric, {"foo": "bar"})


def example_double_sum_metric():
    metric = Metric(
        name="sum_metric_double_test",
        data_type=MetricDataType.SUM,
        data_points=[
            NumberDataPoint(45.6, _ts(1618124444, 169), {"pod_name": "lorem"}),
            NumberDataPoint(1238.1, _ts(1608424699, 186), {"pod_name": "opsum"}),
        ],
    )
    return MetricPair(metric, {"foo": "bar"})


def example_summary_metric():
    metric = Metric(
        name="summary_metric_double_test",
        data_type=MetricDataType.SUMMARY,
        data_points=[
            SummaryDataPoint(
                sum=45.6,
                count=3,
                quantile_values=[QuantileValue(0.6, 0.7), QuantileValue(2.6, 4.0)],
                timestamp=_ts(1618124444, 169),
            )
        ],
    )
    return MetricPair(metric, {"foo": "bar"})


def example_histogram_metric():
    metric = Metric(
        name="histogram_metric_double_test",
        data_type=MetricDataType.HISTOGRAM,
        data_points=[
            HistogramDataPoint(
                sum=45.6,
                count=7,
                bucket_counts=[0, 12, 7, 5, 8, 13],
                explicit_bounds=[0.1, 0.2, 0.5, 0.8, 1.0],
                timestamp=_ts(1618124444, 169),
            )
        ],
    )
    return MetricPair(metric, {"bar": "foo"})


def test_carbon2_tag_string():
    assert (
        carbon2_tag_string(example_int_metric())
        == "test=test_value test2=second_value metric=test.metric.data unit=bytes"
    )
    assert carbon2_tag_string(example_int_gauge_metric()) == "foo=bar metric=gauge_metric_name"
    assert (
        carbon2_tag_string(example_double_sum_metric())
        == "foo=bar metric=sum_metric_double_test"
    )
    assert (
        carbon2_tag_string(example_double_gauge_metric())
        == "foo=bar metric=gauge_metric_name_double_test"
    )


def test_carbon2_tag_string_prefixes_reserved_keys():
    record = example_int_metric()
    record.attributes = {"name": "x", "unit": "y"}
    assert (
        carbon2_tag_string(record)
        == "_name=x _unit=y metric=test.metric.data unit=bytes"
    )


def test_sanitize_carbon_string():
    assert sanitize_carbon_string("a b=c\nd") == "a_b:c_d"


def test_carbon2_number_record():
    record = example_int_gauge_metric()
    line = carbon2_number_record(record, record.metric.data_points[0])
    assert line == "foo=bar metric=gauge_metric_name  124 1608124661"


def test_carbon_metric_int_gauge():
    expected = (
        "foo=bar metric=gauge_metric_name  124 1608124661\n"
        "foo=bar metric=gauge_metric_name  245 1608124662"
    )
    assert carbon2_metric_to_string(example_int_gauge_metric()) == expected


def test_carbon_metric_double_gauge():
    expected = (
        "foo=bar metric=gauge_metric_name_double_test  33.4 1608124661\n"
        "foo=bar metric=gauge_metric_name_double_test  56.8 1608124662"
    )
    assert carbon2_metric_to_string(example_double_gauge_metric()) == expected


def test_carbon_metric_int_sum():
    expected = (
        "foo=bar metric=sum_metric_int_test  45 1608124444\n"
        "foo=bar metric=sum_metric_int_test  1238 1608124699"
    )
    assert carbon2_metric_to_string(example_int_sum_metric()) == expected


def test_carbon_metric_double_sum():
    expected = (
        "foo=bar metric=sum_metric_double_test  45.6 1618124444\n"
        "foo=bar metric=sum_metric_double_test  1238.1 1608424699"
    )
    assert carbon2_metric_to_string(example_double_sum_metric()) == expected


def test_carbon_metric_summary():
    assert carbon2_metric_to_string(example_summary_metric()) == ""


def test_carbon_metric_histogram():
    assert carbon2_metric_to_string(example_histogram_metric()) == ""