"""Exporter configuration and its defaults."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Optional

TYPE_STR = "sumologic"


class LogFormat(str, enum.Enum):
    """Format in which logs are posted."""

    TEXT = "text"
    JSON = "json"
    OTLP = "otlp"


class MetricFormat(str, enum.Enum):
    """Format in which metrics are posted."""

    GRAPHITE = "graphite"
    CARBON2 = "carbon2"
    PROMETHEUS = "prometheus"
    OTLP = "otlp"


class TraceFormat(str, enum.Enum):
    """Format in which traces are posted."""

    OTLP = "otlp"


class CompressEncoding(str, enum.Enum):
    """Compression applied to request bodies; the empty value disables it."""

    GZIP = "gzip"
    DEFLATE = "deflate"
    NONE = ""


class PipelineType(str, enum.Enum):
    """Kind of telemetry pipeline."""

    METRICS = "metrics"
    LOGS = "logs"
    TRACES = "traces"


DEFAULT_TIMEOUT = 5.0
DEFAULT_COMPRESS = True
DEFAULT_COMPRESS_ENCODING = CompressEncoding.GZIP
DEFAULT_MAX_REQUEST_BODY_SIZE = 1 * 1024 * 1024
DEFAULT_LOG_FORMAT = LogFormat.OTLP
DEFAULT_METRIC_FORMAT = MetricFormat.OTLP
DEFAULT_SOURCE_CATEGORY = ""
DEFAULT_SOURCE_NAME = ""
DEFAULT_SOURCE_HOST = ""
DEFAULT_CLIENT = "otelcol"
DEFAULT_GRAPHITE_TEMPLATE = "%{_metric_}"
DEFAULT_TRANSLATE_ATTRIBUTES = True
DEFAULT_TRANSLATE_TELEGRAF_METRICS = True
# Documented default of the option; the factory leaves it unset.
DEFAULT_CLEAR_LOGS_TIMESTAMP = True


@dataclass
class Authentication:
    """Name of the authenticator extension to use."""

    authenticator_name: str


@dataclass
class HTTPClientSettings:
    """HTTP client settings; timeout is in seconds."""

    endpoint: str = ""
    timeout: float = DEFAULT_TIMEOUT
    auth: Optional[Authentication] = None
    headers: dict[str, str] = field(default_factory=dict)


@dataclass
class QueueSettings:
    """Sending queue settings."""

    enabled: bool = True
    num_consumers: int = 10
    queue_size: int = 5000


@dataclass
class RetrySettings:
    """Retry settings; intervals are in seconds."""

    enabled: bool = True
    initial_interval: float = 5.0
    max_interval: float = 30.0
    max_elapsed_time: float = 300.0


def default_http_client_settings() -> HTTPClientSettings:
    """Return HTTP settings that authenticate through the sumologic extension."""
    return HTTPClientSettings(
        timeout=DEFAULT_TIMEOUT,
        auth=Authentication(authenticator_name=TYPE_STR),
    )


@dataclass
class Config:
    """Configuration of the exporter."""

    exporter_id: str = TYPE_STR
    http_client: HTTPClientSettings = field(default_factory=default_http_client_settings)
    sending_queue: QueueSettings = field(default_factory=lambda: QueueSettings(enabled=False))
    retry_on_failure: RetrySettings = field(default_factory=RetrySettings)

    compress_encoding: CompressEncoding = DEFAULT_COMPRESS_ENCODING
    max_request_body_size: int = DEFAULT_MAX_REQUEST_BODY_SIZE

    log_format: LogFormat = DEFAULT_LOG_FORMAT
    metric_format: MetricFormat = DEFAULT_METRIC_FORMAT
    graphite_template: str = DEFAULT_GRAPHITE_TEMPLATE
    trace_format: TraceFormat = TraceFormat.OTLP

    translate_attributes: bool = DEFAULT_TRANSLATE_ATTRIBUTES
    translate_telegraf_metrics: bool = DEFAULT_TRANSLATE_TELEGRAF_METRICS
    metadata_attributes: list[str] = field(default_factory=list)

    source_category: str = DEFAULT_SOURCE_CATEGORY
    source_name: str = DEFAULT_SOURCE_NAME
    source_host: str = DEFAULT_SOURCE_HOST
    client: str = DEFAULT_CLIENT

    clear_logs_timestamp: bool = False


def create_default_config() -> Config:
    """Return the configuration the exporter starts from."""
    return Config()