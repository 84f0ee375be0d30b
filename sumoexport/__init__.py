"""Metric formatting, metadata filtering, compression and configuration for Sumo Logic telemetry."""

__version__ = "0.1.0"

__all__ = ["carbon", "compress", "config", "fields", "filter", "graphite", "metrics", "prometheus"]