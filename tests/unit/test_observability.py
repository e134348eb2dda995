"""Unit tests for metrics recording and logging configuration."""

import json
import logging

import pytest
import structlog
from prometheus_client import REGISTRY
from readabilitycore import observability
from readabilitycore.config import MonitoringConfig
from readabilitycore.observability import configure_logging
from readabilitycore.observability.metrics import METRICS, _create_metrics


def sample(name: str, **labels) -> float:
    return REGISTRY.get_sample_value(name, labels or None) or 0.0


@pytest.fixture
def metrics_disabled():
    observability.set_metrics_enabled(False)
    yield
    observability.set_metrics_enabled(True)


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)
    structlog.reset_defaults()


class TestMetrics:
    def test_recreating_metrics_reuses_collectors(self):
        recreated = _create_metrics()
        for name, metric in recreated.items():
            assert metric is METRICS[name]

    def test_increment_with_labels(self):
        before = sample("readabilitycore_analyses_total", language="dutch")
        observability.increment("analyses", labels={"language": "dutch"})
        assert sample("readabilitycore_analyses_total", language="dutch") == before + 1

    def test_unknown_metric_is_ignored(self):
        observability.increment("no_such_metric")
        observability.histogram("no_such_metric", 1.0)

    def test_disabled_metrics_are_not_recorded(self, metrics_disabled):
        before = sample("readabilitycore_syllable_cache_hits_total")
        observability.increment("syllable_cache_hits")
        assert sample("readabilitycore_syllable_cache_hits_total") == before

    @pytest.mark.asyncio
    async def test_analysis_records_metrics(self, analyzer):
        before = sample("readabilitycore_analyses_total", language="english")
        latency_before = sample("readabilitycore_analysis_latency_seconds_count", language="english")

        await analyzer.analyze("The cat sat on the mat.", "english")

        assert sample("readabilitycore_analyses_total", language="english") == before + 1
        assert sample("readabilitycore_analysis_latency_seconds_count", language="english") == latency_before + 1

    @pytest.mark.asyncio
    async def test_unsupported_languages_share_one_label(self, analyzer):
        before = sample("readabilitycore_analyses_total", language="other")
        await analyzer.analyze("Some text here.", "xyz")
        await analyzer.analyze("Some text here.", "klingon")
        assert sample("readabilitycore_analyses_total", language="other") == before + 2

    def test_export_prometheus(self):
        observability.increment("syllable_cache_misses")
        exported = observability.export_prometheus()
        assert "readabilitycore_syllable_cache_misses_total" in exported


class TestLogging:
    def test_file_output_is_json(self, tmp_path, restore_logging):
        log_file = tmp_path / "readability.log"
        configure_logging(MonitoringConfig(log_level="debug", log_file=str(log_file)))

        structlog.get_logger("readabilitycore.tests").warning("Hyphenation unavailable", language="german")
        for handler in logging.getLogger().handlers:
            handler.flush()

        records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        assert records[0]["event"] == "Logging configured"
        assert records[-1]["event"] == "Hyphenation unavailable"
        assert records[-1]["language"] == "german"
        assert records[-1]["level"] == "warning"

    def test_console_output(self, capsys, restore_logging):
        configure_logging(MonitoringConfig(log_level="INFO"))

        assert logging.getLogger().level == logging.INFO
        assert "Logging configured" in capsys.readouterr().out
