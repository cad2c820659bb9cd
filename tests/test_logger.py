"""Tests for the logger that owns a filter chain"""

import io
import threading

import pytest

from log_filter_module import (
    MDC,
    NDC,
    FilterResult,
    Logger,
    LoggerBuilder,
    LoggerConfig,
    LogLevel,
    Properties,
)
from log_filter_module.filters import (
    DenyAllFilter,
    FilterChain,
    LogLevelMatchFilter,
    NDCMatchFilter,
    StringMatchFilter,
)


class MockWriter:
    """Mock writer for testing."""

    def __init__(self):
        self.events = []
        self.flushes = 0
        self._lock = threading.Lock()

    def write(self, event) -> None:
        with self._lock:
            self.events.append(event)

    def flush(self) -> None:
        self.flushes += 1

    @property
    def messages(self):
        return [event.message for event in self.events]


class FailingWriter:
    def write(self, event) -> None:
        raise IOError("disk full")


class TestLoggerConfig:
    """Test logger configuration."""

    def test_default_config(self):
        config = LoggerConfig.default()
        assert config.name == "logger"
        assert config.min_level == LogLevel.INFO

    def test_debug_config(self):
        assert LoggerConfig.debug_config().min_level == LogLevel.TRACE

    def test_level_from_string(self):
        assert LoggerConfig(min_level="warn").min_level == LogLevel.WARN

    def test_invalid(self):
        with pytest.raises(ValueError):
            LoggerConfig(name="")
        with pytest.raises(ValueError):
            LoggerConfig(min_level="LOUD")

    def test_from_properties(self):
        config = LoggerConfig.from_properties(
            Properties.from_dict({"Name": "app", "Level": "debug"}))
        assert config.name == "app"
        assert config.min_level == LogLevel.DEBUG

    def test_from_properties_bad_level_keeps_default(self):
        config = LoggerConfig.from_properties(Properties.from_dict({"Level": "LOUD"}))
        assert config.min_level == LogLevel.INFO


class TestLogger:
    """Test main logger functionality."""

    def setup_method(self):
        NDC.clear()
        MDC.clear()

    def teardown_method(self):
        NDC.clear()
        MDC.clear()

    def test_no_filters_logs_everything_above_threshold(self):
        writer = MockWriter()
        logger = Logger(LoggerConfig(min_level=LogLevel.DEBUG))
        logger.add_writer(writer)

        logger.trace("Trace message")
        logger.debug("Debug message")
        logger.info("Info message")
        logger.warn("Warning message")

        assert writer.messages == ["Debug message", "Info message", "Warning message"]
        assert logger.get_metrics() == {"logged": 3, "filtered": 0}

    def test_deny_suppresses(self):
        writer = MockWriter()
        logger = Logger(filter_chain=FilterChain.of(
            StringMatchFilter(string_to_match="secret", accept_on_match=False)))
        logger.add_writer(writer)

        assert logger.info("token=secret") is FilterResult.DENY
        assert logger.info("hello") is FilterResult.ACCEPT

        assert writer.messages == ["hello"]
        assert logger.get_metrics() == {"logged": 1, "filtered": 1}

    def test_set_filter_chain_swaps(self):
        writer = MockWriter()
        logger = Logger()
        logger.add_writer(writer)

        logger.set_filter_chain(DenyAllFilter())
        assert isinstance(logger.filter_chain, FilterChain)
        logger.error("dropped")

        logger.set_filter_chain(None)
        logger.error("kept")

        assert writer.messages == ["kept"]

    def test_diagnostic_context_reaches_filters(self):
        writer = MockWriter()
        logger = Logger(filter_chain=FilterChain.of(NDCMatchFilter(ndc_to_match="job-7")))
        logger.add_writer(writer)

        logger.info("no context")
        with NDC.scope("job-7"):
            logger.info("matching context")
        with NDC.scope("job-8"):
            logger.info("other context")

        assert writer.messages == ["no context", "matching context"]
        assert writer.events[1].ndc == "job-7"

    def test_flush_reaches_writers(self):
        writer = MockWriter()
        logger = Logger()
        logger.add_writer(writer)
        logger.add_writer(FailingWriter())

        logger.flush()

        assert writer.flushes == 1

    def test_writer_failure_isolated(self, caplog):
        writer = MockWriter()
        logger = Logger()
        logger.add_writer(FailingWriter())
        logger.add_writer(writer)

        logger.info("still written")

        assert writer.messages == ["still written"]
        assert "failed" in caplog.text

    def test_concurrent_logging(self):
        writer = MockWriter()
        logger = Logger(filter_chain=FilterChain.of(
            LogLevelMatchFilter(log_level_to_match=LogLevel.ERROR),
            DenyAllFilter(),
        ))
        logger.add_writer(writer)

        def log_messages():
            for i in range(100):
                logger.error(f"error {i}")
                logger.info(f"info {i}")

        threads = [threading.Thread(target=log_messages) for _ in range(5)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(writer.events) == 500
        assert all(event.level == LogLevel.ERROR for event in writer.events)
        assert logger.get_metrics() == {"logged": 500, "filtered": 500}


class TestLoggerBuilder:
    """Test builder pattern."""

    def test_builder_pattern(self):
        stream = io.StringIO()
        logger = (LoggerBuilder()
            .with_name("builder_test")
            .with_level(LogLevel.INFO)
            .with_console(stream=stream)
            .build())

        assert logger.name == "builder_test"
        assert logger.filter_chain is None
        logger.info("to console")
        assert "to console" in stream.getvalue()

    def test_with_filter(self):
        writer = MockWriter()
        logger = (LoggerBuilder()
            .with_filter(LogLevelMatchFilter(log_level_to_match=LogLevel.ERROR))
            .with_filter(DenyAllFilter())
            .add_writer(writer)
            .build())

        logger.info("info")
        logger.error("error")

        assert writer.messages == ["error"]
        assert len(logger.filter_chain) == 2

    def test_with_filter_type_checked(self):
        with pytest.raises(TypeError):
            LoggerBuilder().with_filter(lambda event: FilterResult.DENY)

    def test_with_properties(self):
        props = Properties.from_string(
            "Name = configured\n"
            "Level = DEBUG\n"
            "filters.1 = StringMatchFilter\n"
            "filters.1.StringToMatch = noise\n"
            "filters.1.AcceptOnMatch = false\n"
        )
        writer = MockWriter()
        logger = LoggerBuilder().with_properties(props).add_writer(writer).build()

        logger.debug("useful")
        logger.debug("noise here")

        assert logger.name == "configured"
        assert writer.messages == ["useful"]

    def test_with_properties_keeps_earlier_settings(self):
        props = Properties.from_dict({"filters.1": "DenyAllFilter"})
        logger = (LoggerBuilder()
            .with_name("explicit")
            .with_level(LogLevel.ERROR)
            .with_properties(props)
            .build())

        assert logger.name == "explicit"
        assert not logger.is_enabled_for(LogLevel.WARN)
        assert logger.is_enabled_for(LogLevel.ERROR)

    def test_with_properties_overrides_earlier_settings(self):
        props = Properties.from_dict({"Name": "configured", "Level": "TRACE"})
        logger = (LoggerBuilder()
            .with_name("explicit")
            .with_level(LogLevel.ERROR)
            .with_properties(props)
            .build())

        assert logger.name == "configured"
        assert logger.is_enabled_for(LogLevel.TRACE)

    def test_console_shows_ndc(self):
        stream = io.StringIO()
        logger = LoggerBuilder().with_console(stream=stream).build()
        with NDC.scope("req-1"):
            logger.warn("with context")
        assert "<req-1>" in stream.getvalue()
