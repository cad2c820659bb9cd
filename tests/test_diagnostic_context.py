"""Tests for diagnostic contexts and event capture"""

import threading
from types import MappingProxyType

import pytest

from log_filter_module import MDC, NDC, FilterResult, LogLevel, LoggingEvent
from log_filter_module.filters import MDCMatchFilter, NDCMatchFilter


class TestNDC:
    """Test nested diagnostic context."""

    def setup_method(self):
        NDC.clear()

    def teardown_method(self):
        NDC.clear()

    def test_push_pop(self):
        NDC.push("request")
        NDC.push("user=42")
        assert NDC.get() == "request user=42"
        assert NDC.get_depth() == 2
        assert NDC.peek() == "user=42"
        assert NDC.pop() == "user=42"
        assert NDC.get() == "request"

    def test_pop_empty(self):
        assert NDC.pop() == ""
        assert NDC.peek() == ""
        assert NDC.get() == ""

    def test_max_depth_trims_current_stack(self):
        NDC.push("a")
        NDC.push("b")
        NDC.push("c")
        NDC.set_max_depth(1)
        assert NDC.get() == "a"

    def test_max_depth_does_not_limit_later_pushes(self):
        NDC.set_max_depth(1)
        NDC.push("outer")
        NDC.push("inner")
        assert NDC.pop() == "inner"
        assert NDC.get() == "outer"

    def test_max_depth_only_affects_calling_thread(self):
        NDC.push("main")
        NDC.set_max_depth(0)
        seen = []

        def worker():
            NDC.push("w")
            seen.append(NDC.get())

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        assert seen == ["w"]
        assert NDC.get() == ""

    def test_negative_max_depth(self):
        with pytest.raises(ValueError):
            NDC.set_max_depth(-1)

    def test_scope(self):
        NDC.push("outer")
        with NDC.scope("inner"):
            assert NDC.get() == "outer inner"
        assert NDC.get() == "outer"

    def test_thread_isolation(self):
        NDC.push("main")
        seen = []

        def worker():
            seen.append(NDC.get())
            NDC.push("worker")

        thread = threading.Thread(target=worker)
        thread.start()
        thread.join()

        assert seen == [""]
        assert NDC.get() == "main"


class TestMDC:
    """Test mapped diagnostic context."""

    def setup_method(self):
        MDC.clear()

    def teardown_method(self):
        MDC.clear()

    def test_put_get_remove(self):
        MDC.put("user", "alice")
        assert MDC.get("user") == "alice"
        MDC.remove("user")
        assert MDC.get("user") == ""

    def test_get_context_is_copy(self):
        MDC.put("k", "v")
        context = MDC.get_context()
        context["k"] = "changed"
        assert MDC.get("k") == "v"

    def test_scope_restores(self):
        MDC.put("k", "old")
        with MDC.scope("k", "new"):
            assert MDC.get("k") == "new"
        assert MDC.get("k") == "old"

        with MDC.scope("fresh", "1"):
            assert MDC.get("fresh") == "1"
        assert "fresh" not in MDC.get_context()

    def test_thread_isolation(self):
        MDC.put("k", "main")
        seen = []

        thread = threading.Thread(target=lambda: seen.append(MDC.get("k")))
        thread.start()
        thread.join()

        assert seen == [""]


class TestLoggingEvent:
    """Test event snapshot."""

    def setup_method(self):
        NDC.clear()
        MDC.clear()

    def teardown_method(self):
        NDC.clear()
        MDC.clear()

    def test_defaults(self):
        event = LoggingEvent(level=LogLevel.INFO, message="Test message")
        assert event.ndc == ""
        assert event.get_mdc("anything") == ""
        assert event.logger_name == ""

    def test_level_type_checked(self):
        with pytest.raises(TypeError):
            LoggingEvent(level=20, message="x")

    def test_message_coerced(self):
        assert LoggingEvent(level=LogLevel.INFO, message=42).message == "42"

    def test_capture_snapshots_context(self):
        NDC.push("ndc-match")
        MDC.put("KeyToMatch", "mdc-match")
        event = LoggingEvent.capture(LogLevel.ERROR, "context message", "test")

        NDC.pop()
        MDC.clear()

        assert event.get_ndc() == "ndc-match"
        assert event.get_mdc("KeyToMatch") == "mdc-match"
        assert isinstance(event.mdc, MappingProxyType)

    def test_mdc_detached_from_source(self):
        source = {"k": "v"}
        event = LoggingEvent(level=LogLevel.INFO, message="m", mdc=source)
        source["k"] = "changed"
        assert event.get_mdc("k") == "v"

    def test_to_dict(self):
        event = LoggingEvent(level=LogLevel.DEBUG, message="Test", ndc="a", mdc={"k": "v"})
        data = event.to_dict()
        assert data["level"] == "DEBUG"
        assert data["ndc"] == "a"
        assert data["mdc"] == {"k": "v"}

    def test_captured_event_drives_context_filters(self):
        ndc_filter = NDCMatchFilter(ndc_to_match="ndc-match")
        mdc_filter = MDCMatchFilter(mdc_key_to_match="KeyToMatch",
                                    mdc_value_to_match="mdc-match")

        with NDC.scope("ndc-match"), MDC.scope("KeyToMatch", "mdc-match"):
            event = LoggingEvent.capture(LogLevel.ERROR, "error log message")

        assert ndc_filter.decide(event) is FilterResult.ACCEPT
        assert mdc_filter.decide(event) is FilterResult.ACCEPT
