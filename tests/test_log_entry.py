"""Tests for log entry construction and enrichment"""

import json
import uuid

import pytest

from phyros_logging import LogEntry, LogSeverity, InvalidArgumentError
from phyros_logging.core.log_entry import NIL_CORRELATION_ID


class TestLogSeverity:
    """Test log severity functionality."""

    def test_ordering(self):
        assert LogSeverity.DEBUG < LogSeverity.INFORMATION
        assert LogSeverity.INFORMATION < LogSeverity.WARNING
        assert LogSeverity.WARNING < LogSeverity.ERROR
        assert LogSeverity.ERROR < LogSeverity.FATAL

    def test_values(self):
        assert [int(s) for s in LogSeverity] == [0, 1, 2, 3, 4]

    def test_from_string(self):
        assert LogSeverity.from_string("debug") == LogSeverity.DEBUG
        assert LogSeverity.from_string("Information") == LogSeverity.INFORMATION
        assert LogSeverity.from_string("info") == LogSeverity.INFORMATION
        assert LogSeverity.from_string("WARN") == LogSeverity.WARNING
        assert LogSeverity.from_string("critical") == LogSeverity.FATAL

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            LogSeverity.from_string("verbose")

    def test_str(self):
        assert str(LogSeverity.INFORMATION) == "Information"

    def test_to_logging_level(self):
        import logging
        assert LogSeverity.FATAL.to_logging_level() == logging.CRITICAL
        assert LogSeverity.WARNING.to_logging_level() == logging.WARNING


class TestLogEntryConstruction:
    """Test log entry construction."""

    def test_constructor_sets_required_fields(self):
        entry = LogEntry(LogSeverity.INFORMATION, "Test message {Param}", "value")

        assert entry.severity == LogSeverity.INFORMATION
        assert entry.message_template == "Test message {Param}"
        assert entry.ordered_arguments == ("value",)
        assert entry.correlation_id != NIL_CORRELATION_ID
        assert dict(entry.properties) == {}
        assert entry.exception is None

    def test_fresh_entries_get_distinct_correlation_ids(self):
        ids = {LogEntry.debug("x").correlation_id for _ in range(50)}
        assert len(ids) == 50
        assert NIL_CORRELATION_ID not in ids

    def test_information_scenario(self):
        entry = LogEntry.information("User {id} logged in", 42)

        assert entry.severity == LogSeverity.INFORMATION
        assert entry.message_template == "User {id} logged in"
        assert entry.ordered_arguments == (42,)
        assert len(entry.properties) == 0
        assert entry.exception is None

    def test_named_constructors_match_severity(self):
        exception = RuntimeError("boom")

        assert LogEntry.debug("Debug message").severity == LogSeverity.DEBUG
        assert LogEntry.information("Info message").severity == LogSeverity.INFORMATION
        assert LogEntry.warning("Warning message").severity == LogSeverity.WARNING
        assert LogEntry.error("Error message", exception).severity == LogSeverity.ERROR
        assert LogEntry.fatal("Fatal message", exception).severity == LogSeverity.FATAL

    def test_error_constructors_attach_exception(self):
        exception = RuntimeError("boom")

        assert LogEntry.debug("d").exception is None
        assert LogEntry.information("i").exception is None
        assert LogEntry.warning("w").exception is None
        assert LogEntry.error("e", exception).exception is exception
        assert LogEntry.fatal("f", exception, 1, 2).exception is exception
        assert LogEntry.fatal("f", exception, 1, 2).ordered_arguments == (1, 2)

    def test_blank_template_is_contract_violation(self):
        with pytest.raises(AssertionError):
            LogEntry(LogSeverity.DEBUG, "   ")


class TestAddProperty:
    """Test first-write-wins property semantics."""

    def test_add_property_returns_same_entry(self):
        entry = LogEntry.information("Test")
        assert entry.add_property("key", "value") is entry
        assert dict(entry.properties) == {"key": "value"}

    def test_duplicate_key_keeps_first_value(self):
        entry = LogEntry.information("Test")
        entry.add_property("key", "first").add_property("key", "second")

        assert entry.properties["key"] == "first"
        assert len(entry.properties) == 1

    def test_properties_view_is_read_only(self):
        entry = LogEntry.information("Test").add_property("key", 1)
        with pytest.raises(TypeError):
            entry.properties["key"] = 2

    def test_insertion_order_preserved(self):
        entry = LogEntry.information("Test")
        for key in ("c", "a", "b"):
            entry.add_property(key, key.upper())
        assert list(entry.properties) == ["c", "a", "b"]


class TestAddProperties:
    """Test bulk property enrichment."""

    def test_mappings_merge_first_value_wins(self):
        entry = LogEntry.information("Test")
        entry.add_properties({"a": 1, "b": 2}).add_properties({"a": 99, "c": 3})

        assert dict(entry.properties) == {"a": 1, "b": 2, "c": 3}

    def test_pairs(self):
        entry = LogEntry.information("Test")
        result = entry.add_properties(("Key1", "Value1"), ("Key2", 123))

        assert result is entry
        assert dict(entry.properties) == {"Key1": "Value1", "Key2": 123}

    def test_pairs_applied_in_order(self):
        entry = LogEntry.information("Test")
        entry.add_properties(("k", "first"), ("k", "second"))
        assert entry.properties["k"] == "first"

    def test_existing_key_not_overwritten(self):
        entry = LogEntry.information("Test").add_property("ExistingKey", "ExistingValue")
        entry.add_properties({"ExistingKey": "NewValue", "NewKey": "Value"})

        assert entry.properties["ExistingKey"] == "ExistingValue"
        assert entry.properties["NewKey"] == "Value"

    def test_keyword_properties(self):
        entry = LogEntry.information("Test").add_properties(user="bob", attempt=2)
        assert dict(entry.properties) == {"user": "bob", "attempt": 2}

    def test_list_of_pairs(self):
        entry = LogEntry.information("Test").add_properties([("a", 1), ("b", 2)])
        assert dict(entry.properties) == {"a": 1, "b": 2}

    def test_tuple_of_pairs(self):
        entry = LogEntry.information("Test").add_properties((("a", 1), ("b", 2)))
        assert dict(entry.properties) == {"a": 1, "b": 2}

    def test_generator_of_pairs(self):
        entry = LogEntry.information("Test").add_properties((k, len(k)) for k in ("x", "yy"))
        assert dict(entry.properties) == {"x": 1, "yy": 2}

    def test_pair_value_may_be_a_pair(self):
        entry = LogEntry.information("Test").add_properties(("point", (1, 2)))
        assert dict(entry.properties) == {"point": (1, 2)}

    def test_invalid_argument(self):
        entry = LogEntry.information("Test")
        with pytest.raises(InvalidArgumentError):
            entry.add_properties(["not", "a", "pair"])
        with pytest.raises(InvalidArgumentError):
            entry.add_properties("text")
        with pytest.raises(InvalidArgumentError):
            entry.add_properties(42)
        with pytest.raises(InvalidArgumentError):
            entry.add_properties([("a", 1), "b"])
        assert dict(entry.properties) == {}

    def test_standard_value_types_accepted(self):
        entry = LogEntry.information("Test")
        entry.add_properties(
            ("String", "test"),
            ("Int", 42),
            ("Bool", True),
            ("Uuid", uuid.uuid4()),
            ("List", [1, 2, 3]),
            ("Tuple", ("a", "b")),
            ("Dict", {"key": "value"}),
            ("None", None),
        )
        assert len(entry.properties) == 8


class TestAddCorrelationId:
    """Test correlation id replacement."""

    def test_sets_non_nil_id(self):
        entry = LogEntry.information("Test")
        original = entry.correlation_id
        new_id = uuid.uuid4()

        assert entry.add_correlation_id(new_id) is entry
        assert entry.correlation_id == new_id
        assert entry.correlation_id != original

    def test_ignores_nil_id(self):
        entry = LogEntry.information("Test")
        original = entry.correlation_id

        assert entry.add_correlation_id(NIL_CORRELATION_ID) is entry
        assert entry.correlation_id == original

    def test_ignores_none(self):
        entry = LogEntry.information("Test")
        original = entry.correlation_id
        entry.add_correlation_id(None)
        assert entry.correlation_id == original

    def test_accepts_string(self):
        new_id = uuid.uuid4()
        entry = LogEntry.information("Test").add_correlation_id(str(new_id))
        assert entry.correlation_id == new_id

    def test_nil_string_ignored(self):
        entry = LogEntry.information("Test")
        original = entry.correlation_id
        entry.add_correlation_id("00000000-0000-0000-0000-000000000000")
        assert entry.correlation_id == original

    def test_invalid_string(self):
        with pytest.raises(InvalidArgumentError):
            LogEntry.information("Test").add_correlation_id("not-a-uuid")


class TestAddException:
    """Test last-write-wins exception semantics."""

    def test_sets_exception(self):
        entry = LogEntry.information("Test")
        exception = ValueError("bad")

        assert entry.add_exception(exception) is entry
        assert entry.exception is exception

    def test_overwrites_existing_exception(self):
        first = ValueError("first")
        second = KeyError("second")
        entry = LogEntry.error("Test", first).add_exception(second)

        assert entry.exception is second

    def test_fluent_chain(self):
        exception = RuntimeError("Test exception")
        correlation_id = uuid.uuid4()

        entry = (LogEntry(LogSeverity.INFORMATION, "Test {Param}", "value")
            .add_property("Key1", "Value1")
            .add_property("Key2", 42)
            .add_correlation_id(correlation_id)
            .add_exception(exception))

        assert entry.ordered_arguments == ("value",)
        assert dict(entry.properties) == {"Key1": "Value1", "Key2": 42}
        assert entry.correlation_id == correlation_id
        assert entry.exception is exception


class TestRendering:
    """Test message rendering and serialization."""

    def test_named_placeholders_bind_positionally(self):
        entry = LogEntry.information("User {id} logged in from {ip}", 42, "10.0.0.1")
        assert entry.render_message() == "User 42 logged in from 10.0.0.1"

    def test_indexed_placeholders(self):
        entry = LogEntry.information("{1} then {0}", "a", "b")
        assert entry.render_message() == "b then a"

    def test_missing_arguments_leave_placeholder(self):
        entry = LogEntry.information("Value {a} and {b}", 1)
        assert entry.render_message() == "Value 1 and {b}"

    def test_format_spec_and_escapes(self):
        entry = LogEntry.information("{{literal}} {ratio:.2f}", 0.5)
        assert entry.render_message() == "{literal} 0.50"

    def test_to_dict(self):
        exception = ValueError("bad")
        entry = LogEntry.error("Failed {n}", exception, 3).add_property("k", "v")
        data = entry.to_dict()

        assert data["severity"] == "Error"
        assert data["message"] == "Failed 3"
        assert data["message_template"] == "Failed {n}"
        assert data["arguments"] == [3]
        assert data["properties"] == {"k": "v"}
        assert data["exception"] == "ValueError: bad"
        assert uuid.UUID(data["correlation_id"]) == entry.correlation_id
        json.dumps(data)
