"""Tests for the record parser and the record classifier."""

import inspect

import pytest

from charts_api.core.classification.record_classifier import classify
from charts_api.core.domain.record import GeneralMetric, TickOutcome, TickOutcomeKind
from charts_api.core.errors import LineDecodeError, SchemaMismatch, ValueCoercionError
from charts_api.core.parsing.record_parser import decode_line, iter_lines


# =============================================================================
# PARSER
# =============================================================================

class TestRecordParser:
    """One decoded map or one error per newline-separated segment."""

    def test_is_lazy(self):
        assert inspect.isgenerator(iter_lines(b'{"title":"foo"}'))

    def test_trailing_newline_yields_failed_empty_segment(self):
        lines = list(iter_lines(b'{"title":"foo","pointSet":{}}\n'))

        assert len(lines) == 2
        assert lines[0].ok
        assert lines[0].record == {"title": "foo", "pointSet": {}}
        assert not lines[1].ok
        assert isinstance(lines[1].error, LineDecodeError)

    def test_bad_line_does_not_stop_the_rest(self):
        content = b'{"a":1}\nnot json\n{"b":2}'
        lines = list(iter_lines(content))

        assert [line.line_number for line in lines] == [1, 2, 3]
        assert [line.ok for line in lines] == [True, False, True]
        assert lines[2].record == {"b": 2}

    def test_crlf_line_endings_decode(self):
        lines = list(iter_lines(b'{"a":1}\r\n{"b":2}\r\n'))

        assert [line.ok for line in lines] == [True, True, False]

    def test_deeply_nested_line_is_a_decode_error(self):
        nested = b'{"x":' + b"[" * 200000 + b"]" * 200000 + b"}"

        with pytest.raises(LineDecodeError):
            decode_line(nested)

    def test_invalid_utf8_is_replaced_not_rejected(self):
        record = decode_line(b'{"title":"foo","pointSet":{"1":1,"\xff":2}}')

        assert record == {"title": "foo", "pointSet": {"1": 1, "�": 2}}

    @pytest.mark.parametrize(
        "segment",
        [
            b"",
            b"[1, 2]",
            b'"title"',
            b"42",
            b"null",
            b'{"a": NaN}',
            b'{"a": Infinity}',
            b"\xff\xfe{",
            b'{"a": 1',
        ],
    )
    def test_non_object_segments_fail(self, segment):
        with pytest.raises(LineDecodeError):
            decode_line(segment)


# =============================================================================
# CLASSIFIER
# =============================================================================

class TestClassifier:
    """Routing of decoded records to general metrics or tick outcomes."""

    def test_general_metric(self):
        result = classify({"title": "tickInterval", "pointSet": {"16": 3, "17": 1}})

        assert result == GeneralMetric("tickInterval", {"16": 3, "17": 1})

    @pytest.mark.parametrize(
        "title,slot",
        [
            ("tickOnTime", 0),
            ("tickIntervalOverrun", 1),
            ("tickIntervalUnderrun", 2),
        ],
    )
    def test_reserved_titles_become_tick_outcomes(self, title, slot):
        result = classify({"title": title, "count": 4})

        assert isinstance(result, TickOutcome)
        assert result.kind is TickOutcomeKind(title)
        assert result.slot == slot
        assert result.title == title
        assert result.count == 4

    def test_count_is_truncated(self):
        assert classify({"title": "tickOnTime", "count": 4.9}).count == 4

    def test_reserved_title_ignores_point_set(self):
        with pytest.raises(SchemaMismatch):
            classify({"title": "tickOnTime", "pointSet": {"1": 1}})

    @pytest.mark.parametrize("count", ["4", None, True, [4], {"n": 4}])
    def test_non_numeric_count(self, count):
        with pytest.raises(ValueCoercionError):
            classify({"title": "tickIntervalOverrun", "count": count})

    @pytest.mark.parametrize(
        "record",
        [
            {},
            {"pointSet": {"1": 1}},
            {"title": 5, "pointSet": {"1": 1}},
            {"title": None, "count": 1},
            {"title": "foo"},
            {"title": "foo", "pointSet": [1, 2]},
            {"title": "foo", "pointSet": "1=1"},
            {"title": "foo", "count": 3},
        ],
    )
    def test_schema_mismatch(self, record):
        with pytest.raises(SchemaMismatch):
            classify(record)

    def test_point_values_are_not_checked_here(self):
        result = classify({"title": "foo", "pointSet": {"1": "x"}})

        assert result == GeneralMetric("foo", {"1": "x"})
