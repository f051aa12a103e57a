"""FilterEngine tests: AND/OR combination and reversed result order."""

import logging

import pytest

from recordfilters.config.runtime import get_settings
from recordfilters.domain.engine import FilterEngine, filter_records
from recordfilters.domain.filter_set import FilterSet, Logic
from recordfilters.domain.filters import Filter, FilterKind


@pytest.fixture
def crew():
    return [
        {"hello": "world", "type": "human", "is": "Philip J. Fry"},
        {"hello": "world", "type": "robot", "is": "Bender Rodriguez"},
        {"hell": "world", "type": "human", "is": "Turanga Leila"},
        {"hello": "word", "type": "humanoid", "is": "R. Daneel Oliva"},
    ]


class TestEmptyFilterSet:
    """Empty AND keeps everything; empty OR keeps nothing."""

    def test_empty_and_returns_all_reversed(self, crew):
        assert filter_records(crew, FilterSet(logic=Logic.and_)) == list(reversed(crew))

    def test_empty_or_returns_nothing(self, crew):
        assert filter_records(crew, FilterSet(logic=Logic.or_)) == []

    def test_empty_data(self):
        fs = FilterSet().add_or_update(Filter.new(FilterKind.text, "is", "x"))
        assert filter_records([], fs) == []


class TestSingleKind:
    def test_text_filter(self):
        fs = FilterSet.new().add_or_update(Filter.new(FilterKind.text, "is", "liv"))
        data = [
            {"type": "human", "is": "Philip J. Fry"},
            {"type": "robot", "is": "Bender Rodriguez"},
            {"type": "human", "is": "Turanga Leila"},
            {"type": "robot", "is": "R. Daneel Oliva"},
            {"type": "drink", "is": "Martini with an olive"},
            {"type": "actions", "are": "eat, live, think"},
        ]
        assert filter_records(data, fs) == [
            {"type": "drink", "is": "Martini with an olive"},
            {"type": "robot", "is": "R. Daneel Oliva"},
        ]

    def test_text_filter_two_records(self):
        fs = FilterSet.new().add_or_update(Filter.new(FilterKind.text, "is", "liv"))
        data = [
            {"type": "human", "is": "Philip J. Fry"},
            {"type": "drink", "is": "Martini with an olive"},
        ]
        assert filter_records(data, fs) == [{"type": "drink", "is": "Martini with an olive"}]

    def test_enum_filter(self):
        fs = FilterSet.new().add_or_update(Filter.new(FilterKind.enum, "type", "human"))
        data = [
            {"type": "human", "is": "Philip J. Fry"},
            {"type": "robot", "is": "Bender Rodriguez"},
            {"type": "human", "is": "Turanga Leila"},
            {"type": "humanoid", "is": "R. Daneel Oliva"},
        ]
        assert filter_records(data, fs) == [
            {"type": "human", "is": "Turanga Leila"},
            {"type": "human", "is": "Philip J. Fry"},
        ]

    def test_date_range(self):
        fs = (
            FilterSet.new()
            .add_or_update(Filter.new(FilterKind.date_from, "birthday", "2042-11-12"))
            .add_or_update(Filter.new(FilterKind.date_to, "birthday", "2042-12-12"))
        )
        data = [
            {"birthday": "2042-12-11", "of": "Bender Rodriguez"},
            {"birthday": "2042-11-11", "of": "Philip J. Fry"},
            {"birthday": "2042-11-12", "of": "Turanga Leila"},
            {"birthday": "2042-11-13", "of": "Hubert Farnsworth"},
            {"birthday": "2042-12-12", "of": "Amy Wong"},
            {"birthday": "2042-12-13", "of": "Doctor Zoidberg"},
            {"birthday": "2042-12-12", "of": "Hermes Conrad"},
        ]
        assert filter_records(data, fs) == [
            {"birthday": "2042-12-12", "of": "Hermes Conrad"},
            {"birthday": "2042-12-12", "of": "Amy Wong"},
            {"birthday": "2042-11-13", "of": "Hubert Farnsworth"},
            {"birthday": "2042-11-12", "of": "Turanga Leila"},
            {"birthday": "2042-12-11", "of": "Bender Rodriguez"},
        ]


class TestCombination:
    def test_and_logic(self, crew):
        fs = (
            FilterSet.new()
            .add_or_update(Filter.new(FilterKind.enum, "type", "human"))
            .add_or_update(Filter.new(FilterKind.text, "is", "Leila"))
        )
        assert filter_records(crew, fs) == [
            {"hell": "world", "type": "human", "is": "Turanga Leila"},
        ]

    def test_or_logic(self, crew):
        fs = (
            FilterSet.new(Logic.or_)
            .add_or_update(Filter.new(FilterKind.enum, "type", "human"))
            .add_or_update(Filter.new(FilterKind.text, "is", "Bender"))
        )
        assert filter_records(crew, fs) == [
            {"hell": "world", "type": "human", "is": "Turanga Leila"},
            {"hello": "world", "type": "robot", "is": "Bender Rodriguez"},
            {"hello": "world", "type": "human", "is": "Philip J. Fry"},
        ]

    def test_matching_everything_reverses_input(self, crew):
        fs = FilterSet.new().add_or_update(Filter.new(FilterKind.text, "is", ""))
        assert filter_records(crew, fs) == list(reversed(crew))

    def test_accepts_any_iterable(self, crew):
        fs = FilterSet.new().add_or_update(Filter.new(FilterKind.enum, "type", "robot"))
        assert filter_records(iter(crew), fs) == [crew[1]]


class _CountingFilter:
    """Stand-in that records how often it is evaluated."""

    def __init__(self, result: bool) -> None:
        self.result = result
        self.calls = 0

    def matches(self, record) -> bool:
        self.calls += 1
        return self.result


class TestShortCircuit:
    def test_and_stops_at_first_miss(self):
        first, second = _CountingFilter(False), _CountingFilter(True)
        fs = FilterSet.model_construct(logic=Logic.and_, filters=(first, second))
        assert filter_records([{"a": 1}], fs) == []
        assert (first.calls, second.calls) == (1, 0)

    def test_or_stops_at_first_hit(self):
        first, second = _CountingFilter(True), _CountingFilter(False)
        fs = FilterSet.model_construct(logic=Logic.or_, filters=(first, second))
        assert filter_records([{"a": 1}], fs) == [{"a": 1}]
        assert (first.calls, second.calls) == (1, 0)


class TestFilterEngine:
    def test_preserve_order(self, crew):
        engine = FilterEngine(preserve_order=True)
        fs = FilterSet.new(Logic.or_, [Filter.new(FilterKind.enum, "type", "human")])
        assert engine.apply(crew, fs) == [crew[0], crew[2]]

    def test_default_order_comes_from_settings(self, crew, monkeypatch):
        monkeypatch.setenv("RECORDFILTERS_PRESERVE_INPUT_ORDER", "true")
        get_settings.cache_clear()
        try:
            assert FilterEngine().apply(crew, FilterSet()) == crew
        finally:
            get_settings.cache_clear()

    def test_reason_and(self, crew):
        engine = FilterEngine(preserve_order=False)
        fs = FilterSet.new(
            Logic.and_,
            [Filter.new(FilterKind.enum, "type", "human"), Filter.new(FilterKind.text, "is", "Leila")],
        )
        assert engine.reason(crew[2], fs) == "matched"
        assert engine.reason(crew[0], fs) == "rejected: text is"
        assert engine.reason(crew[1], fs) == "rejected: enum type"

    def test_reason_or(self, crew):
        engine = FilterEngine(preserve_order=False)
        fs = FilterSet.new(Logic.or_, [Filter.new(FilterKind.text, "is", "Bender")])
        assert engine.reason(crew[1], fs) == "matched"
        assert engine.reason(crew[0], fs) == "rejected: no filter matched"

    def test_evaluation_logged(self, crew, caplog):
        caplog.set_level(logging.DEBUG, logger="recordfilters")
        fs = FilterSet.new(Logic.and_, [Filter.new(FilterKind.enum, "type", "human")])
        filter_records(crew, fs)
        records = [r for r in caplog.records if r.getMessage() == "filter_evaluation"]
        assert len(records) == 1
        assert records[0].records_in == 4
        assert records[0].records_out == 2
        assert records[0].logic == "and"
