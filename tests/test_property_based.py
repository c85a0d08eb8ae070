"""Property-based tests for core railkit functionality."""

from datetime import date

from hypothesis import given
from hypothesis import strategies as st

from railkit import Err, Ok, err, ok, sequence
from railkit.temporal import days_between, format, smart_parse
from railkit.tree import merge, parse, prune, serialize

# JSON-like trees
json_scalars = st.none() | st.booleans() | st.integers() | st.text(max_size=10)
json_trees = st.recursive(
    json_scalars,
    lambda children: st.lists(children, max_size=4)
    | st.dictionaries(st.text(max_size=5), children, max_size=4),
    max_leaves=20,
)
json_objects = st.dictionaries(st.text(max_size=5), json_trees, max_size=4)

results = st.integers().map(ok) | st.text(min_size=1).map(err)
dates = st.dates(min_value=date(1000, 1, 1), max_value=date(9999, 12, 31))


class TestResultLaws:
    @given(results)
    def test_map_identity(self, result):
        assert result.map(lambda x: x) == result

    @given(results)
    def test_map_composition(self, result):
        f = lambda x: x + 1  # noqa: E731
        g = lambda x: x * 2  # noqa: E731
        assert result.map(f).map(g) == result.map(lambda x: g(f(x)))

    @given(st.integers())
    def test_left_identity(self, value):
        f = lambda x: ok(x - 1) if x % 2 else err("even")  # noqa: E731
        assert ok(value).flat_map(f) == f(value)

    @given(results)
    def test_associativity(self, result):
        f = lambda x: ok(x * 3)  # noqa: E731
        g = lambda x: ok(x) if x % 2 == 0 else err(f"odd {x}")  # noqa: E731
        assert result.flat_map(f).flat_map(g) == result.flat_map(lambda x: f(x).flat_map(g))

    @given(st.lists(results))
    def test_sequence_reports_first_failure(self, items):
        failures = [r for r in items if r.is_err()]
        expected = failures[0] if failures else Ok([r.unwrap() for r in items])
        assert sequence(items) == expected

    @given(results)
    def test_exactly_one_side(self, result):
        assert result.is_ok() != result.is_err()
        assert isinstance(result, (Ok, Err))


class TestTreeProperties:
    @given(json_trees)
    def test_prune_is_idempotent(self, tree):
        once = prune(tree)
        assert prune(once) == once

    @given(json_objects)
    def test_merge_with_empty_overlay(self, tree):
        assert merge(tree, {}) == Ok(tree)

    @given(json_objects, json_objects)
    def test_overlay_keys_win(self, base, overlay):
        merged = merge(base, overlay).unwrap()
        assert set(merged) == set(base) | set(overlay)
        for key, value in overlay.items():
            if not (isinstance(value, dict) and isinstance(base.get(key), dict)):
                assert merged[key] == value

    @given(st.lists(st.integers() | st.text(max_size=10) | st.booleans()))
    def test_serialize_parse(self, values):
        assert serialize(values).flat_map(parse) == Ok(values)


class TestTemporalProperties:
    @given(dates, dates)
    def test_days_between_is_symmetric(self, a, b):
        assert days_between(a, b) == days_between(b, a) >= 0

    @given(dates)
    def test_iso_text_is_read_back(self, day):
        assert smart_parse(format(day, "yyyy-MM-dd")) == Ok(day)
