import pytest

from noname.span import Sources, Span


def test_default_span_is_zeroed_and_empty():
    span = Span()
    assert (span.filename_id, span.start, span.length) == (0, 0, 0)
    assert span.is_empty()


def test_is_empty_depends_on_start_only():
    assert Span(3, 0, 10).is_empty()
    assert not Span(3, 1, 0).is_empty()


def test_end_is_past_start():
    span = Span(0, 4, 6)
    assert span.end() >= span.start
    assert Span(0, 4, 0).end() == span.start


def test_merge_covers_both_spans():
    first = Span(1, 2, 3)
    second = Span(1, 10, 4)
    merged = first.merge_with(second)
    assert merged.filename_id == first.filename_id
    assert merged.start == first.start
    assert merged.end() == second.end()


def test_merge_with_itself_is_identity():
    span = Span(2, 7, 5)
    assert span.merge_with(span) == span


def test_merge_rejects_different_files():
    with pytest.raises(ValueError):
        Span(0, 1, 1).merge_with(Span(1, 5, 1))


def test_merge_rejects_span_ending_before_start():
    with pytest.raises(ValueError):
        Span(0, 20, 1).merge_with(Span(0, 2, 1))


def test_spans_order_by_file_then_start():
    spans = [Span(1, 0, 1), Span(0, 9, 1), Span(0, 3, 1)]
    assert sorted(spans) == [Span(0, 3, 1), Span(0, 9, 1), Span(1, 0, 1)]


def test_spans_are_hashable():
    assert len({Span(0, 1, 2), Span(0, 1, 2)}) == 1


def test_sources_has_builtin_entry():
    sources = Sources()
    assert sources.get(0) == ("<BUILTIN>", "<SEE NONAME CODE>")


def test_sources_add_and_get_round_trip():
    sources = Sources()
    first = sources.add("a.no", "fn main() {}")
    second = sources.add("b.no", "fn other() {}")
    assert first != 0
    assert second > first
    assert sources.get(first) == ("a.no", "fn main() {}")
    assert sources.get(second) == ("b.no", "fn other() {}")


def test_sources_get_unknown_returns_none():
    sources = Sources()
    assert sources.get(42) is None