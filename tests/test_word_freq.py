import pytest

from tokenizer import tokenize
from word_freq import count_words, describe_counts, to_frame


def test_counts_in_first_seen_order():
    freqs = count_words(tokenize("the cat sat on the mat the cat sat"))
    assert freqs == {"the": 3, "cat": 2, "sat": 2, "on": 1, "mat": 1}
    assert list(freqs) == ["the", "cat", "sat", "on", "mat"]


def test_counts_accept_any_iterable():
    assert count_words(iter(["b", "a", "b"])) == {"b": 2, "a": 1}
    assert count_words([]) == {}


def test_to_frame_keeps_order():
    df = to_frame({"b": 2, "a": 1})
    assert list(df.columns) == ["word", "occurrence"]
    assert df["word"].tolist() == ["b", "a"]
    assert df["occurrence"].tolist() == [2, 1]


def test_to_frame_empty():
    df = to_frame({})
    assert list(df.columns) == ["word", "occurrence"]
    assert len(df) == 0


def test_describe_counts():
    stats = describe_counts({"the": 3, "cat": 2, "sat": 2, "on": 1, "mat": 1})
    assert stats["count"] == 5
    assert stats["total"] == 9
    assert stats["min"] == 1
    assert stats["max"] == 3
    assert stats["mean"] == pytest.approx(1.8)
    assert stats["p50"] == pytest.approx(2.0)
    assert stats["p90"] == pytest.approx(2.6)


def test_describe_counts_empty():
    assert describe_counts({}) == {"count": 0}
