import pytest
from itertools import islice
from unittest.mock import MagicMock
from lipsum.models.word_stream import WordStream, join_words


class FixedRandom:
    """Random source that always returns the same draw."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.fixture
def cycle_transitions():
    """A chain where every state has exactly one successor: a b c a b c ..."""
    return {
        ("a", "b"): ["c"],
        ("b", "c"): ["a"],
        ("c", "a"): ["b"],
    }


@pytest.fixture
def split_transitions():
    """A chain whose two states do not lead to each other."""
    return {
        ("a", "b"): ["c"],
        ("x", "y"): ["z"],
    }


def test_stream_is_its_own_iterator(cycle_transitions):
    stream = WordStream(cycle_transitions, sorted(cycle_transitions), FixedRandom(0.0), ("a", "b"))
    assert iter(stream) is stream


def test_empty_chain_stream_is_exhausted():
    stream = WordStream({}, [], FixedRandom(0.0), ("", ""))
    with pytest.raises(StopIteration):
        next(stream)
    # Still exhausted on later calls
    with pytest.raises(StopIteration):
        next(stream)
    assert list(stream) == []


def test_stream_follows_known_states(cycle_transitions):
    stream = WordStream(cycle_transitions, sorted(cycle_transitions), FixedRandom(0.0), ("a", "b"))
    assert list(islice(stream, 7)) == ["a", "b", "c", "a", "b", "c", "a"]
    assert stream.state == ("b", "c")


def test_stream_never_terminates_on_its_own(cycle_transitions):
    stream = WordStream(cycle_transitions, sorted(cycle_transitions), FixedRandom(0.0), ("c", "a"))
    words = list(islice(stream, 1000))
    assert len(words) == 1000


def test_unknown_start_emits_first_word_then_jumps(split_transitions):
    # A draw of 0.0 always picks the first known state, ("a", "b")
    stream = WordStream(split_transitions, sorted(split_transitions), FixedRandom(0.0), ("q", "r"))
    assert next(stream) == "q"
    assert stream.state == ("b", "c")

    # ("b", "c") is not a state either, so the stream restarts at ("a", "b")
    assert next(stream) == "b"
    assert stream.state == ("b", "c")


def test_unknown_start_recovers_to_random_state(split_transitions):
    # A draw close to 1.0 picks the last known state, ("x", "y")
    stream = WordStream(split_transitions, sorted(split_transitions), FixedRandom(0.99), ("q", "r"))
    assert list(islice(stream, 3)) == ["q", "y", "y"]


def test_recovery_is_logged(split_transitions):
    mock_logger = MagicMock()
    stream = WordStream(split_transitions, sorted(split_transitions), FixedRandom(0.0), ("q", "r"),
                        logger=mock_logger)
    next(stream)

    mock_logger.debug.assert_called_once()
    metrics = mock_logger.debug.call_args.kwargs["extra"]["metrics"]
    assert metrics["unknown_state"] == ["q", "r"]
    assert metrics["new_state"] == ["a", "b"]


def test_join_words():
    assert join_words([]) == ""
    assert join_words(["Lorem"]) == "Lorem"
    assert join_words(["Lorem", "ipsum", "dolor"]) == "Lorem ipsum dolor"


def test_join_words_accepts_iterators():
    words = (word for word in ["sit", "amet,"])
    assert join_words(words) == "sit amet,"


def test_stream_without_known_states_is_exhausted():
    # Table filled after the stream captured an empty list of states
    stream = WordStream({("a", "b"): ["c"]}, [], FixedRandom(0.0), ("", ""))
    with pytest.raises(StopIteration):
        next(stream)
