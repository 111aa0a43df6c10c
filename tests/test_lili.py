import pytest

from pctoolkit.lili import LinkedList, RecordError


def _filled(*values):
    lst = LinkedList()
    for value in values:
        lst.record(value)
    return lst


def test_empty_play_returns_empty_marker():
    assert LinkedList().play() == "empty"


def test_empty_pop_returns_empty_marker():
    lst = LinkedList()
    assert lst.pop() == "empty"
    assert len(lst) == 0


def test_record_moves_cursor_to_head():
    lst = _filled("a", "b", "c")
    assert lst.play() == "c"
    assert lst.quant() == 3
    assert list(lst) == ["a", "b", "c"]


def test_reverse_and_forward_stop_at_ends():
    lst = _filled("a", "b")
    lst.reverse()
    lst.reverse()
    assert lst.play() == "a"
    lst.forward()
    lst.forward()
    assert lst.play() == "b"


def test_record_away_from_head_raises():
    lst = _filled("a", "b")
    lst.reverse()
    with pytest.raises(RecordError):
        lst.record("c")
    assert list(lst) == ["a", "b"]


def test_remove_only_entry_empties_list():
    lst = _filled("a")
    assert lst.remove() == "a"
    assert len(lst) == 0
    assert lst.play() == "empty"


def test_remove_tail_moves_to_new_tail():
    lst = _filled("a", "b", "c")
    lst.reverse()
    lst.reverse()
    assert lst.remove() == "a"
    assert lst.play() == "b"
    assert list(lst) == ["b", "c"]


def test_remove_head_moves_to_new_head():
    lst = _filled("a", "b", "c")
    assert lst.remove() == "c"
    assert lst.play() == "b"


def test_remove_middle_moves_back():
    lst = _filled("a", "b", "c")
    lst.reverse()
    assert lst.remove() == "b"
    assert lst.play() == "a"
    assert list(lst) == ["a", "c"]


def test_remove_on_empty_is_none():
    assert LinkedList().remove() is None


def test_clear_removes_everything():
    lst = _filled("a", "b", "c")
    lst.reverse()
    lst.clear()
    assert lst.quant() == 0
    assert lst.play() == "empty"


def test_replace_changes_target_only():
    lst = _filled("a", "b")
    lst.reverse()
    lst.replace("z")
    assert list(lst) == ["z", "b"]


def test_replace_on_empty_does_nothing():
    lst = LinkedList()
    lst.replace("x")
    assert len(lst) == 0


def test_push_appends_from_any_position():
    lst = _filled("a", "b")
    lst.reverse()
    lst.push("c")
    assert lst.play() == "c"
    assert list(lst) == ["a", "b", "c"]


def test_push_then_pop_round_trip():
    lst = LinkedList()
    for value in ["x", "y", "z"]:
        lst.push(value)
    assert [lst.pop(), lst.pop(), lst.pop()] == ["z", "y", "x"]
    assert lst.pop() == "empty"


def test_pop_leaves_cursor_on_new_head():
    lst = _filled("a", "b", "c")
    lst.reverse()
    lst.reverse()
    assert lst.pop() == "c"
    assert lst.play() == "b"