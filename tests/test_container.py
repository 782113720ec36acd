import pytest

from orderbag.container import Container


def make_readme():
    return Container([7, 15, 6, 1, 2])


def test_default_is_empty():
    assert len(Container()) == 0
    assert list(Container()) == []


def test_add_increases_size():
    container = Container()
    container.add(5)
    assert len(container) == 1
    container.add(10)
    container.add(15)
    assert len(container) == 3


def test_add_keeps_duplicates():
    container = Container()
    for _ in range(3):
        container.add(5)
    assert len(container) == 3
    assert list(container) == [5, 5, 5]


def test_str_formats():
    assert str(Container()) == "{}"
    assert str(Container([1, 2, 3])) == "{1, 2, 3}"
    assert str(Container(["hello", "world"])) == "{hello, world}"


def test_remove_existing():
    container = Container([1, 2, 3])
    container.remove(2)
    assert len(container) == 2
    assert 2 not in list(container)


def test_remove_all_occurrences():
    container = Container([1, 2, 2, 3, 2])
    container.remove(2)
    assert len(container) == 2
    assert list(container) == [1, 3]


def test_remove_missing_raises():
    container = Container([1, 2])
    with pytest.raises(ValueError, match="does not exist"):
        container.remove(99)
    assert len(container) == 2


def test_remove_from_empty_raises():
    with pytest.raises(ValueError):
        Container().remove(1)


def test_remove_then_remove_again_raises():
    container = make_readme()
    container.add(2)
    container.add(2)
    assert str(container) == "{7, 15, 6, 1, 2, 2, 2}"
    container.remove(2)
    assert str(container) == "{7, 15, 6, 1}"
    with pytest.raises(ValueError):
        container.remove(2)


def test_large_container_remove():
    container = Container(i % 10 for i in range(100))
    assert len(container) == 100
    container.remove(5)
    assert len(container) == 90
    assert 5 not in list(container)
    result = list(container.ascending_order())
    assert len(result) == 90
    assert all(a <= b for a, b in zip(result, result[1:]))


def test_copy_is_independent():
    original = Container([1, 2])
    duplicate = original.copy()
    original.add(3)
    assert len(original) == 3
    assert len(duplicate) == 2
    assert list(duplicate.order()) == [1, 2]


def test_copy_of_source_unaffected_by_later_changes():
    first = Container([1, 2])
    second = Container([99, 88, 77])
    second = first.copy()
    assert len(second) == 2
    first.add(3)
    assert len(second) == 2


def test_iteration_is_insertion_order():
    assert list(make_readme()) == [7, 15, 6, 1, 2]


def test_order_methods():
    container = make_readme()
    assert list(container.order()) == [7, 15, 6, 1, 2]
    assert list(container.ascending_order()) == [1, 2, 6, 7, 15]
    assert list(container.descending_order()) == [15, 7, 6, 2, 1]
    assert list(container.reverse_order()) == [2, 1, 6, 15, 7]
    assert list(container.side_cross_order()) == [1, 15, 2, 7, 6]
    assert list(container.middle_out_order()) == [6, 15, 1, 7, 2]


def test_orders_on_empty_container_are_empty():
    container = Container()
    assert list(container.order()) == []
    assert list(container.ascending_order()) == []
    assert list(container.descending_order()) == []
    assert list(container.reverse_order()) == []
    assert list(container.side_cross_order()) == []
    assert list(container.middle_out_order()) == []


def test_order_iterators_from_same_container_compare_equal():
    container = Container([1, 2])
    assert (container.order() == container.order()) is True
    assert (container.side_cross_order() == container.side_cross_order()) is True
    assert (container.middle_out_order() == container.middle_out_order()) is True
    advanced = container.order()
    assert next(advanced) == 1
    assert (advanced == container.order()) is False


def test_string_container():
    container = Container(["hello", "world", "test"])
    assert len(container) == 3
    container.remove("world")
    assert len(container) == 2
    assert list(container) == ["hello", "test"]


def test_string_remove_duplicates():
    container = Container(["apple", "zebra", "banana", "cherry", "date"])
    container.add("apple")
    container.add("apple")
    assert len(container) == 7
    container.remove("apple")
    assert len(container) == 4
    assert "apple" not in list(container)


def test_double_container():
    container = Container([3.14, 2.71, 1.41])
    container.remove(2.71)
    assert len(container) == 2
    assert list(container.ascending_order()) == [1.41, 3.14]


def test_double_ascending_order():
    container = Container([3.14, 1.41, 2.71])
    result = list(container.ascending_order())
    assert result[0] == pytest.approx(1.41)
    assert result[1] == pytest.approx(2.71)
    assert result[2] == pytest.approx(3.14)


def test_repr_round_trips_items():
    container = Container([1, "a"])
    assert repr(container) == "Container([1, 'a'])"