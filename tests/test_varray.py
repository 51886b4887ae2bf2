import pytest

from vitakit.varray import VArray


def cmp_int(a, b):
    return (a > b) - (a < b)


def cmp_key_to_pair(key, element):
    return cmp_int(key, element[0])


def cmp_pairs(a, b):
    return cmp_int(a[0], b[0])


def test_push_and_pop():
    va = VArray()
    va.push(1)
    va.push(2)
    assert list(va) == [1, 2]
    assert va.pop() == 2
    assert len(va) == 1


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        VArray().pop()


def test_insert_positions():
    va = VArray()
    va.push("b")
    va.insert(0, "a")
    va.insert(2, "c")
    assert list(va) == ["a", "b", "c"]


@pytest.mark.parametrize("index", [-1, 2])
def test_insert_out_of_range(index):
    va = VArray()
    va.push(1)
    with pytest.raises(IndexError):
        va.insert(index, 5)


def test_remove_returns_element_and_keeps_order():
    va = VArray()
    for value in (10, 20, 30, 40):
        va.push(value)
    assert va.remove(1) == 20
    assert list(va) == [10, 30, 40]
    assert va.remove(2) == 40
    assert list(va) == [10, 30]


def test_remove_out_of_range():
    va = VArray()
    va.push(1)
    with pytest.raises(IndexError):
        va.remove(1)


def test_push_none_uses_init_func():
    va = VArray(init_func=dict)
    element = va.push()
    assert element == {}
    assert va[0] is element


def test_init_func_failure_raises():
    va = VArray(init_func=lambda: None)
    with pytest.raises(ValueError):
        va.push()
    assert len(va) == 0


def test_index_of_uses_identity():
    first, second = [1], [1]
    va = VArray()
    va.push(first)
    va.push(second)
    assert va.index_of(second) == 1
    with pytest.raises(ValueError):
        va.index_of([1])


def test_sort():
    va = VArray(sort_compar=cmp_int)
    for value in (5, 3, 9, 1):
        va.push(value)
    va.sort()
    assert list(va) == [1, 3, 5, 9]


def test_sort_without_comparator_raises():
    va = VArray()
    va.push(1)
    with pytest.raises(ValueError):
        va.sort()


def test_sorted_insert_keeps_order():
    va = VArray(sort_compar=cmp_int)
    for value in (7, 2, 9, 4, 4):
        va.sorted_insert(value)
    assert list(va) == sorted([7, 2, 9, 4, 4])


def test_sorted_insert_rejects_duplicate():
    va = VArray(sort_compar=cmp_int)
    va.sorted_insert(3)
    assert va.sorted_insert(3, allow_dup=False) is None
    assert list(va) == [3]
    assert va.sorted_insert(4, allow_dup=False) == 4


def test_sorted_search_with_search_comparator():
    va = VArray(sort_compar=cmp_pairs, search_compar=cmp_key_to_pair)
    for pair in ((3, "c"), (1, "a"), (2, "b")):
        va.sorted_insert(pair)
    assert va.sorted_search(2) == (2, "b")
    assert va.sorted_search(7) is None


def test_sorted_search_or_insert():
    va = VArray(sort_compar=cmp_int, init_func=lambda: 0)
    va.sorted_insert(10)
    va.sorted_insert(30)
    element, found = va.sorted_search_or_insert(30)
    assert (element, found) == (30, True)
    element, found = va.sorted_search_or_insert(20)
    assert found is False
    assert len(va) == 3
    assert va[1] is element


def test_destroy_calls_hook():
    destroyed = []
    va = VArray(destroy_func=destroyed.append)
    va.push("x")
    va.push("y")
    va.destroy()
    assert destroyed == ["x", "y"]
    assert len(va) == 0


def test_extract_empties_without_destroying():
    destroyed = []
    va = VArray(destroy_func=destroyed.append)
    va.push(1)
    va.push(2)
    assert va.extract() == [1, 2]
    assert len(va) == 0
    assert destroyed == []
    assert va.extract() == []