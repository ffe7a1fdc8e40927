from dataclasses import dataclass, field

import pytest

from keyid.collection import Collection


@dataclass
class _Item:
    id: str
    value: int = field(default=0, compare=False)


def test_constructor_keeps_duplicates():
    collection = Collection(1, 2, 2)
    assert len(collection) == 3
    assert collection.items() == [1, 2, 2]


def test_add_skips_equal_items():
    collection = Collection()
    collection.add(_Item("a", 1))
    collection.add(_Item("a", 2))
    collection.add(_Item("b", 3))
    assert [item.id for item in collection] == ["a", "b"]
    assert collection.first().value == 1


def test_contains_uses_equality():
    collection = Collection(_Item("x", 1))
    assert _Item("x", 99) in collection
    assert _Item("y") not in collection


def test_remove_present_and_absent():
    collection = Collection(1, 2, 3)
    assert collection.remove(2) == 2
    assert collection.items() == [1, 3]
    assert collection.remove(7) == 7
    assert collection.items() == [1, 3]


def test_move_to():
    source = Collection(1, 2)
    target = Collection(3)
    source.move_to(2, target)
    assert source.items() == [1]
    assert target.items() == [3, 2]


def test_map_and_filter_return_new_collections():
    collection = Collection(1, 2, 3, 4)
    doubled = collection.map(lambda i: i * 2)
    evens = collection.filter(lambda i: i % 2 == 0)
    assert doubled.items() == [2, 4, 6, 8]
    assert evens.items() == [2, 4]
    assert collection.items() == [1, 2, 3, 4]


def test_reduce_order_and_empty():
    assert Collection("a", "b", "c").reduce(lambda item, acc: acc + item) == "abc"
    assert Collection(5).reduce(lambda item, acc: acc + item) == 5
    with pytest.raises(ValueError):
        Collection().reduce(lambda item, acc: acc)


def test_first_last_get():
    empty = Collection()
    assert empty.is_empty()
    assert empty.first() is None
    assert empty.last() is None
    collection = Collection("a", "b", "c")
    assert not collection.is_empty()
    assert collection.first() == "a"
    assert collection.last() == "c"
    assert collection.get(1) == "b"
    assert collection.get(-1) is None
    assert collection.get(3) is None


def test_index_of_and_find():
    collection = Collection("a", "b", "c")
    assert collection.index_of("c") == 2
    assert collection.index_of("z") == -1
    assert collection.find(lambda s: s > "a") == "b"
    assert collection.find(lambda s: s > "z") is None
    assert collection.find_index(lambda s: s > "a") == 1
    assert collection.find_index(lambda s: s > "z") == -1


def test_sort_with_sorts_and_dedupes():
    collection = Collection(3, 1, 2, 3)
    result = collection.sort_with(lambda a, b: a < b)
    assert result.items() == [1, 2, 3]
    assert collection.items() == [3, 1, 2, 3]


def test_shuffle_preserves_items():
    values = list(range(50))
    collection = Collection(*values)
    collection.shuffle()
    assert sorted(collection.items()) == values
    assert len(collection) == len(values)


def test_items_is_a_copy():
    collection = Collection(1, 2)
    snapshot = collection.items()
    snapshot.append(3)
    assert collection.items() == [1, 2]