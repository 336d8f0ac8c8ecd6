import hypothesis.strategies as st
from hypothesis import given
from returns.result import Failure, Success

from hashset import EntryDoesNotExistError, EntryExistsAlreadyError, HashSet

from .strategies import items, operations


def key(item):
    return item.id, item.sub


@given(operations())
def test_matches_builtin_set(operations):
    hash_set = HashSet()
    expected = {}

    for operation, item in operations:
        if operation == "add":
            match hash_set.add(item):
                case Success(None):
                    assert key(item) not in expected
                    expected[key(item)] = item
                case Failure(EntryExistsAlreadyError(entry)):
                    assert entry is item
                    assert key(item) in expected
                case _:
                    raise RuntimeError("Unexpected result")
        else:
            match hash_set.remove(item):
                case Success(None):
                    del expected[key(item)]
                case Failure(EntryDoesNotExistError(entry)):
                    assert entry is item
                    assert key(item) not in expected
                case _:
                    raise RuntimeError("Unexpected result")

        assert hash_set.size() == len(expected)
        assert hash_set.is_empty() == (len(expected) == 0)

    assert sorted(map(key, hash_set.to_list())) == sorted(expected)


@given(st.lists(items))
def test_add_twice_fails(added):
    hash_set = HashSet(*added)
    size = hash_set.size()
    for item in added:
        assert isinstance(hash_set.add(item), Failure)
    assert hash_set.size() == size


@given(st.lists(items), items)
def test_add_then_remove_restores_size(added, item):
    hash_set = HashSet(*added)
    size = hash_set.size()
    if hash_set.add(item) == Success(None):
        assert hash_set.remove(item) == Success(None)
        assert hash_set.size() == size
        assert not hash_set.contains(item)
    assert isinstance(hash_set.remove(item), Failure) or hash_set.size() == size - 1


@given(st.lists(items))
def test_to_list_is_complete(added):
    hash_set = HashSet(*added)
    snapshot = hash_set.to_list()
    assert len(snapshot) == hash_set.size()
    assert all(hash_set.contains(item) for item in snapshot)
    assert all(hash_set.contains(item) for item in added)


@given(st.lists(items), items)
def test_reads_do_not_mutate(added, item):
    hash_set = HashSet(*added)
    results = [(hash_set.contains(item), hash_set.size(), hash_set.is_empty()) for _ in range(3)]
    assert results[0] == results[1] == results[2]
