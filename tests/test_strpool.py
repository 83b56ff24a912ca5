import pytest

from cmmtree.strpool import TABLE_SIZE, StringPool, hash_string


def test_single_ascii_chars_hash_to_their_code_within_table():
    for code in range(1, 128):
        value = hash_string(chr(code))
        assert value == code
        assert value < TABLE_SIZE


def test_hash_of_empty_string_is_zero():
    assert hash_string("") == 0


def test_hash_of_single_char_is_its_code():
    assert hash_string("a") == 97


@pytest.mark.parametrize(
    "name", ["x", "main", "counter", "a_very_long_identifier_name" * 10, "ünï"]
)
def test_hash_in_range_and_stable(name):
    value = hash_string(name)
    assert 0 <= value < TABLE_SIZE
    assert hash_string(name) == value


def test_lookup_returns_same_object_for_equal_strings():
    pool = StringPool()
    first = pool.lookup("".join(["fo", "o"]))
    second = pool.lookup("".join(["f", "oo"]))
    assert first == "foo"
    assert second is first


def test_lookup_distinct_strings():
    pool = StringPool()
    a = pool.lookup("alpha")
    b = pool.lookup("beta")
    assert a == "alpha" and b == "beta"
    assert len(pool) == 2


def test_repeated_lookup_does_not_grow_pool():
    pool = StringPool()
    for _ in range(5):
        pool.lookup("x")
    assert len(pool) == 1
    assert "x" in pool


def test_colliding_names_are_kept_apart():
    pool = StringPool()
    target = hash_string("a")
    colliding = next(
        chr(c) + chr(d)
        for c in range(33, 127)
        for d in range(33, 127)
        if hash_string(chr(c) + chr(d)) == target
    )
    assert pool.lookup("a") == "a"
    assert pool.lookup(colliding) == colliding
    assert len(pool) == 2
    assert "a" in pool and colliding in pool


def test_clear_empties_pool():
    pool = StringPool()
    pool.lookup("one")
    pool.lookup("two")
    pool.clear()
    assert len(pool) == 0
    assert "one" not in pool
    assert list(pool) == []


def test_iteration_lists_every_name():
    pool = StringPool()
    names = {"int", "bool", "main", "x"}
    for name in names:
        pool.lookup(name)
    assert set(pool) == names


def test_contains_rejects_non_strings():
    pool = StringPool()
    pool.lookup("1")
    assert 1 not in pool