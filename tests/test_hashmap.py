import pytest
from hypothesis import given
from hypothesis import strategies as st

from baselib.hashing import siphash_64, splitmix64
from baselib.hashmap import (
    HASH_MAP_MIN_SIZE,
    HashMap,
    get_hash,
)

KEY_COUNT = 1000
KEY_SIZE = 16
KEY_SEED = 42


def _make_keys(count, key_size, seed):
    keys = []
    for i in range(count):
        value = splitmix64(i ^ seed)
        chunks = bytearray()
        if key_size <= 8:
            chunks += value.to_bytes(8, "little")[:key_size]
        else:
            v = value
            while len(chunks) < key_size:
                take = min(8, key_size - len(chunks))
                chunks += v.to_bytes(8, "little")[:take]
                v = splitmix64(v)
        keys.append(bytes(chunks))
    return keys


TEST_KEYS = _make_keys(KEY_COUNT, KEY_SIZE, KEY_SEED)


def _is_prime(n):
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


@pytest.fixture
def filled_map():
    m = HashMap(16)
    for i, key in enumerate(TEST_KEYS):
        m.insert(key, i)
    return m


def test_insertion():
    m = HashMap(16)
    words = ["never", "gonna", "give", "you", "up"]
    keys = [w.encode() + b"\0" for w in words]
    values = [(1, 1.0), (2, 2.0), (3, 3.0), (4, 4.0), (5, 5.0)]
    for key, value in zip(keys, values):
        m.insert(key, value)
    assert len(m) == 5
    for key, value in reversed(list(zip(keys, values))):
        entry = m.find(key)
        assert entry is not None
        assert entry.value == value
        assert entry.key == key


def test_resize_keeps_all_entries(filled_map):
    assert len(filled_map) == KEY_COUNT
    for i, key in enumerate(TEST_KEYS):
        entry = filled_map.find(key)
        assert entry is not None
        assert entry.value == i
    cap = filled_map.capacity
    assert cap > HASH_MAP_MIN_SIZE
    assert cap & (cap - 1) == 0
    assert len(filled_map) <= 2 * cap + 1


def test_iteration_forward_and_reverse(filled_map):
    assert [e.value for e in filled_map] == list(range(KEY_COUNT))
    assert [e.value for e in reversed(filled_map)] == list(range(KEY_COUNT - 1, -1, -1))


def test_removal_of_prime_indices(filled_map):
    removed = 0
    for i, key in enumerate(TEST_KEYS):
        if _is_prime(i):
            assert filled_map.remove(key) is True
            removed += 1
    assert len(filled_map) == KEY_COUNT - removed
    assert all(not _is_prime(e.value) for e in filled_map)
    assert all(not _is_prime(e.value) for e in reversed(filled_map))
    bucket_values = [e.value for bucket in filled_map.buckets() for e in bucket]
    assert len(bucket_values) == len(filled_map)
    assert all(not _is_prime(v) for v in bucket_values)
    assert sorted(bucket_values) == [e.value for e in filled_map]


def test_big_keys():
    m = HashMap(16)
    for i, key in enumerate(TEST_KEYS):
        big_key = bytes(key[j % KEY_SIZE] for j in range(64))
        entry = m.insert(big_key, (i,) * 8)
        assert entry.key == big_key
    assert len(m) == KEY_COUNT
    big = bytes(TEST_KEYS[7][j % KEY_SIZE] for j in range(64))
    assert m[big] == (7,) * 8


def test_replace_moves_entry_to_end():
    m = HashMap()
    m.insert(b"a", 1)
    m.insert(b"b", 2)
    m.insert(b"c", 3)
    entry = m.insert(b"a", 10)
    assert len(m) == 3
    assert entry.value == 10
    assert [e.key for e in m] == [b"b", b"c", b"a"]
    assert [e.key for e in reversed(m)] == [b"a", b"c", b"b"]
    assert m[b"a"] == 10


def test_replace_head_and_tail():
    m = HashMap()
    m.insert(b"x", 1)
    m.insert(b"x", 2)
    assert [(e.key, e.value) for e in m] == [(b"x", 2)]
    m.insert(b"y", 3)
    m.insert(b"y", 4)
    assert [(e.key, e.value) for e in m] == [(b"x", 2), (b"y", 4)]


def test_remove_missing_key():
    m = HashMap()
    m.insert(b"present", 1)
    assert m.remove(b"absent") is False
    assert len(m) == 1
    assert b"present" in m
    assert b"absent" not in m


def test_getitem_missing_raises():
    m = HashMap()
    m.insert(b"k", 1)
    assert m[b"k"] == 1
    with pytest.raises(KeyError):
        m[b"nothing"]
    assert b"nothing" not in m
    assert len(m) == 1


def test_find_missing_returns_none():
    m = HashMap()
    m.insert(b"k", 1)
    assert m.find(b"other") is None


def test_str_key_rejected():
    m = HashMap()
    with pytest.raises(TypeError):
        m.insert("text", 1)
    with pytest.raises(TypeError):
        m.insert(5, 1)


@pytest.mark.parametrize("size,expected", [(0, 16), (16, 16), (17, 32), (100, 128)])
def test_initial_capacity(size, expected):
    assert HashMap(size).capacity == expected


def test_explicit_resize_rehashes(filled_map):
    filled_map.resize(100)
    assert filled_map.capacity == 128
    for index, bucket in enumerate(filled_map.buckets()):
        for entry in bucket:
            assert get_hash(entry.key, filled_map._seed) & 127 == index
    assert all(filled_map[key] == i for i, key in enumerate(TEST_KEYS))


def test_expand_doubles_capacity():
    m = HashMap()
    m.insert(b"a", 1)
    m.expand()
    assert m.capacity == 2 * HASH_MAP_MIN_SIZE
    assert m[b"a"] == 1


def test_shrinks_after_removals(filled_map):
    grown = filled_map.capacity
    for key in TEST_KEYS:
        filled_map.remove(key)
    assert len(filled_map) == 0
    assert list(filled_map) == []
    assert filled_map.capacity < grown
    assert filled_map.capacity >= HASH_MAP_MIN_SIZE


def test_load_factor():
    m = HashMap(16)
    for i in range(8):
        m.insert(bytes([i]), i)
    assert m.load_factor == 0.5


def test_get_hash_uses_siphash():
    assert get_hash(b"abc", (1, 2)) == siphash_64(b"abc", 1, 2)


def test_same_seed_same_layout():
    a = HashMap(seed=7)
    b = HashMap(seed=7)
    for key in TEST_KEYS[:50]:
        a.insert(key, 0)
        b.insert(key, 0)
    layout_a = [[e.key for e in bucket] for bucket in a.buckets()]
    layout_b = [[e.key for e in bucket] for bucket in b.buckets()]
    assert layout_a == layout_b


@given(
    st.lists(
        st.tuples(st.booleans(), st.binary(max_size=8), st.integers()),
        max_size=200,
    )
)
def test_matches_ordered_dict_model(ops):
    m = HashMap(seed=1)
    model = {}
    for is_insert, key, value in ops:
        if is_insert:
            m.insert(key, value)
            model.pop(key, None)
            model[key] = value
        else:
            assert m.remove(key) == (key in model)
            model.pop(key, None)
    assert len(m) == len(model)
    assert [(e.key, e.value) for e in m] == list(model.items())
    assert [(e.key, e.value) for e in reversed(m)] == list(reversed(list(model.items())))