import pytest

from collectkit.bloom_filter import MAX_FUNCTIONS, BloomFilter


def string_hash(text):
    result = 5381
    for ch in text.encode():
        result = ((result << 5) + result + ch) & 0xFFFFFFFF
    return result


def other_hash(text):
    return len(text)


def test_function_limit_matches_constant():
    f = BloomFilter(128, string_hash, MAX_FUNCTIONS)
    f.insert("test 1")
    assert f.query("test 1") is True
    with pytest.raises(ValueError):
        BloomFilter(128, string_hash, MAX_FUNCTIONS + 1)


def test_too_many_functions_rejected():
    with pytest.raises(ValueError):
        BloomFilter(128, string_hash, 65)


def test_max_functions_accepted():
    f = BloomFilter(128, string_hash, 64)
    f.insert("test 1")
    assert f.query("test 1") is True


def test_zero_table_size_rejected():
    with pytest.raises(ValueError):
        BloomFilter(0, string_hash, 4)


def test_empty_filter_has_nothing():
    f = BloomFilter(128, string_hash, 4)
    assert f.query("test 1") is False
    assert "test 2" not in f


def test_insert_then_query():
    f = BloomFilter(128, string_hash, 4)
    f.insert("test 1")
    f.insert("test 2")
    assert f.query("test 1")
    assert "test 2" in f


def test_negative_hash_values_work():
    f = BloomFilter(64, lambda value: -1, 8)
    f.insert("anything")
    assert f.query("anything")


@pytest.mark.parametrize("table_size,expected", [(1, 1), (8, 1), (9, 2), (16, 2), (17, 3)])
def test_read_length(table_size, expected):
    f = BloomFilter(table_size, string_hash, 4)
    assert len(f.read()) == expected


def test_read_empty_is_zero():
    f = BloomFilter(64, string_hash, 4)
    assert f.read() == bytes(8)


def test_read_load_round_trip():
    f1 = BloomFilter(128, string_hash, 10)
    f1.insert("test 1")
    f1.insert("test 2")
    data = f1.read()

    f2 = BloomFilter(128, string_hash, 10)
    f2.load(data)
    assert f2.read() == data
    assert "test 1" in f2
    assert "test 2" in f2


def test_load_short_data_rejected():
    f = BloomFilter(128, string_hash, 4)
    with pytest.raises(ValueError):
        f.load(b"\x00")


def test_union_contains_both():
    f1 = BloomFilter(128, string_hash, 4)
    f2 = BloomFilter(128, string_hash, 4)
    f1.insert("test 1")
    f2.insert("test 2")
    result = f1.union(f2)
    assert "test 1" in result
    assert "test 2" in result
    assert result.read() == bytes(a | b for a, b in zip(f1.read(), f2.read()))


def test_intersection_contains_common():
    f1 = BloomFilter(128, string_hash, 4)
    f2 = BloomFilter(128, string_hash, 4)
    f1.insert("test 1")
    f1.insert("shared")
    f2.insert("test 2")
    f2.insert("shared")
    result = f1.intersection(f2)
    assert "shared" in result
    assert result.read() == bytes(a & b for a, b in zip(f1.read(), f2.read()))


def test_union_does_not_modify_operands():
    f1 = BloomFilter(128, string_hash, 4)
    f2 = BloomFilter(128, string_hash, 4)
    f2.insert("test 2")
    before = f1.read()
    f1.union(f2)
    assert f1.read() == before


@pytest.mark.parametrize("other", [
    BloomFilter(64, string_hash, 4),
    BloomFilter(128, string_hash, 5),
    BloomFilter(128, other_hash, 4),
])
def test_mismatched_parameters_rejected(other):
    f = BloomFilter(128, string_hash, 4)
    with pytest.raises(ValueError):
        f.union(other)
    with pytest.raises(ValueError):
        f.intersection(other)


def test_zero_functions_accepts_everything():
    f = BloomFilter(16, string_hash, 0)
    assert f.query("never inserted") is True
    assert f.read() == bytes(2)