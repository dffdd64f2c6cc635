import struct

import pytest

from kbase.pickle import Pickle, PickleReader


def test_new_pickle_is_empty():
    pickle = Pickle()
    assert pickle.payload_empty()
    assert pickle.payload_size() == 0
    assert pickle.size() == 4
    assert pickle.data() == b"\x00\x00\x00\x00"


def test_size_is_header_plus_payload():
    pickle = Pickle()
    pickle.write_int32(7).write_string("hello")
    assert pickle.size() == len(pickle.data())
    assert pickle.size() == 4 + pickle.payload_size()
    assert pickle.data()[4:] == pickle.payload()


def test_segments_are_padded_to_four_bytes():
    pickle = Pickle()
    pickle.write_int8(1)
    pickle.write_int32(2)
    assert pickle.payload_size() == 8
    assert pickle.payload()[1:4] == bytes(3)
    assert struct.unpack_from("<i", pickle.payload(), 4)[0] == 2


def test_last_segment_is_not_padded():
    pickle = Pickle()
    pickle.write_int32(1)
    pickle.write_int8(2)
    assert pickle.payload_size() == 5


def test_header_holds_payload_size():
    pickle = Pickle()
    pickle.write_double(2.5).write_bool(True)
    assert struct.unpack_from("<I", pickle.data())[0] == pickle.payload_size()


def test_builtin_round_trip():
    pickle = Pickle()
    (pickle.write_bool(True)
     .write_int8(-5)
     .write_uint8(200)
     .write_int16(-1234)
     .write_uint16(60000)
     .write_int32(-100000)
     .write_uint32(4000000000)
     .write_int64(-(1 << 40))
     .write_uint64((1 << 63) + 5)
     .write_float(1.5)
     .write_double(3.25)
     .write_bool(False))
    reader = PickleReader(pickle)
    assert reader.read_bool() is True
    assert reader.read_int8() == -5
    assert reader.read_uint8() == 200
    assert reader.read_int16() == -1234
    assert reader.read_uint16() == 60000
    assert reader.read_int32() == -100000
    assert reader.read_uint32() == 4000000000
    assert reader.read_int64() == -(1 << 40)
    assert reader.read_uint64() == (1 << 63) + 5
    assert reader.read_float() == 1.5
    assert reader.read_double() == 3.25
    assert reader.read_bool() is False
    assert not reader


@pytest.mark.parametrize("text", ["", "abc", "héllo wörld", "日本語", "emoji \U0001F600"])
def test_string_round_trip(text):
    pickle = Pickle()
    pickle.write_string(text).write_wstring(text).write_int32(9)
    reader = PickleReader(pickle)
    assert reader.read_string() == text
    assert reader.read_wstring() == text
    assert reader.read_int32() == 9
    assert not reader


def test_string_stores_length_then_bytes():
    pickle = Pickle()
    pickle.write_string("abc")
    payload = pickle.payload()
    assert struct.unpack_from("<Q", payload)[0] == len("abc")
    assert payload[8:] == b"abc"


def test_wstring_uses_four_byte_units():
    pickle = Pickle()
    pickle.write_wstring("ab")
    assert pickle.payload_size() == 8 + 2 * 4
    assert struct.unpack_from("<Q", pickle.payload())[0] == len("ab")


def test_raw_bytes_round_trip():
    pickle = Pickle()
    pickle.write_bytes(b"xyz").write_uint16(77)
    reader = PickleReader(pickle)
    assert reader.read_bytes(3) == b"xyz"
    assert reader.read_uint16() == 77


def test_list_round_trip():
    values = [3, -1, 42, 0]
    pickle = Pickle()
    pickle.write_list(values, pickle.write_int32)
    reader = PickleReader(pickle)
    assert reader.read_list(reader.read_int32) == values
    assert not reader


def test_nested_list_and_strings_round_trip():
    nested = [["a", "bc"], [], ["déf"]]
    pickle = Pickle()
    pickle.write_list(nested, lambda inner: pickle.write_list(inner, pickle.write_string))
    reader = PickleReader(pickle)
    result = reader.read_list(lambda: reader.read_list(reader.read_string))
    assert result == nested


def test_pair_like_entries_round_trip():
    mapping = {"one": 1, "two": 2}

    pickle = Pickle()

    def write_pair(item):
        key, value = item
        pickle.write_string(key).write_int64(value)

    pickle.write_list(sorted(mapping.items()), write_pair)
    reader = PickleReader(pickle)
    pairs = reader.read_list(lambda: (reader.read_string(), reader.read_int64()))
    assert dict(pairs) == mapping


def test_reader_from_raw_bytes_matches_reader_from_pickle():
    pickle = Pickle()
    pickle.write_int16(-3).write_string("data").write_double(0.5)
    from_bytes = PickleReader(pickle.data())
    from_pickle = PickleReader(pickle)
    for reader in (from_bytes, from_pickle):
        assert reader.read_int16() == -3
        assert reader.read_string() == "data"
        assert reader.read_double() == 0.5
        assert not reader


def test_pickle_rebuilt_from_data_keeps_content():
    original = Pickle()
    original.write_uint32(12345).write_wstring("wide")
    copy = Pickle(original.data())
    assert copy.data() == original.data()
    copy.write_int8(1)
    assert copy.payload_size() > original.payload_size()
    clone = Pickle(original)
    assert clone.data() == original.data()


def test_pickle_rebuilt_ignores_trailing_bytes():
    original = Pickle()
    original.write_int32(5)
    rebuilt = Pickle(original.data() + b"\xff\xff")
    assert rebuilt.data() == original.data()


def test_skip_data_skips_padding():
    pickle = Pickle()
    pickle.write_int8(9).write_int32(31)
    reader = PickleReader(pickle)
    reader.skip_data(1)
    assert reader.read_int32() == 31


def test_reader_empty_on_empty_pickle():
    assert not PickleReader(Pickle())


def test_reading_past_end_raises():
    pickle = Pickle()
    pickle.write_int8(1)
    reader = PickleReader(pickle)
    assert reader.read_int8() == 1
    with pytest.raises(EOFError):
        reader.read_int32()


def test_read_bytes_requires_positive_size():
    pickle = Pickle()
    pickle.write_int32(1)
    with pytest.raises(ValueError):
        PickleReader(pickle).read_bytes(0)


def test_write_empty_bytes_rejected():
    with pytest.raises(ValueError):
        Pickle().write_bytes(b"")


def test_out_of_range_values_rejected():
    pickle = Pickle()
    with pytest.raises(ValueError):
        pickle.write_uint8(256)
    with pytest.raises(ValueError):
        pickle.write_int16(-40000)
    with pytest.raises(ValueError):
        pickle.write_uint64(-1)
    assert pickle.payload_empty()


def test_invalid_source_data_rejected():
    with pytest.raises(ValueError):
        Pickle(b"")
    with pytest.raises(ValueError):
        Pickle(b"\x01\x00")
    with pytest.raises(ValueError):
        Pickle(struct.pack("<I", 10) + b"\x00")
    with pytest.raises(ValueError):
        PickleReader(b"\x00")