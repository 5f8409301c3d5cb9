import pytest

from bignumkit.convert import to_bytes
from bignumkit.encoding import deserialize, serialize
from bignumkit.sampling import sample


@pytest.mark.parametrize("number", [0, sample(1024)])
def test_serializes_deserializes(number):
    encoded = serialize(number, False)
    assert encoded == to_bytes(number)
    assert deserialize(encoded) == number


def test_zero_serializes_to_single_byte():
    assert serialize(0, False) == b"\x00"
    assert serialize(0, True) == "00"


def test_deserializes_bigint_represented_as_seq():
    number = sample(1024)
    values = list(to_bytes(number))
    assert deserialize(values) == number


def test_serializes_deserializes_in_human_readable_format():
    number = sample(1024)
    encoded = serialize(number, True)
    assert encoded == to_bytes(number).hex()
    assert deserialize(encoded) == number


def test_pinned_encodings():
    assert serialize(1_000_000, False) == b"\x0f\x42\x40"
    assert serialize(1_000_000, True) == "0f4240"
    assert deserialize("0F4240") == 1_000_000
    assert deserialize(bytearray(b"\x0f\x42\x40")) == 1_000_000


def test_negative_numbers_serialize_by_magnitude():
    assert serialize(-31, False) == b"\x1f"


@pytest.mark.parametrize("text", ["f4240", "zz", "0f 42"])
def test_malformed_hex_raises(text):
    with pytest.raises(ValueError, match="malformed hex encoding"):
        deserialize(text)


def test_sequence_with_out_of_range_value_raises():
    with pytest.raises(ValueError):
        deserialize([1, 256])


def test_unsupported_type_raises():
    with pytest.raises(TypeError):
        deserialize(3.5)