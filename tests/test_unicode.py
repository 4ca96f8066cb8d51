import pytest

from akrt.unicode import code_point_to_utf8


@pytest.mark.parametrize(
    "code_point", [0, 0x41, 0x7F, 0x80, 0x7FF, 0x800, 0x20AC, 0xFFFF, 0x10000, 0x1F600, 0x10FFFF]
)
def test_matches_standard_encoding(code_point):
    assert code_point_to_utf8(code_point) == chr(code_point).encode("utf-8")


@pytest.mark.parametrize(
    "code_point,length", [(0x7F, 1), (0x80, 2), (0x7FF, 2), (0x800, 3), (0xFFFF, 3), (0x10000, 4)]
)
def test_length_boundaries(code_point, length):
    assert len(code_point_to_utf8(code_point)) == length


def test_euro_sign():
    assert code_point_to_utf8(0x20AC) == b"\xe2\x82\xac"


def test_surrogates_are_encoded():
    assert code_point_to_utf8(0xD800) == chr(0xD800).encode("utf-8", "surrogatepass")


def test_round_trip_decodes():
    for code_point in range(0, 0x3000, 37):
        assert code_point_to_utf8(code_point).decode("utf-8") == chr(code_point)


@pytest.mark.parametrize("code_point", [0x110000, -1])
def test_out_of_range_rejected(code_point):
    with pytest.raises(ValueError):
        code_point_to_utf8(code_point)