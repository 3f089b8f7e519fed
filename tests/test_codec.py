import pytest

from fuelsync.codec import U64_MAX, hex_encode, u64_to_widened_i64, widened_i64_to_u64, u64_to_bigint, \
    parse_u64, digit_string_to_u64, u64_to_digit_string, is_i64


U64_SAMPLES = [0, 1, 255, 2 ** 32, 9999999999, 2 ** 63 - 1, 2 ** 63, 2 ** 64 - 2, U64_MAX]


@pytest.mark.parametrize('u', U64_SAMPLES)
def test_digit_string_round_trip(u):
    assert digit_string_to_u64(u64_to_digit_string(u)) == u


def test_digit_string_rendering():
    assert u64_to_digit_string(U64_MAX) == '18446744073709551615'
    assert u64_to_digit_string(0) == '0'


@pytest.mark.parametrize('s', ['', 'abc', '-1', '1.5', ' 12', '0x10', '18446744073709551616'])
def test_lenient_parse_falls_back_to_zero(s):
    assert digit_string_to_u64(s) == 0


@pytest.mark.parametrize('s', ['', 'abc', '-1', '18446744073709551616'])
def test_strict_parse_rejects_invalid_input(s):
    with pytest.raises(ValueError):
        parse_u64(s)


def test_strict_parse():
    assert parse_u64('18446744073709551615') == U64_MAX
    assert parse_u64('007') == 7


def test_widened_i64():
    assert u64_to_widened_i64(0) == 0
    assert u64_to_widened_i64(2 ** 63 - 1) == 2 ** 63 - 1
    assert u64_to_widened_i64(2 ** 63) == -2 ** 63
    assert u64_to_widened_i64(U64_MAX) == -1


@pytest.mark.parametrize('u', U64_SAMPLES)
def test_widened_sign(u):
    i = u64_to_widened_i64(u)
    if u >= 2 ** 63:
        assert i < 0
    else:
        assert i == u
    assert widened_i64_to_u64(i) == u


def test_bigint_keeps_full_range():
    assert u64_to_bigint(U64_MAX) == 18446744073709551615
    assert u64_to_bigint(2 ** 63) == 9223372036854775808


def test_hex_encode():
    assert hex_encode(bytes([0xAB, 0x01, 0xFF])) == 'ab01ff'
    assert hex_encode(b'') == ''
    assert len(hex_encode(bytes(32))) == 64


def test_is_i64():
    assert is_i64(0)
    assert is_i64(-2 ** 63)
    assert is_i64(2 ** 63 - 1)
    assert not is_i64(2 ** 63)
    assert not is_i64(-2 ** 63 - 1)
    assert not is_i64('5')
    assert not is_i64(5.0)
    assert not is_i64(True)
