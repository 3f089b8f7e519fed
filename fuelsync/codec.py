"""Conversions between wire-native u64/bytes values and caller-facing ones.

Heights, indices and timestamps are "widened": the u64 bit pattern is
reinterpreted as a signed 64-bit integer. Amounts and registers keep their
exact unsigned value.
"""


U64_MAX = 2 ** 64 - 1

_I64_MAX = 2 ** 63 - 1

_I64_MIN = -2 ** 63


def hex_encode(data: bytes) -> str:
    return data.hex()


def is_i64(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and _I64_MIN <= value <= _I64_MAX


def u64_to_widened_i64(u: int) -> int:
    assert 0 <= u <= U64_MAX, f'not a u64 - {u}'
    if u > _I64_MAX:
        return u - 2 ** 64
    return u


def widened_i64_to_u64(i: int) -> int:
    assert _I64_MIN <= i <= _I64_MAX, f'not an i64 - {i}'
    if i < 0:
        return i + 2 ** 64
    return i


def u64_to_bigint(u: int) -> int:
    assert 0 <= u <= U64_MAX, f'not a u64 - {u}'
    return int(u)


def parse_u64(s: str) -> int:
    if not s.isascii() or not s.isdigit():
        raise ValueError(f'invalid u64 decimal string - {s!r}')
    u = int(s)
    if u > U64_MAX:
        raise ValueError(f'u64 overflow - {s}')
    return u


def digit_string_to_u64(s: str) -> int:
    """Lenient variant of :func:`parse_u64`.

    Unparseable input maps to ``0``. This is only meant for outbound register
    filters, other numeric paths must use the strict parser.
    """
    try:
        return parse_u64(s)
    except ValueError:
        return 0


def u64_to_digit_string(u: int) -> str:
    assert 0 <= u <= U64_MAX, f'not a u64 - {u}'
    return str(u)
