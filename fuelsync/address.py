import binascii

from .errors import InvalidAddress


ADDRESS_SIZE = 32


def strip_hex_prefix(s: str) -> str:
    if s[:2] == '0x':
        return s[2:]
    return s


def validate_address(address: str) -> bytes:
    hex_str = strip_hex_prefix(address)

    if len(hex_str) != ADDRESS_SIZE * 2:
        raise InvalidAddress(address, f'address must be {ADDRESS_SIZE * 2} hex characters')

    try:
        return binascii.unhexlify(hex_str)
    except (binascii.Error, ValueError) as e:
        raise InvalidAddress(address, f'failed to decode hex string: {e}')


def validate_addresses(addresses: list[str]) -> list[bytes]:
    return [validate_address(a) for a in addresses]
