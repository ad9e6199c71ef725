from typing import Optional

EMPTY_BYTES = b''
MAX_INT = 2 ** 31 - 1

# Characters kept as-is by to_string_binary, everything else is hex escaped
_PRINTABLE = frozenset(
    b"0123456789"
    b"ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    b"abcdefghijklmnopqrstuvwxyz"
    b" `~!@#$%^&*()-_=+[]{}|;:'\",.<>/?"
)


def to_string_binary(value: Optional[bytes]) -> str:
    """
    Renders a byte string in a readable form, escaping non printable bytes as \\xHH.

    >>> to_string_binary(b'row\\x00')
    'row\\\\x00'
    """
    if value is None:
        return 'null'
    return ''.join(chr(b) if b in _PRINTABLE else f"\\x{b:02X}" for b in value)


def encode_bool(value: bool) -> bytes:
    return b'\xff' if value else b'\x00'


def decode_bool(value: bytes) -> bool:
    if len(value) != 1:
        raise ValueError(f"Expected a single byte boolean, got {len(value)} bytes")
    return value[0] != 0
